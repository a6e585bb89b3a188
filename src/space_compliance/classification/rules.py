# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Ordered first-match-wins rule tables for risk and jurisdiction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from space_compliance.data.models import RiskLevel


@dataclass(frozen=True)
class RiskRule:
    """Assign *level* to any profile matching *predicate*."""

    name: str
    reason: str
    level: RiskLevel
    predicate: Callable[[Any], bool]

    def matches(self, subject: Any) -> bool:
        return bool(self.predicate(subject))


@dataclass(frozen=True)
class JurisdictionRule:
    """Assign jurisdiction *tag* to any subject matching *predicate*."""

    name: str
    reason: str
    tag: str
    predicate: Callable[[Any], bool]

    def matches(self, subject: Any) -> bool:
        return bool(self.predicate(subject))


RuleT = TypeVar("RuleT", RiskRule, JurisdictionRule)


class RuleTable(Generic[RuleT]):
    """Immutable ordered rule list evaluated first-match-wins.

    The last rule is the catch-all: it is returned when no earlier rule
    matches, whatever its own predicate says.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[RuleT, ...] | list[RuleT]) -> None:
        if not rules:
            raise ValueError("A rule table needs at least one rule")
        names = [r.name for r in rules]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate rule names: {', '.join(duplicates)}")
        self._rules = tuple(rules)

    def __iter__(self) -> Iterator[RuleT]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> RuleT:
        return self._rules[index]

    @property
    def names(self) -> list[str]:
        return [r.name for r in self._rules]

    def first_match(self, subject: Any) -> RuleT:
        for rule in self._rules[:-1]:
            if rule.matches(subject):
                return rule
        return self._rules[-1]
