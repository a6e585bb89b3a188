# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Named predicate combinators used when authoring a requirement corpus.

Each helper returns a plain callable ``profile -> bool`` with a readable
``__name__`` so corpus definitions and debug logs stay declarative::

    applies=all_of(flag("has_itar_items"), flag("has_foreign_nationals"))
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

Predicate = Callable[[Any], bool]


def _named(fn: Predicate, name: str) -> Predicate:
    fn.__name__ = name
    fn.__qualname__ = name
    return fn


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def always() -> Predicate:
    return _named(lambda profile: True, "always")


def flag(name: str) -> Predicate:
    """True when the boolean profile field *name* is set."""
    return _named(lambda profile: bool(getattr(profile, name, False)), name)


def not_(predicate: Predicate) -> Predicate:
    return _named(lambda profile: not predicate(profile), f"not({predicate.__name__})")


def all_of(*predicates: Predicate) -> Predicate:
    names = ", ".join(p.__name__ for p in predicates)
    return _named(
        lambda profile: all(p(profile) for p in predicates), f"all_of({names})"
    )


def any_of(*predicates: Predicate) -> Predicate:
    names = ", ".join(p.__name__ for p in predicates)
    return _named(
        lambda profile: any(p(profile) for p in predicates), f"any_of({names})"
    )


def company_type_in(*types: Any) -> Predicate:
    """True when any of the profile's company types is in *types*."""
    wanted = {_plain(t) for t in types}

    def check(profile: Any) -> bool:
        return any(_plain(t) in wanted for t in getattr(profile, "company_type", ()))

    return _named(check, f"company_type_in({', '.join(sorted(wanted))})")


def field_in(name: str, *values: Any) -> Predicate:
    """True when the scalar profile field *name* equals one of *values*."""
    wanted = {_plain(v) for v in values}

    def check(profile: Any) -> bool:
        return _plain(getattr(profile, name, None)) in wanted

    return _named(check, f"{name}_in({', '.join(sorted(map(str, wanted)))})")


def at_least(name: str, minimum: float) -> Predicate:
    """True when the numeric profile field *name* is set and >= *minimum*."""

    def check(profile: Any) -> bool:
        value = getattr(profile, name, None)
        return value is not None and value >= minimum

    return _named(check, f"{name}>={minimum}")


def non_empty(name: str) -> Predicate:
    """True when the sequence profile field *name* has any entries."""
    return _named(lambda profile: bool(getattr(profile, name, None)), f"{name}_present")
