# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Applicability resolution against a frozen requirement corpus."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from space_compliance.data.models import Profile, Requirement, RequirementCorpus

logger = logging.getLogger(__name__)

REGISTRATION_CATEGORY = "REGISTRATION"


class ApplicabilityResolver:
    """Select the requirements of a corpus that apply to one profile.

    Usage::

        resolver = ApplicabilityResolver(corpus)
        applicable = resolver.resolve(profile)

    *license_gates* maps a license type to an extra predicate that must hold
    before that type is reported as required, for license types that only
    some activities of an applicable requirement trigger.
    """

    def __init__(
        self,
        corpus: RequirementCorpus,
        license_gates: Mapping[str, Callable[[Any], bool]] | None = None,
    ) -> None:
        self.corpus = corpus
        self.license_gates = dict(license_gates or {})

    def resolve(self, profile: Profile) -> list[Requirement]:
        """Return every requirement whose predicate holds, in corpus order."""
        applicable = [req for req in self.corpus.requirements if req.is_applicable(profile)]
        logger.debug(
            "Resolved %d of %d %s requirements",
            len(applicable), len(self.corpus), self.corpus.domain,
        )
        return applicable

    def required_registrations(
        self, profile: Profile, applicable: list[Requirement] | None = None
    ) -> list[str]:
        if applicable is None:
            applicable = self.resolve(profile)
        names: list[str] = []
        for req in applicable:
            if req.category != REGISTRATION_CATEGORY or not req.registration_name:
                continue
            if req.registration_name not in names:
                names.append(req.registration_name)
        return names

    def required_license_types(
        self, profile: Profile, applicable: list[Requirement] | None = None
    ) -> list[str]:
        if applicable is None:
            applicable = self.resolve(profile)
        types: list[str] = []
        for req in applicable:
            for license_type in req.license_types:
                gate = self.license_gates.get(license_type)
                if gate is not None and not gate(profile):
                    continue
                if license_type not in types:
                    types.append(license_type)
        return types

    def evidence_by_category(
        self, profile: Profile, applicable: list[Requirement] | None = None
    ) -> dict[str, list[str]]:
        """Documentation required by the applicable set, grouped by category."""
        if applicable is None:
            applicable = self.resolve(profile)
        grouped: dict[str, list[str]] = {}
        for req in applicable:
            docs = grouped.setdefault(req.category, [])
            for doc in req.documentation_required:
                if doc not in docs:
                    docs.append(doc)
        return grouped
