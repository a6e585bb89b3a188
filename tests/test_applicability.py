# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for predicate helpers and applicability resolution."""

from __future__ import annotations

from types import SimpleNamespace

from space_compliance.applicability.predicates import (
    all_of,
    any_of,
    at_least,
    company_type_in,
    field_in,
    flag,
    non_empty,
    not_,
)
from space_compliance.applicability.resolver import ApplicabilityResolver
from space_compliance.domains.export_control.profile import CompanyType
from space_compliance.domains.export_control.requirements import (
    EXPORT_CONTROL_CORPUS,
    LICENSE_GATES,
)


class TestPredicates:
    def test_flag_and_combinators(self):
        p = SimpleNamespace(a=True, b=False)
        assert flag("a")(p)
        assert not flag("b")(p)
        assert not flag("missing")(p)
        assert not_(flag("b"))(p)
        assert any_of(flag("a"), flag("b"))(p)
        assert not all_of(flag("a"), flag("b"))(p)

    def test_predicates_carry_readable_names(self):
        pred = all_of(flag("has_itar_items"), not_(flag("registered_with_ddtc")))
        assert pred.__name__ == "all_of(has_itar_items, not(registered_with_ddtc))"

    def test_company_type_accepts_enums_and_strings(self):
        p = SimpleNamespace(company_type=[CompanyType.UNIVERSITY])
        assert company_type_in(CompanyType.UNIVERSITY)(p)
        assert company_type_in("university", "launch_provider")(p)
        assert not company_type_in(CompanyType.LAUNCH_PROVIDER)(p)

    def test_field_in_and_at_least(self):
        p = SimpleNamespace(orbit="LEO", count=10, empty=None)
        assert field_in("orbit", "LEO", "MEO")(p)
        assert not field_in("orbit", "GEO")(p)
        assert at_least("count", 10)(p)
        assert not at_least("count", 11)(p)
        assert not at_least("empty", 0)(p)

    def test_non_empty(self):
        assert non_empty("xs")(SimpleNamespace(xs=["DE"]))
        assert not non_empty("xs")(SimpleNamespace(xs=[]))


class TestResolver:
    def test_ear_only_operator(self, make_export_profile):
        profile = make_export_profile(has_ear_items=True)
        ids = [r.id for r in ApplicabilityResolver(EXPORT_CONTROL_CORPUS).resolve(profile)]
        assert ids == [
            "EAR-CLASS-001",
            "EAR-LIC-001",
            "EAR-EXC-001",
            "EAR-ENCRYPTION-001",
            "EAR-SCREEN-001",
            "EAR-END-USE-001",
            "JURIS-001",
            "CJ-001",
            "EAR-RECORDS-001",
            "EAR-REPORT-001",
            "COMP-PROGRAM-001",
            "TRAINING-001",
            "AUDIT-001",
        ]

    def test_resolution_preserves_corpus_order(self, make_export_profile):
        profile = make_export_profile(
            has_itar_items=True, has_ear_items=True, has_foreign_nationals=True,
            has_technology_transfer=True, has_manufacturing_abroad=True,
        )
        applicable = ApplicabilityResolver(EXPORT_CONTROL_CORPUS).resolve(profile)
        order = {req_id: i for i, req_id in enumerate(EXPORT_CONTROL_CORPUS.ids)}
        positions = [order[r.id] for r in applicable]
        assert positions == sorted(positions)

    def test_uncontrolled_organization(self, make_export_profile):
        profile = make_export_profile(company_type=["launch_provider"])
        assert ApplicabilityResolver(EXPORT_CONTROL_CORPUS).resolve(profile) == []

    def test_resolution_is_deterministic(self, make_export_profile):
        resolver = ApplicabilityResolver(EXPORT_CONTROL_CORPUS)
        profile = make_export_profile(has_itar_items=True, has_foreign_nationals=True)
        assert resolver.resolve(profile) == resolver.resolve(profile)

    def test_registrations(self, make_export_profile):
        resolver = ApplicabilityResolver(EXPORT_CONTROL_CORPUS)
        supplier = make_export_profile(company_type=["component_supplier"], has_itar_items=True)
        assert resolver.required_registrations(supplier) == [
            "DDTC Registration (22 CFR § 122.1)",
            "DDTC Broker Registration (22 CFR § 129.3)",
        ]
        ear_only = make_export_profile(has_ear_items=True)
        assert resolver.required_registrations(ear_only) == []

    def test_license_gates(self, make_export_profile):
        resolver = ApplicabilityResolver(EXPORT_CONTROL_CORPUS, LICENSE_GATES)
        provider = make_export_profile(
            company_type=["technology_provider"], has_itar_items=True
        )
        # The TAA requirement applies to technology providers but the license
        # is only reported once technology transfer is declared.
        assert "ITAR-TAA-001" in [r.id for r in resolver.resolve(provider)]
        assert resolver.required_license_types(provider) == ["DSP_5"]

        transferring = make_export_profile(
            company_type=["technology_provider"],
            has_itar_items=True,
            has_technology_transfer=True,
        )
        assert resolver.required_license_types(transferring) == ["DSP_5", "TAA"]

    def test_license_types_deduplicated(self, make_export_profile):
        resolver = ApplicabilityResolver(EXPORT_CONTROL_CORPUS, LICENSE_GATES)
        profile = make_export_profile(has_itar_items=True, has_ear_items=True)
        types = resolver.required_license_types(profile)
        assert len(types) == len(set(types))
        assert types == ["DSP_5", "BIS_LICENSE", "LICENSE_EXCEPTION"]

    def test_evidence_grouped_by_category(self, make_export_profile):
        resolver = ApplicabilityResolver(EXPORT_CONTROL_CORPUS)
        profile = make_export_profile(has_ear_items=True)
        evidence = resolver.evidence_by_category(profile)
        assert set(evidence) == {
            r.category for r in resolver.resolve(profile)
        }
        for docs in evidence.values():
            assert len(docs) == len(set(docs))
