# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Registry of regulatory domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from space_compliance.domains.base import RegulatoryDomain

DOMAIN_REGISTRY: dict[str, RegulatoryDomain] = {}


def register_domain(domain: RegulatoryDomain) -> None:
    """Register a domain under its name."""
    DOMAIN_REGISTRY[domain.name] = domain


def get_domain(name: str) -> RegulatoryDomain:
    """Look up a registered domain by name."""
    if name not in DOMAIN_REGISTRY:
        _load_builtin_domains()

    if name not in DOMAIN_REGISTRY:
        available = ", ".join(sorted(DOMAIN_REGISTRY.keys()))
        raise KeyError(f"Unknown domain '{name}'. Available: {available}")
    return DOMAIN_REGISTRY[name]


def available_domains() -> list[str]:
    _load_builtin_domains()
    return sorted(DOMAIN_REGISTRY.keys())


def _load_builtin_domains() -> None:
    """Import built-in domains so they self-register."""
    from space_compliance.domains.debris import domain as _debris  # noqa: F401
    from space_compliance.domains.export_control import domain as _export  # noqa: F401
