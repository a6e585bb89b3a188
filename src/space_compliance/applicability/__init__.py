# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Requirement applicability resolution and predicate helpers."""

from space_compliance.applicability.resolver import ApplicabilityResolver

__all__ = ["ApplicabilityResolver"]
