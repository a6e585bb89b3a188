# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring engine for compliance assessments."""

from space_compliance.scoring.engine import ScoringEngine, group_score

__all__ = ["ScoringEngine", "group_score"]
