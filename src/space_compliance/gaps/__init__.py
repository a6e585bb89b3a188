# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Gap analysis."""

from space_compliance.gaps.analyzer import GapAnalyzer, describe_penalty, format_penalty

__all__ = ["GapAnalyzer", "describe_penalty", "format_penalty"]
