# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly score gauges using Unicode block characters.

These functions return Rich-markup strings for use in tables and panels.
"""

from __future__ import annotations

from space_compliance.scoring.thresholds import score_to_color


def _bar(score: int, width: int) -> tuple[str, str]:
    clamped = max(0, min(100, score))
    filled = int(clamped / 100 * width)
    return score_to_color(clamped), "█" * filled + "░" * (width - filled)


def score_gauge(score: int, width: int = 20) -> str:
    """Large gauge, e.g. ``[yellow]████████████░░░░░░░░[/] 62/100``."""
    color, bar = _bar(score, width)
    return f"[{color}]{bar}[/] {max(0, min(100, score))}/100"


def mini_gauge(score: int, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    color, bar = _bar(score, width)
    return f"[{color}]{bar}[/] {max(0, min(100, score))}"
