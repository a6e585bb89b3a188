# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Rich terminal report renderer.

Composes Rich tables, panels, and gauges into the primary user-facing
terminal output for a compliance assessment.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from space_compliance import __version__
from space_compliance.analysis.models import (
    DeemedExportAssessment,
    DeorbitAssessment,
    PenaltyExposure,
    ScreeningAssessment,
    TCPAssessment,
)
from space_compliance.data.models import (
    AssessmentResult,
    Gap,
    Recommendation,
    Requirement,
)
from space_compliance.gaps.analyzer import format_penalty
from space_compliance.reporting.gauges import mini_gauge, score_gauge

_STATUS_STYLE = {
    "compliant": "green",
    "partial": "yellow",
    "non_compliant": "red",
    "not_assessed": "dim",
    "not_applicable": "dim",
}


class TerminalRenderer:
    """Renders assessment results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: AssessmentResult, show_details: bool = True) -> None:
        """Render the full assessment report to the terminal."""
        self._render_header(result)
        self._render_scores(result)
        self._render_regulation_statuses(result)
        self._render_gaps(list(result.gaps), limit=None if show_details else 10)
        if show_details:
            self._render_sub_assessments(result)
        if result.recommendations:
            self._render_recommendations(list(result.recommendations))
        self._render_footer(result)

    def render_requirements(
        self, requirements: list[Requirement], title: str = "REQUIREMENTS"
    ) -> None:
        """Render a table of corpus requirements."""
        self.console.print()
        self.console.print(Rule(f"[bold]{title}[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("ID", style="bold", min_width=16)
        table.add_column("Title", min_width=30)
        table.add_column("Regulation", justify="center")
        table.add_column("Category")
        table.add_column("Risk", justify="center")
        table.add_column("Mandatory", justify="center")

        for req in requirements:
            color = req.risk_level.color
            table.add_row(
                req.id,
                req.title,
                req.regulation,
                req.category,
                f"[{color}]{req.risk_level.value}[/{color}]",
                "yes" if req.mandatory else "[dim]no[/dim]",
            )
        self.console.print(table)

    def render_comparison(self, comparison: dict[str, dict], label_a: str, label_b: str) -> None:
        """Render score deltas between two saved results."""
        self.console.print()
        self.console.print(Rule(f"[bold]COMPARISON[/bold]  {label_a} -> {label_b}"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Scope", style="bold")
        table.add_column("Before", justify="right")
        table.add_column("After", justify="right")
        table.add_column("Delta", justify="right")
        table.add_column("Risk", justify="center")

        for scope, row in comparison.items():
            delta = row["delta"]
            color = "green" if delta > 0 else "red" if delta < 0 else "dim"
            table.add_row(
                scope,
                str(row["score_a"]),
                str(row["score_b"]),
                f"[{color}]{delta:+d}[/{color}]",
                f"{row['risk_a']} -> {row['risk_b']}",
            )
        self.console.print(table)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: AssessmentResult) -> None:
        cls = result.classification
        risk_color = cls.overall_risk.color
        header_text = Text()
        header_text.append("COMPLIANCE ASSESSMENT", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(result.profile.name or "Unnamed profile", style="bold")
        header_text.append(" | ", style="dim")
        header_text.append(f"{result.domain} (corpus {result.corpus_version})")
        header_text.append(" | ", style="dim")
        header_text.append(f"{len(result.applicable_requirement_ids)} applicable requirements")

        body = Text()
        body.append_text(header_text)
        body.append("\nRisk: ", style="bold")
        body.append(cls.overall_risk.value.upper(), style=f"bold {risk_color}")
        body.append(f"  {cls.reason}", style="dim")
        body.append("\nJurisdiction: ", style="bold")
        body.append(cls.jurisdiction)
        body.append(f"  {cls.jurisdiction_reason}", style="dim")

        self.console.print()
        self.console.print(Panel(body, title="Regulatory Compliance Assessment"))

    def _render_scores(self, result: AssessmentResult) -> None:
        score = result.score
        self.console.print()
        self.console.print(f"  [bold]OVERALL SCORE[/bold]:   {score_gauge(score.overall, width=30)}")
        self.console.print(f"  [bold]MANDATORY[/bold]:       {score_gauge(score.mandatory, width=30)}")
        self.console.print(f"  [bold]CRITICAL ITEMS[/bold]:  {score_gauge(score.critical, width=30)}")

    def _render_regulation_statuses(self, result: AssessmentResult) -> None:
        if not result.regulation_statuses:
            return
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Regulation", style="bold")
        table.add_column("Score", min_width=15)
        table.add_column("Assessed", justify="right")
        table.add_column("Compliant", justify="right")
        table.add_column("Partial", justify="right")
        table.add_column("Non-compliant", justify="right")
        table.add_column("Gaps", justify="right")
        table.add_column("Risk", justify="center")

        for rs in result.regulation_statuses:
            color = rs.risk_level.color
            table.add_row(
                rs.regulation,
                mini_gauge(rs.score),
                f"{rs.assessed}/{rs.total_requirements}",
                f"[green]{rs.compliant}[/green]",
                f"[yellow]{rs.partial}[/yellow]",
                f"[red]{rs.non_compliant}[/red]",
                str(rs.gap_count),
                f"[{color}]{rs.risk_level.value}[/{color}]",
            )
        self.console.print()
        self.console.print(table)

    def _render_gaps(self, gaps: list[Gap], limit: int | None) -> None:
        self.console.print()
        self.console.print(Rule(f"[bold]GAPS ({len(gaps)})[/bold]"))
        if not gaps:
            self.console.print("  [green]No gaps: every applicable requirement is met.[/green]")
            return

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Risk", justify="center", width=9)
        table.add_column("Requirement", style="bold", min_width=16)
        table.add_column("Status", justify="center")
        table.add_column("Next step", min_width=30)
        table.add_column("Effort", justify="center", width=7)

        shown = gaps if limit is None else gaps[:limit]
        for gap in shown:
            color = gap.risk_level.color
            status_style = _STATUS_STYLE[gap.current_status.value]
            table.add_row(
                f"[{color}]{gap.risk_level.value}[/{color}]",
                f"{gap.requirement_id}\n[dim]{gap.title}[/dim]",
                f"[{status_style}]{gap.current_status.value}[/{status_style}]",
                gap.recommendation,
                gap.estimated_effort,
            )
        self.console.print(table)
        if len(shown) < len(gaps):
            self.console.print(f"  [dim]... and {len(gaps) - len(shown)} more (use --details)[/dim]")

    def _render_sub_assessments(self, result: AssessmentResult) -> None:
        for field_name in type(result).model_fields:
            value = getattr(result, field_name)
            if isinstance(value, DeemedExportAssessment):
                self._render_deemed_export(value)
            elif isinstance(value, ScreeningAssessment):
                self._render_screening(value)
            elif isinstance(value, TCPAssessment):
                self._render_tcp(value)
            elif isinstance(value, PenaltyExposure):
                self._render_penalty_exposure(value)
            elif isinstance(value, DeorbitAssessment):
                self._render_deorbit(value)

    def _render_deemed_export(self, deemed: DeemedExportAssessment) -> None:
        if not deemed.has_foreign_nationals:
            return
        lines = [f"[bold]Foreign national countries:[/bold] {', '.join(deemed.foreign_national_countries) or 'unspecified'}"]
        if deemed.restricted_countries:
            lines.append(f"[bold red]Restricted:[/bold red] {', '.join(deemed.restricted_countries)}")
        for license_line in deemed.licenses_required:
            lines.append(f"  [dim]•[/dim] {license_line}")
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="[bold]DEEMED EXPORTS[/bold]", border_style="yellow"))

    def _render_screening(self, screening: ScreeningAssessment) -> None:
        lines = [
            f"[bold]Lists:[/bold] {', '.join(screening.list_codes)}",
            f"[bold]Frequency:[/bold] {screening.screening_frequency}",
            f"[bold]Automated screening:[/bold] {'required' if screening.automated_screening_required else 'optional'}",
        ]
        if screening.restricted_destinations:
            lines.append(f"[bold red]Restricted destinations:[/bold red] {', '.join(screening.restricted_destinations)}")
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="[bold]RESTRICTED PARTY SCREENING[/bold]"))

    def _render_tcp(self, tcp: TCPAssessment) -> None:
        if not tcp.tcp_required:
            return
        state = "in place" if tcp.has_existing_plan else "[red]missing[/red]"
        lines = [f"[bold]Plan:[/bold] {state}  [bold]Priority:[/bold] {tcp.implementation_priority}"]
        lines.extend(f"  [dim]•[/dim] {reason}" for reason in tcp.reasons)
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="[bold]TECHNOLOGY CONTROL PLAN[/bold]"))

    def _render_penalty_exposure(self, exposure: PenaltyExposure) -> None:
        if not exposure.max_civil_per_violation and not exposure.max_criminal_per_violation:
            return
        lines = [
            f"[bold]Civil:[/bold] up to {format_penalty(exposure.max_civil_per_violation)} per violation",
            f"[bold]Criminal:[/bold] up to {format_penalty(exposure.max_criminal_per_violation)}"
            f" and {exposure.max_imprisonment_years} years",
        ]
        lines.extend(f"  [green]+[/green] {f}" for f in exposure.mitigating_factors)
        lines.extend(f"  [red]-[/red] {f}" for f in exposure.aggravating_factors)
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="[bold]PENALTY EXPOSURE[/bold]", border_style="red"))

    def _render_deorbit(self, deorbit: DeorbitAssessment) -> None:
        lines = [
            f"[bold]Orbit:[/bold] {deorbit.orbit_type}  [bold]Tier:[/bold] {deorbit.constellation_tier}",
            f"[bold]Available strategies:[/bold] {', '.join(deorbit.available_strategies)}",
            f"[bold]Declared:[/bold] {deorbit.declared_strategy or 'none'}",
        ]
        if deorbit.disposal_deadline_years is not None:
            verdict = {True: "[green]meets[/green]", False: "[red]exceeds[/red]", None: "[dim]no timeline[/dim]"}
            lines.append(
                f"[bold]Deadline:[/bold] {deorbit.disposal_deadline_years:g} years "
                f"({verdict[deorbit.meets_deadline]})"
            )
        lines.extend(f"  [dim]•[/dim] {note}" for note in deorbit.notes)
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="[bold]END-OF-LIFE DISPOSAL[/bold]"))

    def _render_recommendations(self, recommendations: list[Recommendation]) -> None:
        """Render prioritized recommendations table."""
        self.console.print()
        self.console.print(Rule("[bold]RECOMMENDATIONS[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Recommendation", min_width=30)
        table.add_column("Timeframe", justify="center", min_width=10)
        table.add_column("Gaps", justify="right", width=5)

        timeframe_color = {
            "Immediate": "red",
            "30 days": "yellow",
            "90 days": "cyan",
            "Ongoing": "green",
        }
        for rec in recommendations:
            color = timeframe_color.get(rec.timeframe.value, "white")
            table.add_row(
                str(rec.priority),
                f"[bold]{rec.title}[/bold]\n[dim]{rec.description}[/dim]",
                f"[{color}]{rec.timeframe.value}[/{color}]",
                str(len(rec.gap_ids)),
            )
        self.console.print(table)

    def _render_footer(self, result: AssessmentResult) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(
            f"  [dim]{result.gap_count} gaps ({result.critical_gap_count} critical) | "
            f"space-compliance v{__version__}[/dim]"
        )
        self.console.print()
