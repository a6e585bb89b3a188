# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for space-compliance."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from space_compliance import __version__
from space_compliance.assessment.engine import AssessmentEngine
from space_compliance.assessment.history import (
    compare_results,
    get_history,
    load_result,
    save_result,
)
from space_compliance.assessment.snapshot import load_snapshot
from space_compliance.config import DEFAULT_SETTINGS, EngineSettings, load_settings
from space_compliance.data.models import AssessmentResult, ComplianceStatus
from space_compliance.data.profiles import PROFILES, get_profile, profiles_for_domain
from space_compliance.domains import available_domains, get_domain
from space_compliance.exceptions import ComplianceError
from space_compliance.reporting.terminal import TerminalRenderer

PROFILE_CHOICES = list(PROFILES.keys())
DOMAIN_CHOICES = ["export_control", "debris"]
STATUS_CHOICES = [s.value for s in ComplianceStatus]


def _settings(config: str | None, console: Console) -> EngineSettings:
    if not config:
        return DEFAULT_SETTINGS
    try:
        return load_settings(config)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)


def _export_json(result: AssessmentResult, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        f.write(result.model_dump_json(indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {path}")


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline details")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """space-compliance: Regulatory Compliance Assessment Engine

    Assess a space organization against a regulatory domain:

    \b
      export_control: US ITAR / EAR export control
      debris:         EU Space Act debris mitigation
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.argument("snapshot", type=click.Path())
@click.option(
    "--config", "-c", type=click.Path(), default=None,
    help="Engine settings YAML file",
)
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export raw results as JSON at this path",
)
@click.option("--details/--no-details", default=True, help="Show sub-assessments and every gap")
@click.option("--save", is_flag=True, default=False, help="Save the result to the local history")
@click.pass_context
def assess(
    ctx: click.Context,
    snapshot: str,
    config: str | None,
    export_json: str | None,
    details: bool,
    save: bool,
) -> None:
    """Assess a YAML or JSON snapshot of profile and statuses."""
    console: Console = ctx.obj["console"]
    settings = _settings(config, console)

    try:
        snap = load_snapshot(snapshot)
    except (FileNotFoundError, ComplianceError, KeyError) as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)

    with console.status("[bold cyan]Running assessment..."):
        result = AssessmentEngine(snap.domain, settings).assess(snap.profile, snap.assessments)

    TerminalRenderer(console).render(result, show_details=details)
    if result.ignored_assessment_ids:
        console.print(
            f"  [yellow]Ignored unknown requirement ids:[/] {', '.join(result.ignored_assessment_ids)}"
        )

    if export_json:
        _export_json(result, export_json, console)
    if save:
        path = save_result(result)
        console.print(f"  [green]Result saved to:[/green] {path}")


@cli.command()
@click.option(
    "--domain", "-d", type=click.Choice(DOMAIN_CHOICES), default=None,
    help="Only list profiles for this domain",
)
@click.pass_context
def profiles(ctx: click.Context, domain: str | None) -> None:
    """List bundled sample profiles."""
    console: Console = ctx.obj["console"]

    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Profile", style="bold")
    table.add_column("Domain")
    table.add_column("Name")
    table.add_column("Description")

    domains = [domain] if domain else available_domains()
    for name in domains:
        for sample in profiles_for_domain(name):
            table.add_row(sample.key, sample.domain, sample.name, sample.description)
    console.print(table)


@cli.command()
@click.option(
    "--domain", "-d", type=click.Choice(DOMAIN_CHOICES), default="export_control",
    help="Regulatory domain to assess against",
)
@click.option(
    "--profile", "-p", type=click.Choice(PROFILE_CHOICES), default=None,
    help="Bundled sample profile (defaults to the domain's first profile)",
)
@click.option(
    "--fill", type=click.Choice(STATUS_CHOICES), default="not_assessed",
    help="Status to record for every applicable requirement",
)
@click.option("--details/--no-details", default=True, help="Show sub-assessments and every gap")
@click.pass_context
def demo(
    ctx: click.Context,
    domain: str,
    profile: str | None,
    fill: str,
    details: bool,
) -> None:
    """Assess a bundled sample profile."""
    console: Console = ctx.obj["console"]

    if profile is None:
        sample = profiles_for_domain(domain)[0]
    else:
        sample = get_profile(profile)
        if sample.domain != domain:
            console.print(
                f"[red]Profile '{profile}' belongs to the {sample.domain} domain, not {domain}[/]"
            )
            raise SystemExit(1)

    engine = AssessmentEngine(domain)
    applicable = engine.resolver.resolve(engine.domain.validate_profile(sample.data))
    statuses = {req.id: fill for req in applicable}
    result = engine.assess(sample.data, statuses)
    TerminalRenderer(console).render(result, show_details=details)


@cli.command()
@click.option(
    "--domain", "-d", type=click.Choice(DOMAIN_CHOICES), default="export_control",
    help="Regulatory domain whose corpus to list",
)
@click.option(
    "--profile", "-p", type=click.Choice(PROFILE_CHOICES), default=None,
    help="Only list requirements applicable to this sample profile",
)
@click.pass_context
def requirements(ctx: click.Context, domain: str, profile: str | None) -> None:
    """List a domain's requirement corpus."""
    console: Console = ctx.obj["console"]
    regulatory_domain = get_domain(domain)
    reqs = list(regulatory_domain.corpus.requirements)
    title = f"{regulatory_domain.title.upper()} ({len(reqs)} requirements)"

    if profile is not None:
        sample = get_profile(profile)
        if sample.domain != domain:
            console.print(
                f"[red]Profile '{profile}' belongs to the {sample.domain} domain, not {domain}[/]"
            )
            raise SystemExit(1)
        reqs = regulatory_domain.resolver().resolve(regulatory_domain.validate_profile(sample.data))
        title = f"APPLICABLE TO {sample.name.upper()} ({len(reqs)} requirements)"

    TerminalRenderer(console).render_requirements(reqs, title=title)


@cli.command()
@click.option("--name", "-n", type=str, default=None, help="Only show results for this profile name")
@click.pass_context
def history(ctx: click.Context, name: str | None) -> None:
    """List saved assessment results, newest first."""
    console: Console = ctx.obj["console"]
    entries = get_history(name)
    if not entries:
        console.print("[yellow]No saved results.[/]")
        return

    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Date")
    table.add_column("Domain")
    table.add_column("Profile", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Risk", justify="center")
    table.add_column("Gaps", justify="right")
    table.add_column("File", style="dim")
    for e in entries:
        color = e.overall_risk.color
        table.add_row(
            e.saved_at.strftime("%Y-%m-%d %H:%M"),
            e.domain,
            e.profile_name,
            str(e.overall_score),
            f"[{color}]{e.overall_risk.value}[/{color}]",
            str(e.gap_count),
            e.file_path,
        )
    console.print(table)


@cli.command()
@click.argument("before", type=click.Path(exists=True))
@click.argument("after", type=click.Path(exists=True))
@click.pass_context
def compare(ctx: click.Context, before: str, after: str) -> None:
    """Compare two saved results (JSON files)."""
    console: Console = ctx.obj["console"]
    result_a = load_result(before)
    result_b = load_result(after)
    if result_a.domain != result_b.domain:
        console.print("[red]Cannot compare results from different domains[/]")
        raise SystemExit(1)
    TerminalRenderer(console).render_comparison(
        compare_results(result_a, result_b), Path(before).name, Path(after).name
    )
