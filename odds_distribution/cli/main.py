"""Typer CLI entry point for odds-distribution.

Provides:
- odds-dist analyze "over 28.5 -110" "over 29.5 +150"
- odds-dist example gap
- odds-dist examples
- odds-dist version
"""

import json
import logging
import os
import uuid
from dataclasses import asdict

from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()

import typer
from rich.console import Console
from rich.table import Table

from odds_distribution import __version__
from odds_distribution.analysis import calculate_distribution, validate_lines
from odds_distribution.cli.examples import EXAMPLE_SCENARIOS, get_scenario
from odds_distribution.cli.formatters import (
    format_distribution_table,
    format_issues_panel,
    format_lines_table,
)
from odds_distribution.cli.parser import LineParseError, parse_lines
from odds_distribution.config import get_settings
from odds_distribution.lines.models import Line
from odds_distribution.monitoring import (
    bind_correlation_id,
    configure_logging,
    get_logger,
    unbind_correlation_id,
)

log = get_logger(__name__)

cli = typer.Typer(
    name="odds-dist",
    help="""Outcome probabilities from sportsbook Over/Under lines.

WHAT IT DOES:
  Converts a ladder of American-odds lines into the probability of every
  integer outcome range, removing vig from Over/Under pairs, and flags
  contradictory lines, vig and arbitrage.

QUICK START:
  odds-dist analyze "over 28.5 -110" "over 29.5 +150"
  odds-dist analyze "o48.5 @ +110" "u49.5 @ -130" --decimals 1
  odds-dist example gap
""",
    add_completion=False,
)

# Disable colors if NO_COLOR env var is set (standard convention)
console = Console(no_color=os.getenv("NO_COLOR") is not None)


@cli.command()
def analyze(
    lines: list[str] = typer.Argument(..., help="Lines like 'over 28.5 -110' or 'u49.5 @ +120'"),
    decimals: int = typer.Option(None, "--decimals", "-d", min=0, max=6, help="Percentage decimals (default from ODDS_DIST_DISPLAY_DECIMALS)"),
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON instead of tables"),
):
    """Analyze a set of lines.

    \b
    EXAMPLES:
      odds-dist analyze "over 28.5 -110" "over 29.5 +150"    # 28 or less / 29 / 30+
      odds-dist analyze "o30 -120" "u30 -120"                # Over/Under pair, shows vig
    """
    try:
        parsed = parse_lines(lines)
    except LineParseError as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)

    _run_analysis(parsed, decimals, as_json)


@cli.command()
def example(
    scenario_id: str = typer.Argument(None, help="Scenario id (see `odds-dist examples`)"),
    decimals: int = typer.Option(None, "--decimals", "-d", min=0, max=6, help="Percentage decimals"),
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON instead of tables"),
):
    """Analyze one of the preset scenarios."""
    scenario_id = scenario_id or get_settings().default_example
    scenario = get_scenario(scenario_id)
    if scenario is None:
        known = ", ".join(s.id for s in EXAMPLE_SCENARIOS)
        console.print(f"[bold red]Error:[/bold red] Unknown example '{scenario_id}'. Choose from: {known}", style="red")
        raise typer.Exit(code=1)

    if not as_json:
        console.print(f"[bold cyan]{scenario.name}[/bold cyan] - {scenario.description}")
        console.print()
    _run_analysis(list(scenario.lines), decimals, as_json)


@cli.command()
def examples():
    """List the preset scenarios."""
    table = Table(title="Example Scenarios", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Lines", style="magenta")
    table.add_column("Description", style="dim")

    for scenario in EXAMPLE_SCENARIOS:
        table.add_row(
            scenario.id,
            scenario.name,
            ", ".join(line.label() for line in scenario.lines),
            scenario.description,
        )

    console.print(table)


@cli.command()
def version():
    """Show version and configuration info."""
    settings = get_settings()
    console.print(f"[bold cyan]odds-distribution[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Log mode: {settings.log_mode} ({settings.log_level})")
    console.print(f"  Display decimals: {settings.display_decimals}")
    console.print(f"  Default example: {settings.default_example}")


def _run_analysis(lines: list[Line], decimals: int | None, as_json: bool) -> None:
    """Compute and print the distribution and validation for lines."""
    if decimals is None:
        decimals = get_settings().display_decimals

    bind_correlation_id(f"analyze_{uuid.uuid4().hex[:8]}")
    try:
        ranges = calculate_distribution(lines)
        validation = validate_lines(lines)
        log.info(
            "analysis_completed",
            line_count=len(lines),
            range_count=len(ranges),
            is_valid=validation.is_valid,
        )
    finally:
        unbind_correlation_id()

    if as_json:
        payload = {
            "lines": [line.model_dump() for line in lines],
            "ranges": [asdict(r) for r in ranges],
            "validation": {
                "is_valid": validation.is_valid,
                "issues": [asdict(issue) for issue in validation.issues],
            },
        }
        # Plain print keeps rich from wrapping or highlighting the JSON
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    console.print(format_lines_table(lines, decimals))
    console.print()
    console.print(format_distribution_table(ranges, decimals))
    console.print()
    console.print(format_issues_panel(validation))


def main():
    """Entry point for CLI."""
    settings = get_settings()
    configure_logging(settings.log_mode, level=getattr(logging, settings.log_level.upper(), logging.WARNING))

    cli()


if __name__ == "__main__":
    main()
