"""Rich formatters for lines, distributions and validation issues.

All rounding happens here. Values handed in from the analysis modules are
never modified.
"""

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table

from odds_distribution.analysis.distribution import distribution_total
from odds_distribution.lines.models import Line, OutcomeRange, ValidationResult, threshold_key
from odds_distribution.lines.normalizer import implied_probability_to_american, normalize_lines

BAR_WIDTH = 30

SEVERITY_STYLES = {
    "error": "bold red",
    "warning": "yellow",
    "info": "cyan",
}


def format_american_odds(american_odds: int) -> str:
    """Format American odds with an explicit sign.

    Examples:
        >>> format_american_odds(150)
        '+150'
        >>> format_american_odds(-110)
        '-110'
    """
    if american_odds > 0:
        return f"+{american_odds}"
    return str(american_odds)


def format_probability(probability: float, decimals: int = 2) -> str:
    """Format a probability as a percentage string (0.4762 -> "47.62%")."""
    return f"{probability * 100:.{decimals}f}%"


def format_lines_table(lines: Sequence[Line], decimals: int = 2) -> Table:
    """Format input lines with their implied and normalized probabilities.

    "Fair" is the no-vig American price for the quoted side.

    Args:
        lines: Lines as entered
        decimals: Percentage decimals

    Returns:
        Rich Table sorted by threshold, Over before Under
    """
    table = Table(title="Lines", show_header=True, header_style="bold cyan")
    table.add_column("Line", justify="left", style="white", no_wrap=True)
    table.add_column("Odds", justify="right", style="magenta")
    table.add_column("Implied", justify="right", style="cyan")
    table.add_column("P(Over)", justify="right", style="bold green")
    table.add_column("Fair", justify="right", style="magenta")

    if not lines:
        table.add_row("[dim]No lines entered[/dim]", "", "", "", "")
        return table

    over_by_key = {
        threshold_key(n.threshold): n.over_probability for n in normalize_lines(lines)
    }
    ordered = sorted(lines, key=lambda line: (line.threshold_key, line.direction))

    for line in ordered:
        over_probability = over_by_key[line.threshold_key]
        side_probability = over_probability if line.direction == "over" else 1 - over_probability
        table.add_row(
            line.label(),
            format_american_odds(line.odds),
            format_probability(line.implied_probability, decimals),
            format_probability(over_probability, decimals),
            _format_fair_odds(side_probability),
        )

    return table


def format_distribution_table(ranges: Sequence[OutcomeRange], decimals: int = 2) -> Table:
    """Format outcome ranges with a probability bar and a total row.

    Args:
        ranges: Output of calculate_distribution, in order
        decimals: Percentage decimals

    Returns:
        Rich Table, one row per range plus the total
    """
    table = Table(
        title="Outcome Distribution",
        show_header=True,
        header_style="bold cyan",
        show_footer=bool(ranges),
    )
    table.add_column("Outcome", justify="left", style="white", footer="Total")
    table.add_column(
        "Probability",
        justify="right",
        style="bold green",
        footer=format_probability(distribution_total(ranges), decimals) if ranges else "",
    )
    table.add_column("", justify="left", style="green")

    if not ranges:
        table.add_row("[dim]Add a line to see the distribution[/dim]", "", "")
        return table

    for outcome_range in ranges:
        probability = outcome_range.probability
        style = "red" if probability < 0 else None
        table.add_row(
            outcome_range.label,
            format_probability(probability, decimals),
            _format_bar(probability),
            style=style,
        )

    return table


def format_issues_panel(result: ValidationResult) -> Panel:
    """Format validation issues, colored by severity.

    Args:
        result: Output of validate_lines

    Returns:
        Rich Panel; red border when the lines are invalid
    """
    if not result.issues:
        return Panel("[green]No issues found[/green]", title="[bold]Validation[/bold]", border_style="green")

    rows = []
    for issue in result.issues:
        style = SEVERITY_STYLES[issue.severity]
        rows.append(f"[{style}]{issue.severity.upper()}[/{style}] {issue.message}")

    return Panel(
        "\n".join(rows),
        title="[bold]Validation[/bold]",
        border_style="green" if result.is_valid else "red",
    )


def _format_fair_odds(probability: float) -> str:
    # Odds extreme enough to round to 0% or 100% have no finite fair price
    if not 0 < probability < 1:
        return "-"
    return format_american_odds(implied_probability_to_american(probability))


def _format_bar(probability: float) -> str:
    """Horizontal bar proportional to probability, empty for negative slices."""
    filled = max(0, min(BAR_WIDTH, round(probability * BAR_WIDTH)))
    return "█" * filled
