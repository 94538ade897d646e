"""Unit tests for CLI formatters.

Tests Rich table formatting and helper functions.
"""

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from odds_distribution.analysis import calculate_distribution, validate_lines
from odds_distribution.cli.formatters import (
    format_american_odds,
    format_distribution_table,
    format_issues_panel,
    format_lines_table,
    format_probability,
)
from odds_distribution.lines.models import Line, ValidationResult


def _render(renderable) -> str:
    console = Console(width=120, no_color=True, record=True)
    console.print(renderable)
    return console.export_text()


class TestHelpers:
    """Tests for formatting helpers."""

    def test_format_american_odds(self):
        assert format_american_odds(150) == "+150"
        assert format_american_odds(-110) == "-110"
        assert format_american_odds(100) == "+100"

    @pytest.mark.parametrize(
        "probability,decimals,expected",
        [
            (0.4762, 2, "47.62%"),
            (0.4762, 1, "47.6%"),
            (0.4, 0, "40%"),
            (-0.4167, 2, "-41.67%"),
        ],
    )
    def test_format_probability(self, probability, decimals, expected):
        assert format_probability(probability, decimals) == expected


class TestLinesTable:
    """Tests for format_lines_table."""

    def test_returns_table(self, consecutive_lines):
        assert isinstance(format_lines_table(consecutive_lines), Table)

    def test_rows_sorted_with_normalized_probability(self, vig_pair, consecutive_lines):
        table = format_lines_table(consecutive_lines + vig_pair)
        text = _render(table)

        assert table.row_count == 4
        assert text.index("Over 28.5") < text.index("Over 30") < text.index("Under 30")
        # No-vig split shown for the pair, raw implied price shown per side
        assert "50.00%" in text
        assert "54.55%" in text

    def test_fair_odds_column(self, vig_pair, consecutive_lines):
        """One-sided lines keep their price; a pair shows its no-vig price."""
        table = format_lines_table(consecutive_lines + vig_pair)

        assert table.columns[-1].header == "Fair"
        assert list(table.columns[-1].cells) == ["-110", "+150", "-100", "-100"]

    def test_fair_odds_for_under_side(self):
        table = format_lines_table([
            Line(direction="over", threshold=48.5, odds=110),
            Line(direction="under", threshold=49.5, odds=-130),
        ])

        assert list(table.columns[-1].cells) == ["+110", "-130"]

    def test_fair_odds_for_lopsided_pair(self):
        table = format_lines_table([
            Line(direction="over", threshold=30.5, odds=150),
            Line(direction="under", threshold=30.5, odds=-200),
        ])

        # 40% vs 66.7% implied -> 37.5% / 62.5% no-vig
        assert list(table.columns[-1].cells) == ["+167", "-167"]

    def test_empty(self):
        text = _render(format_lines_table([]))
        assert "No lines entered" in text


class TestDistributionTable:
    """Tests for format_distribution_table."""

    def test_rows_and_total(self, gap_lines):
        table = format_distribution_table(calculate_distribution(gap_lines))
        text = _render(table)

        assert table.row_count == 3
        assert "26-27" in text
        assert "12.38%" in text
        assert "Total" in text
        assert "100.00%" in text

    def test_rounding_does_not_touch_ranges(self, consecutive_lines):
        ranges = calculate_distribution(consecutive_lines)
        before = [r.probability for r in ranges]
        _render(format_distribution_table(ranges, decimals=0))
        assert [r.probability for r in ranges] == before

    def test_empty(self):
        text = _render(format_distribution_table([]))
        assert "Add a line" in text


class TestIssuesPanel:
    """Tests for format_issues_panel."""

    def test_no_issues(self):
        panel = format_issues_panel(ValidationResult())
        assert isinstance(panel, Panel)
        assert panel.border_style == "green"
        assert "No issues found" in _render(panel)

    def test_invalid_lines_red_border(self):
        result = validate_lines([
            Line(direction="over", threshold=50.5, odds=-300),
            Line(direction="over", threshold=49.5, odds=200),
        ])
        panel = format_issues_panel(result)

        assert panel.border_style == "red"
        text = _render(panel)
        assert "ERROR" in text

    def test_info_only_green_border(self, vig_pair):
        panel = format_issues_panel(validate_lines(vig_pair))

        assert panel.border_style == "green"
        assert "INFO" in _render(panel)
