"""Tests for the CLI and command-line line parsing.

These tests verify:
1. The parser accepts the supported line formats and rejects the rest
2. Duplicate lines are rejected
3. CLI commands render distributions and exit with the right codes
"""

import json

import pytest
from typer.testing import CliRunner

from odds_distribution.cli.examples import EXAMPLE_SCENARIOS, get_scenario
from odds_distribution.cli.main import cli
from odds_distribution.cli.parser import LineParseError, parse_line, parse_lines
from odds_distribution.lines.models import Line

runner = CliRunner()


def _json_output(result):
    return json.loads(result.stdout)


class TestLineParser:
    """Test parsing of line strings."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("over 28.5 -110", Line(direction="over", threshold=28.5, odds=-110)),
            ("Over 28.5 @ -110", Line(direction="over", threshold=28.5, odds=-110)),
            ("o28.5 @ +150", Line(direction="over", threshold=28.5, odds=150)),
            ("u49.5 -130", Line(direction="under", threshold=49.5, odds=-130)),
            ("UNDER 30 120", Line(direction="under", threshold=30, odds=120)),
            ("  over -3.5 @ +100  ", Line(direction="over", threshold=-3.5, odds=100)),
        ],
    )
    def test_accepted_formats(self, text, expected):
        assert parse_line(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "28.5 -110",
            "over -110",
            "push 28.5 -110",
            "over 28.5 -110.5",
            "over twenty -110",
        ],
    )
    def test_rejected_formats(self, text):
        with pytest.raises(LineParseError, match="Could not parse"):
            parse_line(text)

    def test_zero_odds_rejected(self):
        with pytest.raises(LineParseError, match="cannot be 0"):
            parse_line("over 28.5 0")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_line("nonsense")

    def test_parse_lines(self):
        lines = parse_lines(["o28.5 -110", "u28.5 -110", "o29.5 +150"])
        assert [line.direction for line in lines] == ["over", "under", "over"]

    def test_duplicate_line_rejected(self):
        with pytest.raises(LineParseError, match="already exists"):
            parse_lines(["over 28.5 -110", "o28.5 +100"])


class TestExamples:
    """Tests for preset scenarios."""

    def test_scenario_ids_unique(self):
        ids = [s.id for s in EXAMPLE_SCENARIOS]
        assert len(ids) == len(set(ids))

    def test_get_scenario(self):
        assert get_scenario("gap").name == "Gap Scenario"
        assert get_scenario("missing") is None


class TestCLI:
    """Test CLI commands."""

    def test_analyze_consecutive(self):
        result = runner.invoke(cli, ["analyze", "over 28.5 -110", "over 29.5 +150"])

        assert result.exit_code == 0
        assert "≤28" in result.stdout
        assert "47.62%" in result.stdout
        assert "12.38%" in result.stdout
        assert "40.00%" in result.stdout
        assert "100.00%" in result.stdout
        assert "No issues found" in result.stdout

    def test_analyze_decimals_option(self):
        result = runner.invoke(cli, ["analyze", "o28.5 -110", "o29.5 +150", "--decimals", "1"])

        assert result.exit_code == 0
        assert "47.6%" in result.stdout

    @pytest.mark.parametrize("decimals", ["-1", "7"])
    def test_analyze_decimals_out_of_range_is_usage_error(self, decimals):
        result = runner.invoke(cli, ["analyze", "--decimals", decimals, "over 28.5 -110"])

        assert result.exit_code == 2

    def test_example_decimals_out_of_range_is_usage_error(self):
        result = runner.invoke(cli, ["example", "gap", "-d", "9"])

        assert result.exit_code == 2

    def test_analyze_reports_vig(self):
        result = runner.invoke(cli, ["analyze", "o30 -120", "u30 -120"])

        assert result.exit_code == 0
        assert "INFO" in result.stdout
        assert "9.1%" in result.stdout

    def test_analyze_reports_errors_without_failing(self):
        """Contradictory lines still produce a distribution."""
        result = runner.invoke(cli, ["analyze", "o50.5 -300", "o49.5 +200"])

        assert result.exit_code == 0
        assert "ERROR" in result.stdout
        assert "-41.67%" in result.stdout

    def test_analyze_bad_line_exits_1(self):
        result = runner.invoke(cli, ["analyze", "over 28.5 0"])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_analyze_json(self):
        result = runner.invoke(cli, ["analyze", "over 25.5 -110", "over 27.5 +150", "--json"])

        assert result.exit_code == 0
        payload = _json_output(result)
        assert [r["label"] for r in payload["ranges"]] == ["≤25", "26-27", "≥28"]
        assert payload["ranges"][1]["min"] == 26
        assert payload["ranges"][1]["max"] == 27
        assert payload["ranges"][0]["min"] is None
        assert payload["validation"]["is_valid"] is True
        assert payload["lines"][0] == {"direction": "over", "threshold": 25.5, "odds": -110}

    def test_analyze_json_with_errors_is_only_json(self):
        """Logged validation errors never leak into the JSON on stdout."""
        result = runner.invoke(cli, ["analyze", "o50.5 -300", "o49.5 +200", "--json"])

        assert result.exit_code == 0
        payload = _json_output(result)
        assert payload["validation"]["is_valid"] is False

    def test_example_command(self):
        result = runner.invoke(cli, ["example", "gap"])

        assert result.exit_code == 0
        assert "Gap Scenario" in result.stdout
        assert "26-27" in result.stdout

    def test_example_defaults_from_settings(self, monkeypatch):
        monkeypatch.setenv("ODDS_DIST_DEFAULT_EXAMPLE", "mixed")
        result = runner.invoke(cli, ["example"])

        assert result.exit_code == 0
        assert "Mixed Over/Under" in result.stdout

    def test_unknown_example_exits_1(self):
        result = runner.invoke(cli, ["example", "nope"])

        assert result.exit_code == 1
        assert "Unknown example" in result.stdout

    def test_examples_lists_all(self):
        result = runner.invoke(cli, ["examples"])

        assert result.exit_code == 0
        for scenario in EXAMPLE_SCENARIOS:
            assert scenario.id in result.stdout

    def test_version(self):
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert "odds-distribution" in result.stdout
        assert "Display decimals: 2" in result.stdout
