"""Preset line scenarios for trying out the calculator."""

from dataclasses import dataclass

from odds_distribution.lines.models import Line


@dataclass(frozen=True)
class ExampleScenario:
    """Named set of lines demonstrating one feature.

    Attributes:
        id: Identifier used on the command line
        name: Display name
        description: What the scenario demonstrates
        lines: The lines to analyze
    """

    id: str
    name: str
    description: str
    lines: tuple[Line, ...]


EXAMPLE_SCENARIOS: list[ExampleScenario] = [
    ExampleScenario(
        id="brady-basic",
        name="Brady's Example",
        description="Basic consecutive lines - perfect for understanding the fundamentals",
        lines=(
            Line(direction="over", threshold=28.5, odds=-110),
            Line(direction="over", threshold=29.5, odds=150),
        ),
    ),
    ExampleScenario(
        id="gap",
        name="Gap Scenario",
        description="Shows range handling when lines skip values (26-27)",
        lines=(
            Line(direction="over", threshold=25.5, odds=-110),
            Line(direction="over", threshold=27.5, odds=150),
        ),
    ),
    ExampleScenario(
        id="mixed",
        name="Mixed Over/Under",
        description="Demonstrates direction normalization with both Over and Under lines",
        lines=(
            Line(direction="over", threshold=48.5, odds=110),
            Line(direction="under", threshold=49.5, odds=-130),
        ),
    ),
    ExampleScenario(
        id="granular",
        name="Granular Distribution",
        description="Multiple lines create a detailed probability breakdown",
        lines=(
            Line(direction="over", threshold=27.5, odds=-150),
            Line(direction="over", threshold=28.5, odds=-110),
            Line(direction="over", threshold=29.5, odds=150),
            Line(direction="over", threshold=30.5, odds=220),
        ),
    ),
    ExampleScenario(
        id="wide-spread",
        name="Wide Spread",
        description="Large gap between lines - heavy favorite vs big underdog",
        lines=(
            Line(direction="over", threshold=45.5, odds=-200),
            Line(direction="over", threshold=50.5, odds=300),
        ),
    ),
]


def get_scenario(scenario_id: str) -> ExampleScenario | None:
    """Look up a scenario by id, None if unknown."""
    for scenario in EXAMPLE_SCENARIOS:
        if scenario.id == scenario_id:
            return scenario
    return None
