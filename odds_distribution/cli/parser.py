"""Parser for lines typed on the command line.

Parses lines like:
- "over 28.5 -110"
- "o28.5 @ +150"
- "Under 49.5 @ -130"
"""

import re
from collections.abc import Iterable

from pydantic import ValidationError

from odds_distribution.lines.models import Line, format_threshold

LINE_PATTERN = re.compile(
    r"""^\s*
    (?P<direction>over|under|o|u)\s*
    (?P<threshold>[+-]?\d+(?:\.\d+)?)
    (?:\s+|\s*@\s*)
    (?P<odds>[+-]?\d+)\s*$""",
    re.IGNORECASE | re.VERBOSE,
)

DIRECTION_ALIASES = {
    "o": "over",
    "over": "over",
    "u": "under",
    "under": "under",
}


class LineParseError(ValueError):
    """Raised when a line string cannot be turned into a Line."""


def parse_line(text: str) -> Line:
    """Parse one line string into a Line.

    Args:
        text: Direction, threshold and American odds, e.g. "over 28.5 @ -110"

    Returns:
        Validated Line

    Raises:
        LineParseError: If the text doesn't match or the odds are 0

    Examples:
        >>> parse_line("o28.5 @ -110")
        Line(direction='over', threshold=28.5, odds=-110)
    """
    match = LINE_PATTERN.match(text)
    if not match:
        raise LineParseError(
            f"Could not parse line '{text}'. Expected e.g. 'over 28.5 -110' or 'u49.5 @ +120'."
        )

    direction = DIRECTION_ALIASES[match.group("direction").lower()]
    odds = int(match.group("odds"))
    if odds == 0:
        raise LineParseError(f"Odds cannot be 0 in line '{text}'.")

    try:
        return Line(direction=direction, threshold=float(match.group("threshold")), odds=odds)
    except ValidationError as e:
        raise LineParseError(f"Invalid line '{text}': {e.errors()[0]['msg']}") from e


def parse_lines(texts: Iterable[str]) -> list[Line]:
    """Parse several line strings, rejecting duplicates.

    A threshold may be quoted once per direction; Over and Under at the same
    threshold form a pair.

    Raises:
        LineParseError: On the first unparseable or duplicate line
    """
    lines: list[Line] = []
    seen = set()
    for text in texts:
        line = parse_line(text)
        key = (line.direction, line.threshold_key)
        if key in seen:
            raise LineParseError(
                f"A {line.direction} {format_threshold(line.threshold)} line already exists. "
                "Remove it or use a different line value."
            )
        seen.add(key)
        lines.append(line)
    return lines
