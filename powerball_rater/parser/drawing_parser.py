"""Parser for historical Powerball result text.

Expected line format::

    12/15/2025; 4,11,33,54,62; Powerball: 7

Header and disclaimer lines are ignored. Lines that fail to parse are reported
in ``ParseResult.errors`` and never abort the rest of the file.
"""

import re
from collections.abc import Iterable

from loguru import logger

from powerball_rater.constants import (
    DATA_HEADER,
    HISTORICAL_POWERBALL_MAX,
    POWERBALL_MIN,
    SKIP_MARKERS,
    WHITE_BALL_COUNT,
    WHITE_BALL_MAX,
    WHITE_BALL_MIN,
)
from powerball_rater.schemas.drawing import Drawing, ParseResult

_POWERBALL_RE = re.compile(r"Powerball:\s*(\d+)", re.IGNORECASE | re.ASCII)
_INT_RE = re.compile(r"\s*\+?\d+\s*", re.ASCII)


def parse_int(token: str) -> int:
    """Parse a plain ASCII base-10 integer token.

    Raises:
        ValueError: for anything else, including `1_0` and non-ASCII digits.
    """
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"Not a base-10 integer: {token!r}")
    return int(token)


def is_skipped_line(line: str) -> bool:
    """True for header/disclaimer lines that are not drawings."""
    lowered = line.lower()
    return any(marker in lowered for marker in SKIP_MARKERS)


def _parse_row(line: str) -> Drawing | None:
    parts = [p.strip() for p in line.split(";")]
    if len(parts) != 3:
        return None

    date, white_str, powerball_str = parts

    white_balls = [parse_int(n) for n in white_str.split(",")]
    if len(white_balls) != WHITE_BALL_COUNT:
        return None
    if any(b < WHITE_BALL_MIN or b > WHITE_BALL_MAX for b in white_balls):
        return None
    if len(set(white_balls)) != WHITE_BALL_COUNT:
        return None

    match = _POWERBALL_RE.search(powerball_str)
    if not match:
        return None
    powerball = int(match.group(1))
    if powerball < POWERBALL_MIN or powerball > HISTORICAL_POWERBALL_MAX:
        return None

    return Drawing(date=date, white_balls=tuple(white_balls), powerball=powerball)


def parse_line(line: str) -> Drawing | None:
    """Parse a single line. Returns None for blank, header or invalid lines."""
    if not line or not line.strip():
        return None
    if is_skipped_line(line):
        return None

    try:
        return _parse_row(line)
    except Exception as e:
        logger.warning("Failed to parse line: {} - {}", line, e)
        return None


def parse_data_content(content: str) -> ParseResult:
    """Parse a whole historical data file's text content."""
    result = ParseResult()
    lines = content.split("\n")
    result.total_lines = len(lines)

    for i, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue

        drawing = parse_line(line)
        if drawing is not None:
            result.drawings.append(drawing)
            result.valid_lines += 1
        elif not is_skipped_line(line):
            result.errors.append(f"Line {i + 1}: Invalid format")

    logger.info(
        "Parsed {} drawings from {} lines ({} errors)",
        result.valid_lines, result.total_lines, len(result.errors),
    )
    return result


def format_drawing_line(drawing: Drawing) -> str:
    """Render a drawing back into the historical file's line format."""
    whites = ",".join(str(n) for n in drawing.white_balls)
    return f"{drawing.date}; {whites}; Powerball: {drawing.powerball}"


def format_data_content(drawings: Iterable[Drawing]) -> str:
    """Render drawings as a complete data file, header first."""
    lines = [DATA_HEADER]
    lines.extend(format_drawing_line(d) for d in drawings)
    return "\n".join(lines)
