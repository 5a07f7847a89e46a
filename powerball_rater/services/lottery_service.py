"""Lottery service: owns the drawing collection and orchestrates the core.

A ``LotteryContext`` is passed explicitly to every caller. Each mutation of the
drawing collection triggers a full frequency recomputation.
"""

import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from loguru import logger

from powerball_rater.constants import (
    POWERBALL_MAX,
    POWERBALL_MIN,
    WHITE_BALL_COUNT,
    WHITE_BALL_MAX,
    WHITE_BALL_MIN,
)
from powerball_rater.errors import (
    DataNotReadyError,
    DuplicateDrawingError,
    InvalidDrawingError,
    NoDrawingsError,
)
from powerball_rater.parser.drawing_parser import parse_data_content, parse_int
from powerball_rater.schemas.drawing import Drawing, ParseResult
from powerball_rater.schemas.frequency import FrequencyData, HotColdAnalysis
from powerball_rater.schemas.ticket import Ticket
from powerball_rater.services import frequency_service
from powerball_rater.services import ticket_generator
from powerball_rater.services.session import TicketSession
from powerball_rater.services.ticket_generator import RandomSource

_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$", re.ASCII)


def _parse_int(value) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return parse_int(str(value))
    except ValueError:
        return None


def validate_drawing(
    date: str,
    white_balls: Sequence[int | str],
    powerball: int | str,
    existing: Sequence[Drawing] = (),
) -> Drawing:
    """Validate a manually entered drawing and return it normalised.

    Raises:
        InvalidDrawingError: with a human-readable reason.
    """
    if not date or not _DATE_RE.match(date):
        raise InvalidDrawingError("Invalid date format. Use MM/DD/YYYY.")
    try:
        datetime.strptime(date, "%m/%d/%Y")
    except ValueError:
        raise InvalidDrawingError("Invalid date format. Use MM/DD/YYYY.") from None

    if isinstance(white_balls, (str, bytes)) or len(white_balls) != WHITE_BALL_COUNT:
        raise InvalidDrawingError("Must have exactly 5 white balls.")

    seen: list[int] = []
    for ball in white_balls:
        num = _parse_int(ball)
        if num is None or num < WHITE_BALL_MIN or num > WHITE_BALL_MAX:
            raise InvalidDrawingError(f'White ball "{ball}" is invalid. Must be 1-69.')
        if num in seen:
            raise InvalidDrawingError(f"Duplicate white ball: {num}")
        seen.append(num)

    pb = _parse_int(powerball)
    if pb is None or pb < POWERBALL_MIN or pb > POWERBALL_MAX:
        raise InvalidDrawingError(f'PowerBall "{powerball}" is invalid. Must be 1-26.')

    if any(d.date == date for d in existing):
        raise DuplicateDrawingError(f"A drawing for {date} already exists.")

    return Drawing(date=date, white_balls=tuple(seen), powerball=pb)


class LotteryContext:
    """Drawings, their frequency data and the ticket session for one run."""

    def __init__(self, rng: RandomSource | None = None):
        self.rng = rng
        self.session = TicketSession()
        self._base_drawings: list[Drawing] = []
        self._user_drawings: list[Drawing] = []
        self._frequency_data: FrequencyData | None = None

    # --- Drawing collection ---

    @property
    def drawings(self) -> list[Drawing]:
        """User-added drawings (newest first) followed by the loaded history."""
        return self._user_drawings + self._base_drawings

    @property
    def is_loaded(self) -> bool:
        return self._frequency_data is not None

    @property
    def frequency_data(self) -> FrequencyData:
        if self._frequency_data is None:
            raise DataNotReadyError()
        return self._frequency_data

    @property
    def latest_date(self) -> str | None:
        drawings = self.drawings
        return drawings[0].date if drawings else None

    def _recompute(self) -> None:
        self._frequency_data = frequency_service.analyze_frequency(self.drawings)

    def load_content(self, content: str) -> ParseResult:
        """Replace the history with drawings parsed from ``content``.

        Raises:
            NoDrawingsError: nothing parseable; the previous state is kept.
        """
        result = parse_data_content(content)
        if not result.drawings:
            logger.error("No valid drawings found ({} errors)", len(result.errors))
            raise NoDrawingsError(errors=result.errors)

        self._base_drawings = list(result.drawings)
        known = {d.date for d in self._base_drawings}
        self._user_drawings = [d for d in self._user_drawings if d.date not in known]
        self._recompute()
        logger.info("Loaded {} drawings ({} user-added)", len(self._base_drawings), len(self._user_drawings))
        return result

    def load_file(self, path: Path) -> ParseResult:
        logger.info("Loading drawings from {}", path)
        return self.load_content(Path(path).read_text(encoding="utf-8", errors="replace"))

    def add_drawing(
        self, date: str, white_balls: Sequence[int | str], powerball: int | str
    ) -> Drawing:
        """Validate and prepend a new drawing, then recompute frequencies."""
        try:
            drawing = validate_drawing(date, white_balls, powerball, self.drawings)
        except InvalidDrawingError as e:
            logger.warning("Rejected drawing for {}: {}", date, e)
            raise

        self._user_drawings.insert(0, drawing)
        self._recompute()
        logger.info("Drawing for {} added, {} drawings total", date, len(self.drawings))
        return drawing

    def reset_to_default(self) -> int:
        """Drop user-added drawings. Returns the remaining drawing count."""
        removed = len(self._user_drawings)
        self._user_drawings = []
        if self._base_drawings:
            self._recompute()
        else:
            self._frequency_data = None
        logger.info("Reset to default data, removed {} user drawings", removed)
        return len(self._base_drawings)

    # --- Statistics ---

    def hot_cold(self, count: int = 10) -> HotColdAnalysis:
        freq = self.frequency_data.white_ball_frequencies
        return HotColdAnalysis(
            hot_numbers=frequency_service.get_hot_numbers(freq, count),
            cold_numbers=frequency_service.get_cold_numbers(freq, count),
            count=count,
        )

    # --- Tickets ---

    def generate(self, count: int = 1) -> list[Ticket]:
        tickets = ticket_generator.generate_multiple_tickets(self.frequency_data, count, self.rng)
        self.session.add_tickets(tickets)
        return tickets

    def rate(self, white_balls: Sequence[int | None], powerball: int | None) -> Ticket:
        ticket = ticket_generator.rate_numbers(white_balls, powerball, self.frequency_data)
        self.session.add_ticket(ticket)
        return ticket
