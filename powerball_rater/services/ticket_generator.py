"""Ticket generator: frequency-weighted random selection without replacement."""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import numpy as np
from loguru import logger

from powerball_rater.config import settings
from powerball_rater.constants import (
    POWERBALL_MAX,
    POWERBALL_MIN,
    WHITE_BALL_COUNT,
    WHITE_BALL_MAX,
    WHITE_BALL_MIN,
)
from powerball_rater.errors import InvalidTicketError, NoCandidatesError
from powerball_rater.schemas.frequency import FrequencyData
from powerball_rater.schemas.ticket import Ticket
from powerball_rater.services.scoring_service import score_numbers

# Zero-argument callable returning a uniform float in [0, 1)
RandomSource = Callable[[], float]


def make_random_source(seed: int | None = None) -> RandomSource:
    """Build a uniform [0, 1) source backed by a numpy Generator."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


_default_source: RandomSource = make_random_source(settings.RANDOM_SEED)


def weighted_random_select(
    frequencies: dict[int, int],
    exclude: set[int] | None = None,
    rng: RandomSource | None = None,
) -> int:
    """Pick one number with probability proportional to ``frequency + 1``.

    The +1 keeps never-drawn numbers selectable.
    """
    exclude = exclude or set()
    rng = rng or _default_source

    available = [(num, freq + 1) for num, freq in frequencies.items() if num not in exclude]
    if not available:
        raise NoCandidatesError()

    total_weight = sum(w for _, w in available)
    remaining = rng() * total_weight
    for num, weight in available:
        remaining -= weight
        if remaining <= 0:
            return num

    # Float residue only
    return available[-1][0]


def _build_ticket(
    white_balls: Sequence[int],
    powerball: int,
    frequency_data: FrequencyData,
    is_rated: bool = False,
) -> Ticket:
    whites = tuple(sorted(white_balls))
    return Ticket(
        white_balls=whites,
        powerball=powerball,
        probabilities=score_numbers(whites, powerball, frequency_data),
        timestamp=datetime.now(timezone.utc),
        is_rated=is_rated,
    )


def generate_ticket(
    frequency_data: FrequencyData, rng: RandomSource | None = None
) -> Ticket:
    """Generate one ticket: 5 distinct weighted white balls plus a weighted powerball."""
    selected: list[int] = []
    excluded: set[int] = set()
    for _ in range(WHITE_BALL_COUNT):
        ball = weighted_random_select(frequency_data.white_ball_frequencies, excluded, rng)
        selected.append(ball)
        excluded.add(ball)

    powerball = weighted_random_select(frequency_data.powerball_frequencies, rng=rng)
    return _build_ticket(selected, powerball, frequency_data)


def generate_multiple_tickets(
    frequency_data: FrequencyData, count: int = 1, rng: RandomSource | None = None
) -> list[Ticket]:
    tickets = [generate_ticket(frequency_data, rng) for _ in range(count)]
    logger.debug("Generated {} tickets", len(tickets))
    return tickets


def _validate_combination(white_balls: Sequence[int | None], powerball: int | None) -> None:
    if (
        len(white_balls) != WHITE_BALL_COUNT
        or any(n is None or n < 1 for n in white_balls)
        or powerball is None
        or powerball < 1
    ):
        raise InvalidTicketError(
            "Please enter all numbers (5 white balls 1-69, 1 PowerBall 1-26)"
        )
    if any(n < WHITE_BALL_MIN or n > WHITE_BALL_MAX for n in white_balls):
        raise InvalidTicketError("White balls must be between 1 and 69")
    if powerball < POWERBALL_MIN or powerball > POWERBALL_MAX:
        raise InvalidTicketError("PowerBall must be between 1 and 26")
    if len(set(white_balls)) != WHITE_BALL_COUNT:
        raise InvalidTicketError("White balls must be unique (no duplicates)")


def rate_numbers(
    white_balls: Sequence[int | None],
    powerball: int | None,
    frequency_data: FrequencyData,
) -> Ticket:
    """Score a user-chosen combination exactly as a generated ticket would be.

    Raises:
        InvalidTicketError: numbers are missing, out of range or repeated.
    """
    _validate_combination(white_balls, powerball)
    return _build_ticket(white_balls, powerball, frequency_data, is_rated=True)
