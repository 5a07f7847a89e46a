"""Scoring service: historical vs. expected probability and ticket ratings."""

from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from powerball_rater.constants import (
    COLD_THRESHOLD,
    HOT_THRESHOLD,
    POWERBALL_MAX,
    WHITE_BALL_MAX,
)
from powerball_rater.schemas.frequency import FrequencyData
from powerball_rater.schemas.ticket import ProbabilityRecord, Rating, TicketProbabilities
from powerball_rater.services.frequency_service import get_sorted_by_frequency

# (lower bound inclusive, rating), checked top-down
RATING_BANDS: list[tuple[float, Rating]] = [
    (115, Rating(
        label="Very Hot", slug="very-hot",
        description="Numbers appear significantly more often than expected",
    )),
    (105, Rating(
        label="Hot", slug="hot",
        description="Numbers appear more often than expected",
    )),
    (95, Rating(
        label="Average", slug="average",
        description="Numbers appear at expected frequency",
    )),
    (85, Rating(
        label="Cold", slug="cold",
        description="Numbers appear less often than expected",
    )),
]

VERY_COLD = Rating(
    label="Very Cold", slug="very-cold",
    description="Numbers appear significantly less often than expected",
)


def round_half_up(value: float, digits: int) -> float:
    """Round the exact binary value half away from zero, like fixed-point display."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_probability(
    number: int,
    frequencies: dict[int, int],
    total_draws: int,
    max_number: int,
) -> ProbabilityRecord:
    """Probability annotation for one number against its frequency table.

    Args:
        number: The ball number.
        frequencies: Frequency table for the ball's pool.
        total_draws: Total balls drawn from that pool.
        max_number: Pool size (69 for white balls, 26 for the powerball).
    """
    frequency = frequencies.get(number, 0)

    historical = frequency / total_draws * 100 if total_draws > 0 else 0.0
    expected = 1 / max_number * 100
    relative = historical / expected * 100 if expected > 0 else 0.0

    rank = 0
    for idx, item in enumerate(get_sorted_by_frequency(frequencies), start=1):
        if item.number == number:
            rank = idx
            break

    return ProbabilityRecord(
        number=number,
        frequency=frequency,
        historical_probability=round_half_up(historical, 2),
        expected_probability=round_half_up(expected, 2),
        relative_strength=round_half_up(relative, 1),
        rank=rank,
        total_numbers=max_number,
        is_hot=relative > HOT_THRESHOLD,
        is_cold=relative < COLD_THRESHOLD,
    )


def get_ticket_rating(average_strength: float) -> Rating:
    for lower, rating in RATING_BANDS:
        if average_strength >= lower:
            return rating
    return VERY_COLD


def score_numbers(
    white_balls: Sequence[int],
    powerball: int,
    frequency_data: FrequencyData,
) -> TicketProbabilities:
    """Annotate a full 5+1 combination and rate it.

    Shared by generated and user-rated tickets so both produce identical
    records for the same numbers.
    """
    white_records = [
        calculate_probability(
            num,
            frequency_data.white_ball_frequencies,
            frequency_data.total_white_ball_draws,
            WHITE_BALL_MAX,
        )
        for num in white_balls
    ]
    pb_record = calculate_probability(
        powerball,
        frequency_data.powerball_frequencies,
        frequency_data.total_drawings,
        POWERBALL_MAX,
    )

    # Average over the displayed (rounded) strengths
    strengths = [r.relative_strength for r in white_records] + [pb_record.relative_strength]
    average = sum(strengths) / len(strengths)

    return TicketProbabilities(
        white_balls=white_records,
        powerball=pb_record,
        average_strength=round_half_up(average, 1),
        rating=get_ticket_rating(average),
    )
