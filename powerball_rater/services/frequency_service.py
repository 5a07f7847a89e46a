"""Frequency service: per-number counts and hot/cold ordering."""

from collections import Counter
from collections.abc import Sequence

from powerball_rater.constants import (
    POWERBALL_MAX,
    POWERBALL_MIN,
    WHITE_BALL_COUNT,
    WHITE_BALL_MAX,
    WHITE_BALL_MIN,
)
from powerball_rater.schemas.drawing import Drawing
from powerball_rater.schemas.frequency import FrequencyData, NumberFrequency


def _empty_table(low: int, high: int) -> dict[int, int]:
    return {num: 0 for num in range(low, high + 1)}


def analyze_frequency(drawings: Sequence[Drawing]) -> FrequencyData:
    """Count white ball and powerball appearances over all drawings.

    Both tables contain every number of their pool, zero when never drawn.
    Out-of-range values are ignored.
    """
    white_counter = Counter()
    pb_counter = Counter()
    for drawing in drawings:
        white_counter.update(drawing.white_balls)
        pb_counter[drawing.powerball] += 1

    white_freq = _empty_table(WHITE_BALL_MIN, WHITE_BALL_MAX)
    for num in white_freq:
        white_freq[num] = white_counter.get(num, 0)

    pb_freq = _empty_table(POWERBALL_MIN, POWERBALL_MAX)
    for num in pb_freq:
        pb_freq[num] = pb_counter.get(num, 0)

    total = len(drawings)
    return FrequencyData(
        white_ball_frequencies=white_freq,
        powerball_frequencies=pb_freq,
        total_drawings=total,
        total_white_ball_draws=total * WHITE_BALL_COUNT,
        total_powerball_draws=total,
        white_ball_frequency_sum=sum(white_freq.values()),
        powerball_frequency_sum=sum(pb_freq.values()),
    )


def get_sorted_by_frequency(frequencies: dict[int, int]) -> list[NumberFrequency]:
    """Numbers ordered by count descending; ties keep table order."""
    items = [NumberFrequency(number=num, count=count) for num, count in frequencies.items()]
    return sorted(items, key=lambda x: x.count, reverse=True)


def get_hot_numbers(frequencies: dict[int, int], count: int = 10) -> list[NumberFrequency]:
    return get_sorted_by_frequency(frequencies)[:count]


def get_cold_numbers(frequencies: dict[int, int], count: int = 10) -> list[NumberFrequency]:
    """Least frequent numbers, coldest first."""
    if count <= 0:
        return []
    return list(reversed(get_sorted_by_frequency(frequencies)[-count:]))
