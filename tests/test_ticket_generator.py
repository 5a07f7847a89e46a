from datetime import datetime

import pytest

from powerball_rater.errors import InvalidTicketError, NoCandidatesError
from powerball_rater.services.frequency_service import analyze_frequency
from powerball_rater.services.ticket_generator import (
    generate_multiple_tickets,
    generate_ticket,
    make_random_source,
    rate_numbers,
    weighted_random_select,
)


def _forcing_value(frequencies, exclude, target):
    """Uniform draw that makes weighted selection land on ``target``."""
    weights = [(n, f + 1) for n, f in frequencies.items() if n not in exclude]
    total = sum(w for _, w in weights)
    before = 0
    for num, weight in weights:
        if num == target:
            return (before + weight / 2) / total
        before += weight
    raise AssertionError(f"{target} not selectable")


def test_select_first_and_last_candidate():
    table = {1: 0, 2: 3, 3: 1}
    assert weighted_random_select(table, rng=lambda: 0.0) == 1
    assert weighted_random_select(table, rng=lambda: 0.9999999) == 3


def test_select_uses_frequency_plus_one_weights():
    # weights 1, 4, 2 -> total 7; 0.2 * 7 = 1.4 falls in the second bucket
    table = {1: 0, 2: 3, 3: 1}
    assert weighted_random_select(table, rng=lambda: 0.2) == 2
    # 5.5 / 7 falls past 1 + 4 into the third bucket
    assert weighted_random_select(table, rng=lambda: 5.5 / 7) == 3


def test_select_respects_exclusions():
    table = {1: 100, 2: 0}
    assert weighted_random_select(table, exclude={1}, rng=lambda: 0.0) == 2


def test_select_without_candidates_fails():
    with pytest.raises(NoCandidatesError, match="No numbers available"):
        weighted_random_select({1: 3}, exclude={1}, rng=lambda: 0.5)
    with pytest.raises(NoCandidatesError):
        weighted_random_select({}, rng=lambda: 0.5)


def test_never_drawn_numbers_remain_selectable():
    freq = analyze_frequency([])
    rng = make_random_source(7)
    seen = {weighted_random_select(freq.powerball_frequencies, rng=rng) for _ in range(2000)}
    assert seen == set(range(1, 27))


def test_generate_ticket_shape(frequency_data):
    ticket = generate_ticket(frequency_data, rng=make_random_source(1))
    assert len(ticket.white_balls) == 5
    assert list(ticket.white_balls) == sorted(set(ticket.white_balls))
    assert 1 <= ticket.powerball <= 26
    assert [r.number for r in ticket.probabilities.white_balls] == list(ticket.white_balls)
    assert ticket.probabilities.powerball.number == ticket.powerball
    assert isinstance(ticket.timestamp, datetime)
    assert ticket.is_rated is False


def test_generated_tickets_always_valid(frequency_data):
    rng = make_random_source(12345)
    for ticket in generate_multiple_tickets(frequency_data, 10_000, rng):
        whites = ticket.white_balls
        assert len(whites) == 5
        assert all(a < b for a, b in zip(whites, whites[1:]))
        assert all(1 <= n <= 69 for n in whites)
        assert 1 <= ticket.powerball <= 26


def test_generate_multiple_count(frequency_data):
    assert generate_multiple_tickets(frequency_data, 0, make_random_source(3)) == []
    assert len(generate_multiple_tickets(frequency_data, 4, make_random_source(3))) == 4


def test_zero_value_source_picks_lowest_numbers(frequency_data):
    ticket = generate_ticket(frequency_data, rng=lambda: 0.0)
    assert ticket.white_balls == (1, 2, 3, 4, 5)
    assert ticket.powerball == 1


def test_rate_matches_generated_probabilities(single_drawing_frequency, sequence_source):
    freq = single_drawing_frequency
    picks = [30, 2, 69, 1, 7]
    values = []
    excluded = set()
    for target in picks:
        values.append(_forcing_value(freq.white_ball_frequencies, excluded, target))
        excluded.add(target)
    values.append(_forcing_value(freq.powerball_frequencies, set(), 10))

    generated = generate_ticket(freq, rng=sequence_source(values))
    rated = rate_numbers(picks, 10, freq)

    assert generated.white_balls == (1, 2, 7, 30, 69)
    assert rated.white_balls == generated.white_balls
    assert rated.powerball == generated.powerball == 10
    assert rated.probabilities == generated.probabilities
    assert rated.is_rated is True


@pytest.mark.parametrize(
    "white_balls, powerball, message",
    [
        ([1, 2, 3, 4], 10, "Please enter all numbers"),
        ([1, 2, 3, 4, None], 10, "Please enter all numbers"),
        ([1, 2, 3, 4, 5], None, "Please enter all numbers"),
        ([0, 2, 3, 4, 5], 10, "Please enter all numbers"),
        ([1, 2, 3, 4, 70], 10, "White balls must be between 1 and 69"),
        ([1, 2, 3, 4, 5], 27, "PowerBall must be between 1 and 26"),
        ([1, 1, 3, 4, 5], 10, "White balls must be unique"),
    ],
)
def test_rate_rejects_invalid_combinations(frequency_data, white_balls, powerball, message):
    with pytest.raises(InvalidTicketError, match=message):
        rate_numbers(white_balls, powerball, frequency_data)
