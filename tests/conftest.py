import itertools

import pytest

from powerball_rater.parser.drawing_parser import parse_data_content
from powerball_rater.services.frequency_service import analyze_frequency

SAMPLE_DATA = """Results for Powerball
12/15/2025; 4,11,33,54,62; Powerball: 7
12/13/2025; 1,2,3,4,5; Powerball: 10
12/10/2025; 5,19,33,41,68; Powerball: 7
12/08/2025; 2,11,27,45,69; Powerball: 26
12/06/2025; 11,23,33,50,61; Powerball: 1
This information is provided for entertainment; accuracy is not guaranteed.
"""


class SequenceSource:
    """Deterministic random source cycling through fixed values."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def __call__(self) -> float:
        return next(self._values)


@pytest.fixture
def sample_text():
    return SAMPLE_DATA


@pytest.fixture
def drawings():
    return parse_data_content(SAMPLE_DATA).drawings


@pytest.fixture
def frequency_data(drawings):
    return analyze_frequency(drawings)


@pytest.fixture
def single_drawing_frequency():
    result = parse_data_content("01/01/2024; 1,2,3,4,5; Powerball: 10")
    return analyze_frequency(result.drawings)


@pytest.fixture
def sequence_source():
    return SequenceSource
