"""Pydantic schemas package."""

from powerball_rater.schemas.drawing import Drawing, ParseResult
from powerball_rater.schemas.frequency import FrequencyData, NumberFrequency
from powerball_rater.schemas.ticket import (
    ProbabilityRecord,
    Rating,
    TicketProbabilities,
    Ticket,
)

__all__ = [
    "Drawing",
    "ParseResult",
    "FrequencyData",
    "NumberFrequency",
    "ProbabilityRecord",
    "Rating",
    "TicketProbabilities",
    "Ticket",
]
