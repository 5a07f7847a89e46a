"""Pydantic schemas for tickets, probability annotations and session stats."""

from datetime import datetime

from pydantic import BaseModel


class ProbabilityRecord(BaseModel):
    model_config = {"frozen": True}

    number: int
    frequency: int
    historical_probability: float  # percent, 2 decimals
    expected_probability: float    # percent, 2 decimals
    relative_strength: float       # historical / expected as percent, 1 decimal
    rank: int                      # 1 = most frequent
    total_numbers: int
    is_hot: bool
    is_cold: bool


class Rating(BaseModel):
    model_config = {"frozen": True}

    label: str
    slug: str
    description: str


class TicketProbabilities(BaseModel):
    model_config = {"frozen": True}

    white_balls: list[ProbabilityRecord]
    powerball: ProbabilityRecord
    average_strength: float
    rating: Rating


class Ticket(BaseModel):
    model_config = {"frozen": True}

    white_balls: tuple[int, ...]
    powerball: int
    probabilities: TicketProbabilities
    timestamp: datetime
    is_rated: bool = False


class RateRequest(BaseModel):
    white_balls: list[int | None]
    powerball: int | None = None


class SessionStats(BaseModel):
    total_tickets: int
    unique_combinations: int
    coverage: str
    total_possible: int


class Leaderboard(BaseModel):
    hottest: Ticket | None = None
    coldest: Ticket | None = None
