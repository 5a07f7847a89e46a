"""Pydantic schemas for frequency statistics."""

from pydantic import BaseModel


class FrequencyData(BaseModel):
    model_config = {"frozen": True}

    white_ball_frequencies: dict[int, int]
    powerball_frequencies: dict[int, int]
    total_drawings: int
    total_white_ball_draws: int
    total_powerball_draws: int
    white_ball_frequency_sum: int
    powerball_frequency_sum: int


class NumberFrequency(BaseModel):
    number: int
    count: int


class HotColdAnalysis(BaseModel):
    hot_numbers: list[NumberFrequency]
    cold_numbers: list[NumberFrequency]
    count: int
