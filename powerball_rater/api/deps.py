"""Dependency injection for FastAPI."""

from fastapi import HTTPException, Request

from powerball_rater.errors import DataNotReadyError
from powerball_rater.schemas.frequency import FrequencyData
from powerball_rater.services.lottery_service import LotteryContext


def get_context(request: Request) -> LotteryContext:
    """Return the application-wide lottery context."""
    return request.app.state.context


def require_frequency_data(request: Request) -> FrequencyData:
    """Frequency data for the current drawings, 503 until data is loaded."""
    try:
        return get_context(request).frequency_data
    except DataNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))
