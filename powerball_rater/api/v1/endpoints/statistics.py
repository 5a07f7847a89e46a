"""Statistics API endpoints."""

from fastapi import APIRouter, Depends, Query

from powerball_rater.api.deps import get_context, require_frequency_data
from powerball_rater.config import settings
from powerball_rater.schemas.frequency import FrequencyData, HotColdAnalysis
from powerball_rater.services.lottery_service import LotteryContext

router = APIRouter()


@router.get("/frequency", response_model=FrequencyData)
async def frequency(freq: FrequencyData = Depends(require_frequency_data)):
    """Per-number frequency tables for both pools."""
    return freq


@router.get(
    "/hot-cold",
    response_model=HotColdAnalysis,
    dependencies=[Depends(require_frequency_data)],
)
async def hot_cold(
    count: int = Query(settings.HOT_COLD_COUNT, ge=1, le=69),
    ctx: LotteryContext = Depends(get_context),
):
    """Most and least frequently drawn white balls."""
    return ctx.hot_cold(count)
