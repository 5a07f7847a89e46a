"""Ticket generation and rating endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from powerball_rater.api.deps import get_context, require_frequency_data
from powerball_rater.config import settings
from powerball_rater.errors import InvalidTicketError
from powerball_rater.schemas.ticket import RateRequest, Ticket
from powerball_rater.services.lottery_service import LotteryContext

router = APIRouter(dependencies=[Depends(require_frequency_data)])


@router.post("/generate", response_model=list[Ticket])
async def generate(
    count: int = Query(1, ge=1, le=settings.MAX_TICKETS_PER_REQUEST),
    ctx: LotteryContext = Depends(get_context),
):
    """Generate frequency-weighted tickets and add them to the session."""
    return ctx.generate(count)


@router.post("/rate", response_model=Ticket)
async def rate(
    request: RateRequest,
    ctx: LotteryContext = Depends(get_context),
):
    """Rate a user-chosen combination against the history."""
    try:
        return ctx.rate(request.white_balls, request.powerball)
    except InvalidTicketError as e:
        raise HTTPException(status_code=400, detail=str(e))
