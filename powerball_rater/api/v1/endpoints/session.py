"""Session tracking endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends

from powerball_rater.api.deps import get_context
from powerball_rater.schemas.ticket import Leaderboard, SessionStats, Ticket
from powerball_rater.services.lottery_service import LotteryContext

router = APIRouter()


@router.get("", response_model=SessionStats)
async def session_stats(ctx: LotteryContext = Depends(get_context)):
    return ctx.session.stats()


@router.get("/tickets", response_model=list[Ticket])
async def session_tickets(
    sort: Literal["newest", "hot", "cold"] = "newest",
    ctx: LotteryContext = Depends(get_context),
):
    """Tickets generated or rated this session."""
    return ctx.session.sorted_tickets(sort)


@router.get("/leaderboard", response_model=Leaderboard)
async def leaderboard(ctx: LotteryContext = Depends(get_context)):
    return ctx.session.leaderboard()


@router.post("/reset", response_model=SessionStats)
async def reset_session(ctx: LotteryContext = Depends(get_context)):
    ctx.session.reset()
    return ctx.session.stats()
