"""Historical drawing data endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from powerball_rater.api.deps import get_context
from powerball_rater.errors import DuplicateDrawingError, InvalidDrawingError, NoDrawingsError
from powerball_rater.schemas.drawing import (
    AddDrawingResponse,
    Drawing,
    LoadDataRequest,
    LoadSummary,
    NewDrawingRequest,
)
from powerball_rater.services.lottery_service import LotteryContext

router = APIRouter()


@router.post("/load", response_model=LoadSummary)
async def load_data(
    request: LoadDataRequest,
    ctx: LotteryContext = Depends(get_context),
):
    """Replace the historical drawings with the posted file content."""
    try:
        result = ctx.load_content(request.content)
    except NoDrawingsError as e:
        detail = e.errors[0] if e.errors else str(e)
        raise HTTPException(status_code=400, detail=detail)

    return LoadSummary(
        total_lines=result.total_lines,
        valid_lines=result.valid_lines,
        total_drawings=len(ctx.drawings),
        errors=result.errors,
        latest_date=ctx.latest_date,
    )


@router.get("/drawings", response_model=list[Drawing])
async def list_drawings(ctx: LotteryContext = Depends(get_context)):
    return ctx.drawings


@router.get("/latest-date", response_model=str | None)
async def latest_date(ctx: LotteryContext = Depends(get_context)):
    """Date of the most recent drawing."""
    return ctx.latest_date


@router.post("/drawings", response_model=AddDrawingResponse)
async def add_drawing(
    request: NewDrawingRequest,
    ctx: LotteryContext = Depends(get_context),
):
    """Add a manually entered drawing."""
    try:
        ctx.add_drawing(request.date, request.white_balls, request.powerball)
    except DuplicateDrawingError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidDrawingError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AddDrawingResponse(
        success=True,
        message=f"Drawing for {request.date} added successfully!",
        total_drawings=len(ctx.drawings),
    )


@router.post("/reset", response_model=AddDrawingResponse)
async def reset_data(ctx: LotteryContext = Depends(get_context)):
    """Drop user-added drawings and go back to the loaded history."""
    total = ctx.reset_to_default()
    return AddDrawingResponse(
        success=True,
        message="Data reset to default!",
        total_drawings=total,
    )
