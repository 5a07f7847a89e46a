"""Pydantic schemas for historical drawings."""

from pydantic import BaseModel, field_validator


class Drawing(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    date: str
    white_balls: tuple[int, ...]
    powerball: int

    @field_validator("white_balls")
    @classmethod
    def _sort_white_balls(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        return tuple(sorted(value))


class ParseResult(BaseModel):
    drawings: list[Drawing] = []
    errors: list[str] = []
    total_lines: int = 0
    valid_lines: int = 0


class LoadSummary(BaseModel):
    total_lines: int
    valid_lines: int
    total_drawings: int
    errors: list[str]
    latest_date: str | None = None


class NewDrawingRequest(BaseModel):
    date: str
    white_balls: list[int | str]
    powerball: int | str


class AddDrawingResponse(BaseModel):
    success: bool
    message: str
    total_drawings: int


class LoadDataRequest(BaseModel):
    content: str
