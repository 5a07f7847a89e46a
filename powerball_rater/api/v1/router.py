"""Aggregate API v1 router."""

from fastapi import APIRouter

from powerball_rater.api.v1.endpoints import (
    data,
    statistics,
    tickets,
    session,
)

api_router = APIRouter()

api_router.include_router(data.router, prefix="/data", tags=["Data"])
api_router.include_router(statistics.router, prefix="/stats", tags=["Statistics"])
api_router.include_router(tickets.router, prefix="/tickets", tags=["Tickets"])
api_router.include_router(session.router, prefix="/session", tags=["Session"])
