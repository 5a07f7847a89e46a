"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from powerball_rater.config import settings
from powerball_rater.errors import NoDrawingsError
from powerball_rater.services.lottery_service import LotteryContext
from powerball_rater.services.ticket_generator import make_random_source

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        settings.LOG_DIR / "app.log", rotation="10 MB", retention="7 days", level="INFO"
    )

    rng = make_random_source(settings.RANDOM_SEED) if settings.RANDOM_SEED is not None else None
    app.state.context = LotteryContext(rng=rng)

    if settings.DATA_FILE:
        try:
            app.state.context.load_file(settings.DATA_FILE)
        except (OSError, NoDrawingsError) as e:
            logger.warning("Failed to load data from {}: {}", settings.DATA_FILE, e)

    yield

    logger.info("Application shutdown complete")
    logger.remove(sink_id)


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Frequency-weighted PowerBall ticket generator and rater",
    lifespan=lifespan,
)

# Include API routers
from powerball_rater.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
