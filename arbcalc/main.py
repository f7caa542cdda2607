"""FastAPI application entrypoint.

Arbitrage Stake Calculator

ADVISORY-ONLY: This service does not place bets.
All actions must be executed by humans.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .engine import generate_disclaimer
from .config import API_HOST, API_PORT, CORS_ORIGINS, LOG_LEVEL

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Arbitrage Calculator - Starting")
    logger.info(generate_disclaimer())

    yield

    logger.info("Shutdown complete.")


app = FastAPI(
    title="Arbitrage Calculator",
    description="""
    Stake distribution and profit calculator for betting arbitrage.

    **ADVISORY-ONLY**: This service provides information only.
    No bets are placed automatically.

    Features:
    - Back, lay and freebet legs with exchange commission
    - Pinned, manual or proportional stake distribution
    - Profit for every possible outcome
    - Human-readable bet instructions
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,  # Must be False when using "*"
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Arbitrage Calculator",
        "docs": "/docs",
        "api": "/api",
        "disclaimer": generate_disclaimer(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "arbcalc.main:app",
        host=API_HOST,
        port=API_PORT,
    )
