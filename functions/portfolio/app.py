"""
FastAPI application entry point for the portfolio backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from portfolio.config import get_settings
from portfolio.routes import router
from stats.errors import AggregationError

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Backend is running ✅"
STATS_ERROR_MESSAGE = "Failed to fetch competitive stats"


async def _aggregation_error_handler(request: Request, exc: AggregationError):
    # Causes were logged by the aggregator; the client only gets a generic error.
    logger.warning("Stats fetch failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": STATS_ERROR_MESSAGE})


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Portfolio Backend (FastAPI)", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AggregationError, _aggregation_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return ROOT_MESSAGE

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
