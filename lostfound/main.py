from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lostfound.core.config import get_settings
from lostfound.core.logging import configure_logging, request_id_middleware
from lostfound.matching.router import router as matching_router

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.ENV, settings.DEBUG)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    logger.info(f"Starting {settings.APP_NAME} (env: {settings.ENV})")
    logger.info(
        f"Browse threshold: {settings.MATCH_BROWSE_THRESHOLD:.2f} | "
        f"Max results: {settings.MATCH_MAX_RESULTS}"
    )

    yield

    logger.info(f"{settings.APP_NAME} shut down")


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.middleware("http")(request_id_middleware)
app.include_router(matching_router)


@app.get("/health")
def health_check():
    logger.debug(f"Health check endpoint called (env: {settings.ENV})")
    return {"status": "healthy", "env": settings.ENV}
