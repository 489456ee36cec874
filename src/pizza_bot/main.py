"""FastAPI application entry point."""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI

from pizza_bot.config import settings
from pizza_bot.webhook.handler import router as webhook_router
from pizza_bot.webhook.handler import session_manager

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle hook."""
    logger.info("Starting %s …", settings.app_name)
    sweeper = asyncio.create_task(
        session_manager.sweep_forever(settings.session_sweep_interval_seconds)
    )
    logger.info(
        "Session sweep scheduled every %ss", settings.session_sweep_interval_seconds
    )
    yield
    logger.info("Shutting down %s …", settings.app_name)
    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper


app = FastAPI(
    title=settings.app_name,
    description="WhatsApp pizza ordering bot",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(webhook_router)


@app.get("/health")
async def health_check():
    """Simple liveness probe."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "active_sessions": session_manager.active_count,
    }


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    logger.info("Webhook endpoint: http://localhost:%s/webhook", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
