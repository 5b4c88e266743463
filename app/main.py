"""SPA static gateway application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings
from app.api.routes_spa import router as spa_router
from app.static.gateway import StaticGateway

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report what will be served."""
    gateway: StaticGateway = app.state.gateway
    logger.info(f"Serving static files from {gateway.root}")
    index_path = gateway.fallback()
    if not index_path.is_file():
        logger.warning(f"Fallback document missing: {index_path}")

    yield

    logger.info("Static gateway shutting down...")


def create_app(settings: Settings) -> FastAPI:
    # Every path belongs to the SPA, so the generated docs routes are disabled
    app = FastAPI(
        title="SPA Gateway",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.gateway = StaticGateway(settings)

    app.include_router(spa_router)
    return app
