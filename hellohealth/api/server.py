"""FastAPI server: pages plus the aggregate health endpoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hellohealth.api.health_routes import health_router
from hellohealth.api.routes import router
from hellohealth.config import settings
from hellohealth.health.checker import CompositeChecker

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "Health endpoint ready: %d checks (%s)",
        len(app.state.checker),
        ", ".join(app.state.checker.names) or "none",
    )
    yield


def create_app(
    checker: CompositeChecker | None = None,
    data_dir: str | None = None,
) -> FastAPI:
    """Create the application around an already wired checker tree.

    The checker is not touched after this point except to call check(), so
    finish add_checker/add_info calls before handing it over.
    """
    app = FastAPI(
        title="hellohealth",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.checker = checker if checker is not None else CompositeChecker()
    app.state.data_dir = data_dir if data_dir is not None else settings.data_dir

    # Health first: the page router's /{name} would otherwise catch /health
    app.include_router(health_router)
    app.include_router(router)

    return app
