"""FastAPI application exposing the listing store."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hmo_finder.api.routes import router
from hmo_finder.api.services import Services, build_services
from hmo_finder.config import HmoFinderConfig
from hmo_finder.exceptions import GeneratorError, PropertyNotFoundError, ValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    services: Services = app.state.services
    # Seeding and stopping block, so they run off the event loop
    if not len(services.store):
        try:
            await asyncio.to_thread(services.refresh.seed)
        except GeneratorError:
            logger.error("Could not seed the store, starting empty")
    logger.info("Store ready: %s", services.store.summary())

    if services.config.refresh.enabled:
        services.auto_refresher.start()
    try:
        yield
    finally:
        await asyncio.to_thread(services.auto_refresher.stop)


def create_app(
    config: HmoFinderConfig | None = None,
    services: Services | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Parameters
    ----------
    config : HmoFinderConfig | None
        Used to build services when ``services`` is not given.
    services : Services | None
        Pre-built services, e.g. a store shared with a test.
    """
    services = services or build_services(config)

    app = FastAPI(title="HMO Finder API", lifespan=lifespan)
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=services.config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PropertyNotFoundError)
    async def not_found_handler(request: Request, exc: PropertyNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"message": "Property not found"})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(GeneratorError)
    async def generator_handler(request: Request, exc: GeneratorError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"message": "Error refreshing properties", "error": str(exc)},
        )

    app.include_router(router)
    return app
