"""
FastAPI application factory.

Domain errors are mapped to HTTP status codes here: unknown technicians or
packages become 404, unparseable dates/times and (in strict mode) unknown
service ids become 400.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..catalog import Catalog
from ..config import AppConfig
from ..domain.exceptions import InvalidTimeInputError, NotFoundError, UnknownServiceError
from ..domain.slot_generator import BookingConflictChecker
from ..services.catalog_queries import CatalogService
from ..services.scheduling import SchedulingService
from .routes import scheduling_router, services_router, technicians_router, vehicles_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def bad_input_handler(request: Request, exc: Exception):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(
    config: Optional[AppConfig] = None,
    catalog: Optional[Catalog] = None,
    conflict_checker: Optional[BookingConflictChecker] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        config: Application configuration, defaults when omitted
        catalog: Reference data, loaded from the config when omitted
        conflict_checker: Booking conflict checker for slot generation
    """
    if config is None:
        config = AppConfig()
    if catalog is None:
        catalog = config.load_catalog()

    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Application starting up with {len(catalog.services)} services "
            f"and {len(catalog.technicians)} technicians"
        )
        yield
        logger.info("Application shutting down...")

    app = FastAPI(title="Tint Scheduler API", version=__version__, lifespan=lifespan)

    app.state.config = config
    app.state.scheduling_service = SchedulingService.from_config(
        config,
        catalog,
        conflict_checker=conflict_checker,
    )
    app.state.catalog_service = CatalogService(catalog)

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidTimeInputError, bad_input_handler)
    app.add_exception_handler(UnknownServiceError, bad_input_handler)

    app.include_router(scheduling_router)
    app.include_router(technicians_router)
    app.include_router(services_router)
    app.include_router(vehicles_router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "version": __version__}

    return app
