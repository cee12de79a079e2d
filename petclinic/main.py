"""
FastAPI Application
===================

Main FastAPI app setup with all routes and exception handlers.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from petclinic.api.templating import VIEWS_ERROR, get_templates
from petclinic.api.v1 import owner_router, pet_router
from petclinic.core.config import get_settings
from petclinic.core.logging_config import setup_logging
from petclinic.di.container import get_container
from petclinic.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the DI container on startup and release the database client on shutdown.
    """
    container = get_container()
    logger.info("Pet Clinic started")
    yield
    if container.has("mongo_client"):
        container.get("mongo_client").close()
    logger.info("Pet Clinic stopped")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - Controller registration
    - Exception handler mapping lookup failures to 404 pages

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    application = FastAPI(
        title=settings.app_name,
        description="Server-rendered pages for managing clinic owners and their pets",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Register controllers
    application.include_router(owner_router, prefix="/owners")
    application.include_router(pet_router, prefix="/owners/{owner_id}")

    @application.exception_handler(EntityNotFoundError)
    async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> HTMLResponse:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
        return get_templates().TemplateResponse(
            request,
            VIEWS_ERROR,
            {"message": exc.message},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
