"""FastAPI application for the configurator checkout backend."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from midi_configurator import __version__
from midi_configurator.api.routes import orders_router, payments_router, products_router
from midi_configurator.config import Settings, get_settings
from midi_configurator.observability import setup_logging
from midi_configurator.payments import Mailer
from midi_configurator.utils import get_logger

logger = get_logger("api")

API_TITLE = "MIDI Configurator API"
API_DESCRIPTION = """
Checkout backend for the 3D MIDI controller configurators.

## Features
- **Payment signing**: Signatures for the PayU checkout form
- **Payment webhook**: Notifies the shop of approved payments by email
- **Order notifications**: Emails the chosen colors of an order
- **Palettes**: Color swatches offered per product
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting MIDI configurator API...")
    if not app.state.mailer.configured:
        logger.warning("Notification email is not configured; emails will fail")
    yield
    logger.info("Shutting down MIDI configurator API...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=API_TITLE,
        version=__version__,
        description=API_DESCRIPTION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mailer = Mailer(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(payments_router, prefix="/api", tags=["Payments"])
    app.include_router(orders_router, prefix="/api", tags=["Orders"])
    app.include_router(products_router, prefix="/api/products", tags=["Products"])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "version": __version__}

    return app
