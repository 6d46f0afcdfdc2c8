from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, AsyncGenerator, Optional
from contextlib import asynccontextmanager
import os
import logging
from dotenv import load_dotenv

from .config.relay_settings import RelaySettings
from .routers import command_relay
from .util.cors import PermissiveCORSMiddleware
from .util.errors import (
    RelayFailedError,
    http_exception_handler,
    relay_failed_handler,
    request_validation_handler,
)

# Configure logging at module level
logging.basicConfig(
    level=logging.WARNING,  # Set default to WARNING for all loggers
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Keep third-party loggers at INFO or WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")


def load_settings() -> RelaySettings:
    """Load .env (if present) and build settings from the environment"""
    if os.path.exists(ENV_PATH):
        load_dotenv(ENV_PATH)
        logger.info(f"Loaded environment from {ENV_PATH}")
    else:
        logger.debug(f"No .env file found at {ENV_PATH}, using system environment variables")
    return RelaySettings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
    settings: RelaySettings = app.state.relay_settings
    logger.info(
        f"Command relay forwarding to {settings.webhook_host} "
        f"(timeout: {settings.timeout_seconds or 'none'})"
    )
    yield


def create_app(settings: Optional[RelaySettings] = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Relay configuration; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = load_settings()

    # Application loggers follow the configured level
    logging.getLogger("src").setLevel(settings.log_level)

    app = FastAPI(
        lifespan=lifespan,
        title="Command Relay",
        description="Relays JSON commands to a fixed webhook and returns its response",
        version="1.0.0",
    )
    app.state.relay_settings = settings

    # Every response, errors included, allows any origin
    app.add_middleware(PermissiveCORSMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RelayFailedError, relay_failed_handler)

    # Include routers
    app.include_router(command_relay.router)

    return app


app = create_app()
