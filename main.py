"""
PantryChef FastAPI Application
Main entry point: configuration, shared clients, middleware and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import health, ingredients, recipes
from adapters import mongo_adapter, openai_adapter
from app.config import settings
from api.middleware import (
    RequestLoggingMiddleware,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("pantrychef.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Missing credentials or API key abort startup with ConfigurationMissing.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    mongo_uri, mongo_db = settings.resolve_mongo_credentials()
    api_key = settings.require_openai_api_key()

    # Ping blocks, keep it off the event loop
    await anyio.to_thread.run_sync(mongo_adapter.connect, mongo_uri, mongo_db)
    openai_adapter.connect(api_key, timeout=settings.openai_timeout_sec)

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        try:
            mongo_adapter.close()
        except Exception as e:
            _logger.exception("Error closing MongoDB adapter during shutdown: %s", e)

        try:
            openai_adapter.close()
        except Exception as e:
            _logger.exception("Error closing OpenAI adapter during shutdown: %s", e)


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceError, service_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router)
app.include_router(ingredients.router)
app.include_router(recipes.router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
