"""
API Composer - FastAPI Application Entry Point

Backend of an interactive HTTP request composer: builds requests from raw
form input, sends them to a fixed API origin and returns display-ready
outcomes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .exceptions import register_exception_handlers
from .routers import compose


logger = logging.getLogger("api_composer.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("API Composer started base_url=%s", settings.base_url)
    yield
    logger.info("API Composer stopped")


app = FastAPI(
    title="API Composer",
    description="Compose HTTP requests against a fixed API origin and view formatted responses",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Configure CORS middleware for the browser UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().parsed_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "API Composer",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(compose.router)
