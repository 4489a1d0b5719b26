"""
Artwork Catalog API - Main Application Entry Point.

FastAPI application for cataloging artworks: accounts, works with shared
tags, tag-set search and tag suggestions.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.api.routes.router import api_router
from app.config import get_settings
from app.core.exceptions import CatalogAPIException, ValidationException
from app.db.session import Database, resolve_database_url

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Opens the database handle on startup and disposes it on shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    database_url, sqlite_fallback = resolve_database_url(settings)
    database = Database(database_url, echo=settings.DEBUG, sqlite_fallback=sqlite_fallback)
    app.state.database = database

    if sqlite_fallback:
        logger.warning("[DEV MODE] Using SQLite fallback database")
        logger.info("Creating SQLite development tables...")
        await database.create_all()
        logger.info("Development database ready")
    else:
        logger.info(f"Database: {database.dialect}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await database.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Artwork Catalog API

Personal catalog of artworks with shared tags.

### Features
- **Accounts**: Signup and login with bearer tokens
- **Works**: Register and delete artworks with tags
- **Search**: Filter by type and require every requested tag
- **Tag Suggestions**: Case-insensitive prefix completion
    """,
    version=__version__,
    openapi_tags=[
        {"name": "auth", "description": "Signup and login"},
        {"name": "works", "description": "Work registration, search and deletion"},
        {"name": "tags", "description": "Tag suggestions"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

# CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogAPIException)
async def catalog_exception_handler(request: Request, exc: CatalogAPIException) -> JSONResponse:
    """
    Global exception handler for catalog API exceptions.
    Returns standardized error responses.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation errors as 400 validation_failed."""
    details = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    error = ValidationException("Request validation failed", details=details)
    return JSONResponse(
        status_code=error.status_code,
        content=jsonable_encoder(error.to_dict()),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
