"""
Main application entry point.

This module initializes the FastAPI application and includes all routers.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.core.config import settings
from app.core.exceptions import (
    DepartmentValidationError,
    department_validation_exception_handler,
    validation_exception_handler,
)
from app.core.logging import logger
from app.core.middleware import RequestLoggingMiddleware
from app.db.session import engine, init_db
from app.routers.departments import router as departments_router
from app.routers.health import router as health_router


app = FastAPI(
    title=settings.api.title,
    description=settings.api.description,
    version=settings.api.version,
    debug=settings.debug,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.frontend_urls,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(DepartmentValidationError, department_validation_exception_handler)

# Include routers with /api prefix
app.include_router(
    health_router,
    prefix="/api/health",
    tags=["health"],
)
app.include_router(
    departments_router,
    prefix="/api/department",
    tags=["departments"],
)


@app.on_event("startup")
async def startup_event():
    """Actions to run on application startup."""
    logger.info(f"Starting {settings.api.title}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Database URL: {settings.database.url[:20]}...")

    if settings.database.create_tables:
        await init_db()

    logger.info(f"API Docs available at: http://{settings.api.host}:{settings.api.port}/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Actions to run on application shutdown."""
    logger.info(f"Shutting down {settings.api.title}")
    await engine.dispose()


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Greeting endpoint."""
    return f"Hello {settings.greeting_name}!"
