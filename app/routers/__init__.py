"""
Routers package initialization.

This module imports all routers to make them available from a single import point.
"""

from app.routers.departments import router as departments_router
from app.routers.health import router as health_router

__all__ = [
    "departments_router",
    "health_router",
]
