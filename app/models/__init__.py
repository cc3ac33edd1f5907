"""
Models package initialization.

This module imports all models to ensure they are registered with SQLAlchemy.
"""

from app.models.base import Base

from app.models.department import Department


__all__ = [
    "Base",
    "Department",
]
