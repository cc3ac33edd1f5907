"""
Repositories package initialization.

This module exposes the data-access interfaces and their implementations.
"""

from app.repositories.department import DepartmentRepository, SQLAlchemyDepartmentRepository

__all__ = ["DepartmentRepository", "SQLAlchemyDepartmentRepository"]
