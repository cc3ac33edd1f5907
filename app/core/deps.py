"""
Dependencies for FastAPI endpoints.

This module wires the record store and service layer into request handlers.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories.department import DepartmentRepository, SQLAlchemyDepartmentRepository
from app.services.department import DepartmentService


def get_department_repository(
    db: AsyncSession = Depends(get_db)
) -> DepartmentRepository:
    """Department record store bound to the request's database session."""
    return SQLAlchemyDepartmentRepository(db)


def get_department_service(
    repository: DepartmentRepository = Depends(get_department_repository)
) -> DepartmentService:
    """Department service for the current request."""
    return DepartmentService(repository)
