"""
Schemas package initialization.

This module imports all schemas to make them available from a single import point.
"""

from app.schemas.department import (
    DepartmentBase,
    DepartmentCreate,
    DepartmentUpdate,
    Department,
    DepartmentNotFound,
)

__all__ = [
    "DepartmentBase",
    "DepartmentCreate",
    "DepartmentUpdate",
    "Department",
    "DepartmentNotFound",
]
