"""
Services package initialization.

This module imports all services to make them available from a single import point.
"""

from app.services.department import DepartmentService
from app.services.merge import merge_department

__all__ = ["DepartmentService", "merge_department"]
