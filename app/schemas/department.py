"""
Pydantic schemas for departments.

This module defines the request and response schemas for department-related
API endpoints using Pydantic models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DepartmentBase(BaseModel):
    """Base schema for department data."""

    name: str
    address: Optional[str] = None
    code: Optional[str] = None


class DepartmentCreate(DepartmentBase):
    """Schema for creating a new department.

    ``name`` must contain a non-whitespace character and ``address``, when
    given, must be between 1 and 200 characters. Any ``id`` sent by the
    client is ignored.
    """

    address: Optional[str] = Field(None, min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name is required")
        return v


class DepartmentUpdate(BaseModel):
    """
    Schema for a partial department update.

    Every field is optional. ``None`` and ``""`` both mean "leave unchanged";
    ``id`` is accepted for compatibility but never applied.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    address: Optional[str] = None
    code: Optional[str] = None


class Department(DepartmentBase):
    """Schema for department response data."""

    id: int

    model_config = ConfigDict(from_attributes=True)


class DepartmentNotFound(BaseModel):
    """Result returned when a department lookup by id finds nothing."""

    id: int

    @property
    def message(self) -> str:
        return f"Department not found with id:{self.id}"
