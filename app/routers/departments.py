"""
Department API endpoints.
This module provides CRUD endpoints for departments.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from app.core.logging import logger
from app.core.deps import get_department_service
from app.schemas.department import (
    Department,
    DepartmentCreate,
    DepartmentNotFound,
    DepartmentUpdate,
)
from app.services.department import DepartmentService

router = APIRouter()

DELETE_CONFIRMATION = "Department deleted successfully"


@router.post("/saveDepartmnt", response_model=Department)
async def save_department(
    department_in: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service)
) -> Department:
    """
    Create a new department.

    Args:
        department_in: Department creation data, already validated
        service: Department service

    Returns:
        Created department
    """
    logger.info(f"Department creation requested: {department_in.name}")
    return await service.create(department_in)


@router.get("/getDepts", response_model=List[Department])
async def get_all_departments(
    service: DepartmentService = Depends(get_department_service)
) -> List[Department]:
    """Get all departments."""
    logger.info("Department list requested")
    return await service.list_all()


@router.get("/getDept/{department_id}", response_model=Department)
async def get_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service)
) -> Department:
    """
    Get a department by ID.

    Args:
        department_id: Department ID
        service: Department service

    Returns:
        Department details, or 404 when the ID is unknown
    """
    logger.info(f"Department details requested for ID: {department_id}")

    result = await service.get_by_id(department_id)
    if isinstance(result, DepartmentNotFound):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=result.message,
        )
    return result


@router.get("/getDeptByCode/{code}", response_model=Optional[Department])
async def get_department_by_code(
    code: str,
    service: DepartmentService = Depends(get_department_service)
) -> Optional[Department]:
    """
    Get a department by code.

    Responds with ``null`` when no department has the code.
    """
    logger.info(f"Department details requested for code: {code}")
    return await service.get_by_code(code)


@router.delete("/delete/{department_id}", response_class=PlainTextResponse)
async def delete_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service)
) -> str:
    """
    Delete a department.

    The ID is not checked first; deleting an unknown ID still confirms.
    """
    logger.info(f"Department deletion requested for ID: {department_id}")
    await service.delete_by_id(department_id)
    return DELETE_CONFIRMATION


@router.put("/update/{department_id}", response_model=Department)
async def update_department(
    department_id: int,
    department_in: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service)
) -> Department:
    """
    Partially update a department.

    Fields that are missing, null or empty keep their stored value. An
    unknown ID is not handled here and fails the request with a server error.

    Args:
        department_id: Department ID
        department_in: Partial department data
        service: Department service

    Returns:
        Updated department
    """
    logger.info(f"Department update requested for ID: {department_id}")

    department = await service.update(department_id, department_in)

    logger.info(f"Department updated successfully: {department_id}")
    return department
