"""
Service layer for department operations.

This module contains the business logic for department-related operations,
abstracting away the record store from the API endpoints.
"""

from typing import List, Optional, Union

from pydantic import ValidationError

from app.core.exceptions import DepartmentLookupError, DepartmentValidationError
from app.core.logging import logger
from app.models.department import Department
from app.repositories.department import DepartmentRepository
from app.schemas.department import DepartmentCreate, DepartmentNotFound, DepartmentUpdate
from app.services.merge import merge_department, merged_fields


class DepartmentService:
    """Service class for department operations."""

    def __init__(self, repository: DepartmentRepository):
        self.repository = repository

    async def create(self, department_in: DepartmentCreate) -> Department:
        """
        Create a new department.

        Args:
            department_in: Department creation data

        Returns:
            Created department with its generated id
        """
        logger.info(f"Creating new department: {department_in.name}")

        department = Department(**department_in.model_dump())
        department = await self.repository.create(department)

        logger.info(f"Created department with ID: {department.id}")
        return department

    async def list_all(self) -> List[Department]:
        """
        Get all departments. Order is not guaranteed.

        Returns:
            List of departments
        """
        logger.debug("Getting all departments")
        return await self.repository.find_all()

    async def get_by_id(
        self,
        department_id: int
    ) -> Union[Department, DepartmentNotFound]:
        """
        Get a department by ID.

        Args:
            department_id: Department ID

        Returns:
            Department if found, otherwise a DepartmentNotFound carrying the id
        """
        logger.debug(f"Getting department by ID: {department_id}")

        department = await self.repository.find_by_id(department_id)
        if department is None:
            logger.warning(f"Department not found, ID: {department_id}")
            return DepartmentNotFound(id=department_id)
        return department

    async def get_by_code(self, code: str) -> Optional[Department]:
        """
        Get a department by code.

        Args:
            code: Department code

        Returns:
            A matching department, or None
        """
        logger.debug(f"Getting department by code: {code}")
        return await self.repository.find_by_code(code)

    async def update(
        self,
        department_id: int,
        department_in: DepartmentUpdate
    ) -> Department:
        """
        Apply a partial update to a department.

        The read and the write are separate statements; a concurrent update
        of the same row between them is overwritten.

        Args:
            department_id: Department ID
            department_in: Partial department data

        Returns:
            Updated department

        Raises:
            DepartmentLookupError: If no department has this ID
            DepartmentValidationError: If the merged record breaks the name or address rules
        """
        logger.info(f"Updating department with ID: {department_id}")

        department = await self.repository.find_by_id(department_id)
        if department is None:
            logger.error(f"Department not found for update, ID: {department_id}")
            raise DepartmentLookupError(department_id)

        # The merged record must satisfy the same rules as a new one
        try:
            DepartmentCreate.model_validate(merged_fields(department, department_in))
        except ValidationError as e:
            logger.warning(f"Rejected update for department ID {department_id}: {e.error_count()} violation(s)")
            raise DepartmentValidationError(department_id, e.errors()) from e

        merge_department(department, department_in)
        department = await self.repository.save(department)

        logger.info(f"Updated department: {department.name}")
        return department

    async def delete_by_id(self, department_id: int) -> None:
        """
        Delete a department. Succeeds whether or not the ID exists.

        Args:
            department_id: Department ID
        """
        logger.info(f"Deleting department with ID: {department_id}")
        await self.repository.delete_by_id(department_id)
