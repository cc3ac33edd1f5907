"""
Data access for departments.

``DepartmentRepository`` is the record store the service layer talks to.
``SQLAlchemyDepartmentRepository`` backs it with an async SQLAlchemy session.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import logger
from app.models.department import Department


class DepartmentRepository(ABC):
    """Record store interface for departments."""

    @abstractmethod
    async def create(self, department: Department) -> Department:
        ...

    @abstractmethod
    async def find_by_id(self, department_id: int) -> Optional[Department]:
        ...

    @abstractmethod
    async def find_all(self) -> List[Department]:
        ...

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[Department]:
        ...

    @abstractmethod
    async def delete_by_id(self, department_id: int) -> None:
        ...

    @abstractmethod
    async def save(self, department: Department) -> Department:
        ...


class SQLAlchemyDepartmentRepository(DepartmentRepository):
    """Department record store backed by a relational table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, department: Department) -> Department:
        self.db.add(department)
        await self.db.commit()
        await self.db.refresh(department)
        logger.debug(f"Inserted department row with ID: {department.id}")
        return department

    async def find_by_id(self, department_id: int) -> Optional[Department]:
        result = await self.db.execute(
            select(Department).where(Department.id == department_id)
        )
        return result.scalars().first()

    async def find_all(self) -> List[Department]:
        result = await self.db.execute(select(Department))
        return list(result.scalars().all())

    async def find_by_code(self, code: str) -> Optional[Department]:
        # code is not unique; any single match is acceptable
        result = await self.db.execute(
            select(Department).where(Department.code == code).limit(1)
        )
        return result.scalars().first()

    async def delete_by_id(self, department_id: int) -> None:
        result = await self.db.execute(
            delete(Department).where(Department.id == department_id)
        )
        await self.db.commit()
        logger.debug(f"Delete for department ID {department_id} affected {result.rowcount} row(s)")

    async def save(self, department: Department) -> Department:
        self.db.add(department)
        await self.db.commit()
        await self.db.refresh(department)
        return department
