"""
Configuration for pytest.

This module provides fixtures and configuration for running tests.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from typing import Dict, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import get_db
from app.main import app
from app.models.base import Base
from app.models.department import Department
from app.repositories.department import DepartmentRepository

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class InMemoryDepartmentRepository(DepartmentRepository):
    """Dict-backed record store for service tests."""

    def __init__(self):
        self.rows: Dict[int, Department] = {}
        self.next_id = 1
        self.deleted_ids: List[int] = []

    async def create(self, department: Department) -> Department:
        department.id = self.next_id
        self.next_id += 1
        self.rows[department.id] = department
        return department

    async def find_by_id(self, department_id: int) -> Optional[Department]:
        return self.rows.get(department_id)

    async def find_all(self) -> List[Department]:
        return list(self.rows.values())

    async def find_by_code(self, code: str) -> Optional[Department]:
        return next((d for d in self.rows.values() if d.code == code), None)

    async def delete_by_id(self, department_id: int) -> None:
        self.deleted_ids.append(department_id)
        self.rows.pop(department_id, None)

    async def save(self, department: Department) -> Department:
        self.rows[department.id] = department
        return department


@pytest.fixture
def memory_repository():
    """Empty in-memory record store."""
    return InMemoryDepartmentRepository()


@pytest.fixture
async def test_engine():
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(db_session):
    """Create an async test client.

    Unhandled application errors come back as 500 responses instead of
    being raised into the test.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
