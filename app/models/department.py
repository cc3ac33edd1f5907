"""
Department model.
This module defines the SQLAlchemy model for departments, the only
record type stored by the service.
"""
from sqlalchemy import Column, Integer, String
from app.models.base import Base


class Department(Base):
    """
    Department model representing a single department record.

    The identifier is generated by the database on insert and is never
    reassigned afterwards.
    """

    __tablename__ = "department"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(200), nullable=True)
    code = Column(String(50), nullable=True, index=True)

    def __repr__(self) -> str:
        """String representation of the Department model."""
        return f"<Department(id={self.id}, name='{self.name}', code='{self.code}')>"
