"""
SQLAlchemy 2.x ORM models for the Organization Directory API.

Models use the Mapped[] type annotation syntax and mapped_column.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Float, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class Organization(Base):
    """An organization owning a collection of employees."""

    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    employees: Mapped[list[Employee]] = relationship(
        "Employee", back_populates="organization", order_by="Employee.id"
    )

    def __repr__(self) -> str:
        return f"<Organization(id={self.id}, name={self.name})>"


class Employee(Base):
    """
    An employee of exactly one organization.

    organization_id is enforced by the foreign key; the service layer
    does not check it.
    """

    __tablename__ = "employees"
    __table_args__ = (
        Index("ix_employees_department", "department"),
        Index("ix_employees_organization_id", "organization_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("organizations.id"), nullable=False
    )

    # Relationships
    organization: Mapped[Organization] = relationship("Organization", back_populates="employees")

    def __repr__(self) -> str:
        return (
            f"<Employee(id={self.id}, title={self.title}, department={self.department}, "
            f"salary={self.salary})>"
        )
