"""
Database Models for the Personnel Tracker.

Defines the SQLAlchemy structure for Departments, Roles and Employees.
Every foreign key is declared ON DELETE SET NULL: removing a department or a
role orphans the rows that referenced it instead of blocking or cascading.
"""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import declarative_base

Base = declarative_base()


# --- DEPARTMENT ---
class Department(Base):
    """A department, identified in menus by its name."""
    __tablename__ = "department"
    id = Column(Integer, primary_key=True)
    name = Column(String(30), unique=True, nullable=False)

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}')>"


# --- ROLE ---
class Role(Base):
    """A job title with its salary, attached to one department."""
    __tablename__ = "role"
    id = Column(Integer, primary_key=True)
    title = Column(String(30), nullable=False)
    salary = Column(Numeric(10, 2), nullable=False)
    department_id = Column(
        Integer, ForeignKey("department.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self):
        return f"<Role(id={self.id}, title='{self.title}', salary={self.salary})>"


# --- EMPLOYEE ---
class Employee(Base):
    """An employee with an optional role and an optional manager."""
    __tablename__ = "employee"
    id = Column(Integer, primary_key=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    role_id = Column(Integer, ForeignKey("role.id", ondelete="SET NULL"), nullable=True)
    manager_id = Column(
        Integer, ForeignKey("employee.id", ondelete="SET NULL"), nullable=True
    )

    @hybrid_property
    def full_name(self):
        """'First Last', usable both on instances and inside queries."""
        return self.first_name + " " + self.last_name

    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.full_name}', role_id={self.role_id})>"
