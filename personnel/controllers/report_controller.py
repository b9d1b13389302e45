"""
Report Controller: read-only aggregate and relationship reports.
"""

from sqlalchemy import select, func
from sqlalchemy.orm import aliased

from personnel.database import Database
from personnel.models import Employee, Role, Department


def employees_by_manager(db: Database) -> list[dict]:
    """Each employee with the manager's full name, or null when unmanaged."""
    manager = aliased(Employee, name="manager")
    statement = (
        select(
            Employee.id,
            Employee.full_name.label("employee_name"),
            manager.full_name.label("manager_name"),
        )
        .select_from(Employee)
        .outerjoin(manager, Employee.manager_id == manager.id)
        .order_by(Employee.id)
    )
    return db.execute(statement)


def employees_by_department(db: Database) -> list[dict]:
    """
    Employees reached through role to department. Employees without a role,
    or whose role has no department, do not appear.
    """
    statement = (
        select(
            Employee.id,
            Employee.full_name.label("employee_name"),
            Department.name.label("department_name"),
        )
        .select_from(Employee)
        .join(Role, Employee.role_id == Role.id)
        .join(Department, Role.department_id == Department.id)
        .order_by(Department.name, Employee.id)
    )
    return db.execute(statement)


def utilized_budget(db: Database) -> list[dict]:
    """
    Sum of the salaries of every employee's role, per department.
    Departments with no employees are left out of the report.
    """
    statement = (
        select(
            Department.id,
            Department.name,
            func.sum(Role.salary).label("total_budget"),
        )
        .select_from(Employee)
        .join(Role, Employee.role_id == Role.id)
        .join(Department, Role.department_id == Department.id)
        .group_by(Department.id, Department.name)
        .order_by(Department.name)
    )
    return db.execute(statement)
