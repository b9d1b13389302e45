"""
Employee Controller: queries and writes for the employee table.
These functions are called by the employee views.
"""

from sqlalchemy import select, insert, update, delete, func
from sqlalchemy.orm import aliased

import sentry_sdk

from personnel.controllers.lookup import resolve_id, MANAGER_NONE
from personnel.database import Database
from personnel.exceptions import NotFound
from personnel.models import Employee, Role, Department


def list_employees(db: Database) -> list[dict]:
    """
    Employees with role title, department, salary and manager name.
    The manager column holds the literal 'None' when no manager is set.
    """
    manager = aliased(Employee, name="manager")
    statement = (
        select(
            Employee.id,
            Employee.full_name.label("name"),
            Role.title.label("title"),
            Department.name.label("department"),
            Role.salary,
            func.coalesce(manager.full_name, MANAGER_NONE).label("manager"),
        )
        .select_from(Employee)
        .outerjoin(Role, Employee.role_id == Role.id)
        .outerjoin(Department, Role.department_id == Department.id)
        .outerjoin(manager, Employee.manager_id == manager.id)
        .order_by(Employee.id)
    )
    return db.execute(statement)


def employee_choices(db: Database) -> list[tuple[str, str]]:
    """(full name, full name) pairs, for prompts that match on the name."""
    rows = db.execute(select(Employee.full_name.label("name")).order_by(Employee.id))
    return [(row["name"], row["name"]) for row in rows]


def employee_delete_choices(db: Database) -> list[tuple[str, int]]:
    rows = db.execute(
        select(Employee.id, Employee.full_name.label("name")).order_by(Employee.id)
    )
    return [(row["name"], row["id"]) for row in rows]


def manager_choices(db: Database) -> list[tuple[str, str]]:
    """Every current employee, preceded by the 'None' choice."""
    return [(MANAGER_NONE, MANAGER_NONE)] + employee_choices(db)


def add_employee(
    db: Database, first_name: str, last_name: str, role_title: str, manager_name: str
) -> str:
    """
    Inserts an employee after resolving the role title and the manager name.
    Choosing 'None' as manager stores a null manager id.
    """
    first_name = first_name.strip()
    last_name = last_name.strip()

    role_id = resolve_id(db, "role", role_title)
    manager_id = resolve_id(db, "manager", manager_name)

    db.execute(
        insert(Employee).values(
            first_name=first_name,
            last_name=last_name,
            role_id=role_id,
            manager_id=manager_id,
        )
    )

    full_name = f"{first_name} {last_name}"
    sentry_sdk.capture_message(f"Employee CREATED: {full_name}", level="info")
    return full_name


def delete_employee(db: Database, employee_id: int) -> None:
    """Deletes an employee by id. Direct reports are kept with no manager."""
    deleted = db.execute(delete(Employee).where(Employee.id == employee_id))

    if not deleted:
        raise NotFound(f"Employee with ID {employee_id} not found.")

    sentry_sdk.capture_message(f"Employee DELETED: ID {employee_id}", level="info")


def update_employee_role(db: Database, employee_name: str, role_title: str) -> int:
    """
    Assigns a new role to the employee(s) whose full name matches.
    Returns the number of updated employees; raises NotFound when none match.
    """
    role_id = resolve_id(db, "role", role_title)

    updated = db.execute(
        update(Employee)
        .where(Employee.full_name == employee_name)
        .values(role_id=role_id)
    )

    if not updated:
        raise NotFound(f"No employee named '{employee_name}' was found.")

    sentry_sdk.capture_message(
        f"Employee UPDATED: {employee_name} now holds role '{role_title}'", level="info"
    )
    return updated
