"""
Role Controller: queries and writes for the role table.
"""

from decimal import Decimal

from sqlalchemy import select, insert, delete

import sentry_sdk

from personnel.controllers.lookup import resolve_id
from personnel.controllers.utils import parse_salary
from personnel.database import Database
from personnel.exceptions import NotFound
from personnel.models import Role, Department


def list_roles(db: Database) -> list[dict]:
    """
    Roles with their department name instead of the department id.
    Roles whose department was deleted are still listed, with no department.
    """
    statement = (
        select(
            Role.id,
            Role.title,
            Role.salary,
            Department.name.label("department"),
        )
        .outerjoin(Department, Role.department_id == Department.id)
        .order_by(Role.id)
    )
    return db.execute(statement)


def role_choices(db: Database) -> list[tuple[str, str]]:
    """(title, title) pairs; roles are picked by title and resolved afterwards."""
    rows = db.execute(select(Role.title).order_by(Role.id))
    return [(row["title"], row["title"]) for row in rows]


def role_delete_choices(db: Database) -> list[tuple[str, int]]:
    rows = db.execute(select(Role.id, Role.title).order_by(Role.id))
    return [(row["title"], row["id"]) for row in rows]


def add_role(db: Database, title: str, salary, department_name: str) -> str:
    """
    Inserts a role. The salary is stored as a Decimal and the department is
    resolved from its name.
    """
    title = title.strip()
    amount: Decimal = parse_salary(salary)
    department_id = resolve_id(db, "department", department_name)

    db.execute(
        insert(Role).values(title=title, salary=amount, department_id=department_id)
    )

    sentry_sdk.capture_message(
        f"Role CREATED: {title} ({amount}) in {department_name}", level="info"
    )
    return title


def delete_role(db: Database, role_id: int) -> None:
    """Deletes a role by id. Employees holding it are kept with no role."""
    deleted = db.execute(delete(Role).where(Role.id == role_id))

    if not deleted:
        raise NotFound(f"Role with ID {role_id} not found.")

    sentry_sdk.capture_message(f"Role DELETED: ID {role_id}", level="info")
