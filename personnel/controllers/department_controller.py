"""
Department Controller: queries and writes for the department table.
These functions never prompt; the department views call them.
"""

from sqlalchemy import select, insert, delete

import sentry_sdk

from personnel.database import Database
from personnel.exceptions import NotFound
from personnel.models import Department


def list_departments(db: Database) -> list[dict]:
    """All departments, alphabetically."""
    statement = select(Department.id, Department.name).order_by(Department.name)
    return db.execute(statement)


def department_choices(db: Database) -> list[tuple[str, int]]:
    """(name, id) pairs for a selection list."""
    return [(row["name"], row["id"]) for row in list_departments(db)]


def add_department(db: Database, name: str) -> str:
    name = name.strip()
    db.execute(insert(Department).values(name=name))

    sentry_sdk.capture_message(f"Department CREATED: {name}", level="info")
    return name


def delete_department(db: Database, department_id: int) -> None:
    """
    Deletes a department by id. Roles of the department are kept with no
    department. Raises NotFound if the row is already gone.
    """
    deleted = db.execute(delete(Department).where(Department.id == department_id))

    if not deleted:
        raise NotFound(f"Department with ID {department_id} not found.")

    sentry_sdk.capture_message(f"Department DELETED: ID {department_id}", level="info")
