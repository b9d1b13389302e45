"""
Name-to-id resolution shared by every controller that accepts a display name.
"""

from sqlalchemy import select

from personnel.database import Database
from personnel.exceptions import NotFound
from personnel.models import Department, Role, Employee

# Choice offered in the manager list meaning "no manager".
MANAGER_NONE = "None"

DISPLAY_COLUMNS = {
    "department": (Department, Department.name),
    "role": (Role, Role.title),
    "employee": (Employee, Employee.full_name),
    "manager": (Employee, Employee.full_name),
}


def resolve_id(db: Database, kind: str, display_name: str) -> int | None:
    """
    Returns the primary key of the row whose display column equals display_name.

    A 'manager' lookup for MANAGER_NONE returns None without querying.
    When several rows share the name, the lowest id wins.
    Raises NotFound when nothing matches.
    """
    if kind not in DISPLAY_COLUMNS:
        raise ValueError(f"Unknown lookup kind '{kind}'.")

    if kind == "manager" and display_name == MANAGER_NONE:
        return None

    model, column = DISPLAY_COLUMNS[kind]
    statement = select(model.id).where(column == display_name).order_by(model.id).limit(1)
    rows = db.execute(statement)

    if not rows:
        raise NotFound(f"No {kind} named '{display_name}' was found.")

    return rows[0]["id"]
