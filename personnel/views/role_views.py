"""
Role Views: CLI interactions for listing, adding and deleting roles.
"""

from rich.console import Console

import personnel.controllers.department_controller as dc
import personnel.controllers.role_controller as rc
from personnel.controllers.utils import is_valid_salary
from personnel.database import Database
from personnel.views.prompts import ask_text, ask_choice, display_rows, required

console = Console()


def valid_salary(value: str):
    return is_valid_salary(value) or "Please enter a valid salary (numeric value)."


def list_roles_cli(db: Database) -> None:
    console.print("\n[bold blue]----- ROLES ----- [/bold blue]")
    display_rows(rc.list_roles(db), "Roles")


def add_role_cli(db: Database) -> None:
    """Asks for title and salary, then the department among the current ones."""
    console.print("\n[bold green]----- ADD ROLE ----- [/bold green]")

    title = ask_text("What is the name of the role?", required("role name"))
    salary = ask_text("What is the salary of the role?", valid_salary)

    departments = [(name, name) for name, _ in dc.department_choices(db)]
    if not departments:
        console.print(
            "[yellow]No departments found. Add a department before adding roles.[/yellow]"
        )
        return

    department = ask_choice("Which department does the role belong to?", departments)
    added = rc.add_role(db, title, salary, department)

    console.print(f"[bold green]SUCCESS:[/bold green] Added {added} to the database.")


def delete_role_cli(db: Database) -> None:
    console.print("\n[bold red]----- DELETE ROLE ----- [/bold red]")

    choices = rc.role_delete_choices(db)
    if not choices:
        console.print("[yellow]No roles found in the database.[/yellow]")
        return

    role_id = ask_choice("Which role do you want to delete?", choices)
    rc.delete_role(db, role_id)

    console.print("[bold green]SUCCESS:[/bold green] Role deleted successfully.")
