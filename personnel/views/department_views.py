"""
Department Views: CLI interactions for listing, adding and deleting departments.
"""

from rich.console import Console

import personnel.controllers.department_controller as dc
from personnel.database import Database
from personnel.views.prompts import ask_text, ask_choice, display_rows, required

console = Console()


def list_departments_cli(db: Database) -> None:
    console.print("\n[bold blue]----- DEPARTMENTS ----- [/bold blue]")
    display_rows(dc.list_departments(db), "Departments")


def add_department_cli(db: Database) -> None:
    console.print("\n[bold green]----- ADD DEPARTMENT ----- [/bold green]")

    name = ask_text("What is the name of the department?", required("department name"))
    added = dc.add_department(db, name)

    console.print(f"[bold green]SUCCESS:[/bold green] Added {added} to the database.")


def delete_department_cli(db: Database) -> None:
    console.print("\n[bold red]----- DELETE DEPARTMENT ----- [/bold red]")

    choices = dc.department_choices(db)
    if not choices:
        console.print("[yellow]No departments found in the database.[/yellow]")
        return

    department_id = ask_choice("Which department do you want to delete?", choices)
    dc.delete_department(db, department_id)

    console.print("[bold green]SUCCESS:[/bold green] Department deleted successfully.")
