"""
Employee Views: CLI interactions for Employee operations.
Each step reads its choice list fresh from the database, then the
controller resolves the selected names to ids.
"""

from rich.console import Console

import personnel.controllers.employee_controller as ec
import personnel.controllers.role_controller as rc
from personnel.database import Database
from personnel.views.prompts import ask_text, ask_choice, display_rows, required

console = Console()


def list_employees_cli(db: Database) -> None:
    console.print("\n[bold blue]----- EMPLOYEES ----- [/bold blue]")
    display_rows(ec.list_employees(db), "Employees")


def add_employee_cli(db: Database) -> None:
    """
    Asks for first and last name, then a role and a manager.
    The manager list holds every current employee plus 'None'.
    """
    console.print("\n[bold green]----- ADD EMPLOYEE ----- [/bold green]")

    first_name = ask_text(
        "What is the employee's first name?", required("employee's first name")
    )
    last_name = ask_text(
        "What is the employee's last name?", required("employee's last name")
    )

    roles = rc.role_choices(db)
    if not roles:
        console.print("[yellow]No roles found. Add a role before adding employees.[/yellow]")
        return

    role = ask_choice("What is the employee's role?", roles)
    manager = ask_choice("Who is the employee's manager?", ec.manager_choices(db))

    added = ec.add_employee(db, first_name, last_name, role, manager)

    console.print(f"[bold green]SUCCESS:[/bold green] Added {added} to the database.")


def delete_employee_cli(db: Database) -> None:
    console.print("\n[bold red]----- DELETE EMPLOYEE ----- [/bold red]")

    choices = ec.employee_delete_choices(db)
    if not choices:
        console.print("[yellow]No employees found in the database.[/yellow]")
        return

    employee_id = ask_choice("Which employee do you want to delete?", choices)
    ec.delete_employee(db, employee_id)

    console.print("[bold green]SUCCESS:[/bold green] Employee deleted successfully.")


def update_employee_role_cli(db: Database) -> None:
    console.print("\n[bold yellow]----- UPDATE EMPLOYEE ROLE ----- [/bold yellow]")

    employees = ec.employee_choices(db)
    if not employees:
        console.print("[yellow]No employees found in the database.[/yellow]")
        return

    employee_name = ask_choice("Whose role do you want to update?", employees)

    roles = rc.role_choices(db)
    if not roles:
        console.print("[yellow]No roles found in the database.[/yellow]")
        return

    role = ask_choice("Which role do you want to assign the selected employee?", roles)
    ec.update_employee_role(db, employee_name, role)

    console.print(
        f"[bold green]SUCCESS:[/bold green] Updated {employee_name}'s role to {role}."
    )
