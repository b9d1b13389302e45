"""
Report Views: read-only tables over employees, managers and budgets.
"""

from rich.console import Console

import personnel.controllers.report_controller as rpc
from personnel.database import Database
from personnel.views.prompts import display_rows

console = Console()


def employees_by_manager_cli(db: Database) -> None:
    console.print("\n[bold blue]----- EMPLOYEES BY MANAGER ----- [/bold blue]")
    display_rows(rpc.employees_by_manager(db), "Employees by Manager")


def employees_by_department_cli(db: Database) -> None:
    console.print("\n[bold blue]----- EMPLOYEES BY DEPARTMENT ----- [/bold blue]")
    display_rows(rpc.employees_by_department(db), "Employees by Department")


def utilized_budget_cli(db: Database) -> None:
    console.print("\n[bold blue]----- UTILIZED DEPARTMENTAL BUDGET ----- [/bold blue]")
    display_rows(rpc.utilized_budget(db), "Total Utilized Budget")
