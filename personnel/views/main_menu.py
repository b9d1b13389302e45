"""
Main menu interface.
Displays the actions, routes the selection to its view and keeps the menu
alive whatever the view raises.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import sentry_sdk
from rich.console import Console
from rich.prompt import Prompt

from personnel.database import Database
from personnel.exceptions import PersonnelError
from personnel.views.department_views import (
    list_departments_cli,
    add_department_cli,
    delete_department_cli,
)
from personnel.views.role_views import (
    list_roles_cli,
    add_role_cli,
    delete_role_cli,
)
from personnel.views.employee_views import (
    list_employees_cli,
    add_employee_cli,
    delete_employee_cli,
    update_employee_role_cli,
)
from personnel.views.report_views import (
    employees_by_manager_cli,
    employees_by_department_cli,
    utilized_budget_cli,
)

console = Console()


@dataclass(frozen=True)
class MenuAction:
    label: str
    handler: Optional[Callable[[Database], None]]


QUIT = MenuAction("Quit", None)

MENU_ACTIONS = [
    MenuAction("View all departments", list_departments_cli),
    MenuAction("Add department", add_department_cli),
    MenuAction("Delete department", delete_department_cli),
    MenuAction("View all roles", list_roles_cli),
    MenuAction("Add role", add_role_cli),
    MenuAction("Delete role", delete_role_cli),
    MenuAction("View all employees", list_employees_cli),
    MenuAction("Add employee", add_employee_cli),
    MenuAction("Delete employee", delete_employee_cli),
    MenuAction("Update employee role", update_employee_role_cli),
    MenuAction("View employees by manager", employees_by_manager_cli),
    MenuAction("View employees by department", employees_by_department_cli),
    MenuAction("View total utilized departmental budget", utilized_budget_cli),
    QUIT,
]


def display_main_menu() -> None:
    console.print("\n" + "=" * 50, style="bold magenta")
    console.print("[bold magenta]PERSONNEL TRACKER[/bold magenta] | What would you like to do?")
    console.print("=" * 50, style="bold magenta")

    for index, action in enumerate(MENU_ACTIONS, start=1):
        style = "bold red" if action is QUIT else "cyan"
        console.print(f"{index:>2}. [{style}]{action.label}[/{style}]")

    console.print("=" * 50, style="bold magenta")


def select_action() -> MenuAction:
    choice = Prompt.ask(
        f"Select an option [1-{len(MENU_ACTIONS)}]",
        choices=[str(i) for i in range(1, len(MENU_ACTIONS) + 1)],
        show_choices=False,
    ).strip()
    return MENU_ACTIONS[int(choice) - 1]


def run_action(db: Database, action: MenuAction) -> None:
    """
    Runs one handler. Any failure is printed and sent to Sentry, then control
    returns to the menu.
    """
    try:
        action.handler(db)
    except PersonnelError as e:
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] {e}")
    except Exception as e:
        sentry_sdk.capture_exception(e)
        console.print(
            f"[bold red]ERROR:[/bold red] An unexpected error occurred "
            f"during '{action.label}': {e}"
        )


def main_menu(db: Database) -> None:
    """Shows the menu until the operator selects Quit."""
    while True:
        display_main_menu()
        action = select_action()

        if action is QUIT:
            console.print("\n[bold yellow]Goodbye![/bold yellow]")
            return

        run_action(db, action)
