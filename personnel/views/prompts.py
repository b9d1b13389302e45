"""
Prompt and display helpers built on rich, shared by every view.
"""

from typing import Callable, Iterable, Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from personnel.controllers.utils import is_valid_name
from personnel.exceptions import ValidationError

console = Console()

# A validator returns True to accept, or the message to show before asking again.
Validator = Callable[[str], "bool | str"]


def ask_text(message: str, validate: Validator | None = None) -> str:
    """Free-text prompt, repeated until the validator accepts the answer."""
    while True:
        answer = Prompt.ask(message).strip()
        try:
            check(answer, validate)
            return answer
        except ValidationError as e:
            console.print(f"[bold red]{e}[/bold red]")


def check(answer: str, validate: Validator | None) -> None:
    if validate is None:
        return
    outcome = validate(answer)
    if outcome is not True:
        raise ValidationError(outcome or "Invalid value. Please try again.")


def required(field: str) -> Validator:
    """Validator rejecting blank input."""
    return lambda value: is_valid_name(value) or f"Please enter a valid {field}."


def ask_choice(message: str, choices: list[tuple[str, Any]]) -> Any:
    """
    Single-select list prompt. Choices are (label, value) pairs shown as a
    numbered list; returns the value of the selected pair.
    """
    console.print(f"\n[bold yellow]{message}[/bold yellow]")
    for index, (label, _) in enumerate(choices, start=1):
        console.print(f"  [cyan]{index}[/cyan]: {escape(label)}")

    keys = [str(i) for i in range(1, len(choices) + 1)]
    selected = Prompt.ask(f"Select an option [1-{len(choices)}]", choices=keys, show_choices=False)
    return choices[int(selected) - 1][1]


def format_cell(value) -> str:
    return "" if value is None else escape(str(value))


def display_rows(rows: Iterable[dict], title: str) -> None:
    """Renders query rows as a table; columns follow the row key order."""
    rows = list(rows)
    if not rows:
        console.print(f"[bold yellow]INFO:[/bold yellow] No records found for '{title}'.")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in rows[0].keys():
        table.add_column(column, style="dim" if column == "id" else None)

    for row in rows:
        table.add_row(*(format_cell(value) for value in row.values()))

    console.print(table)
