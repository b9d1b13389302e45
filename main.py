"""
This is the main script for the Personnel Tracker command-line interface.
It loads the configuration, opens the database connection and runs the
main menu until the operator quits.
"""

import os
import sys

from dotenv import load_dotenv
import sentry_sdk
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from rich.console import Console

from personnel.config import database_url
from personnel.database import Database
from personnel.exceptions import ConfigurationError, StoreConnectionError
from personnel.views.main_menu import main_menu

console = Console()


def init_sentry():
    """Initializes Sentry SDK using DSN from environment variable (SENTRY_DSN)."""
    sentry_dsn = os.environ.get("SENTRY_DSN")

    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            traces_sample_rate=1.0,
            environment=os.environ.get("SENTRY_ENVIRONMENT", "cli-prod"),
            integrations=[
                SqlalchemyIntegration(),
            ],
            send_default_pii=False,
        )
        console.print("[bold green]Sentry Initialized (DSN found).[/bold green]")
    else:
        console.print(
            "[bold yellow]Sentry DSN not found. Running without error logging. "
            "Check SENTRY_DSN environment variable.[/bold yellow]"
        )


def open_database() -> Database:
    """
    Connects to the database described by the environment and creates any
    missing table. Exits with status 1 when this is not possible.
    """
    try:
        db = Database(database_url()).connect()
        db.create_schema()
        return db
    except (ConfigurationError, StoreConnectionError) as e:
        sentry_sdk.capture_exception(e)
        sentry_sdk.flush(timeout=1.0)
        console.print(f"[bold red]FATAL ERROR:[/bold red] {e}")
        sys.exit(1)


def main():
    """Main entry point of the application."""
    if load_dotenv():
        console.print("[bold green]INFO:[/bold green] .env loaded successfully.")
    else:
        console.print(
            "[bold yellow]WARNING:[/bold yellow] No .env file found, "
            "using the process environment."
        )

    init_sentry()

    db = open_database()

    try:
        main_menu(db)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[bold yellow]Interrupted. Exiting the application.[/bold yellow]")
    finally:
        db.close()
        sentry_sdk.flush(timeout=1.0)


if __name__ == "__main__":
    main()
