"""
Data access layer.

Holds the single database connection used for the whole session and exposes
one primitive, Database.execute, which runs a SQLAlchemy statement with bound
parameters and returns either the rows or the affected row count.
"""

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.sql import Executable
from rich.console import Console

from personnel.exceptions import StoreConnectionError, QueryError
from personnel.models import Base

console = Console()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE clauses unless this pragma is set per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """One engine, one open connection, opened at startup and closed on quit."""

    def __init__(self, url: URL | str):
        self.url = url
        self.engine = None
        self.connection = None

    @property
    def name(self) -> str | None:
        return self.engine.url.database if self.engine else None

    def connect(self) -> "Database":
        """
        Opens the connection and checks the link with a trivial query.
        Raises StoreConnectionError when the database cannot be reached.
        """
        try:
            self.engine = create_engine(self.url)
            if self.engine.dialect.name == "sqlite":
                event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

            self.connection = self.engine.connect()
            self.connection.execute(text("SELECT 1"))
            self.connection.commit()
        except ImportError as e:
            self.close()
            raise StoreConnectionError(
                f"Database driver for {make_url(self.url).drivername} is not installed: {e}"
            ) from e
        except SQLAlchemyError as e:
            self.close()
            raise StoreConnectionError(f"Could not connect to the database: {e}") from e

        console.print(f"[bold green]Connected to the {self.name} database.[/bold green]")
        return self

    def create_schema(self) -> None:
        """Creates missing tables. Existing tables are left untouched."""
        self._require_connection()
        Base.metadata.create_all(self.connection)
        self.connection.commit()

    def execute(self, statement: Executable) -> list[dict] | int:
        """
        Runs one statement.

        SELECT statements return a list of dicts keyed by column label, in
        projection order. INSERT/UPDATE/DELETE are committed and return the
        number of affected rows.
        """
        self._require_connection()

        try:
            result = self.connection.execute(statement)
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings()]
            else:
                rows = result.rowcount
            self.connection.commit()
            return rows
        except DBAPIError as e:
            self.connection.rollback()
            if e.connection_invalidated:
                raise StoreConnectionError(f"Lost connection to the database: {e.orig}") from e
            raise QueryError(f"The database rejected the statement: {e.orig}") from e
        except SQLAlchemyError as e:
            self.connection.rollback()
            raise QueryError(f"The database rejected the statement: {e}") from e

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def _require_connection(self) -> None:
        if self.connection is None:
            raise StoreConnectionError("The database connection is not open.")
