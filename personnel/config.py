"""
Connection settings, read once from the environment at startup.
"""

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from personnel.exceptions import ConfigurationError

DEFAULT_DRIVER = "postgresql+psycopg2"

DEFAULT_PORTS = {
    "postgresql": 5432,
    "mysql": 3306,
}

REQUIRED_VARIABLES = ("DB_HOST", "DB_USER", "DB_NAME")


@dataclass(frozen=True)
class DatabaseSettings:
    driver: str
    host: str
    user: str
    password: str
    name: str
    port: int

    @property
    def url(self) -> URL:
        """SQLAlchemy URL with the credentials escaped."""
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.name,
        )


def default_port(driver: str) -> int:
    """Returns the usual port for a driver such as 'mysql+pymysql'."""
    backend = driver.split("+", 1)[0]
    return DEFAULT_PORTS.get(backend, DEFAULT_PORTS["postgresql"])


def load_settings(environ=None) -> DatabaseSettings:
    """
    Builds DatabaseSettings from DB_* variables.
    Raises ConfigurationError listing every required variable that is unset.
    """
    environ = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
    if missing:
        raise ConfigurationError(
            f"Database environment variables are not set: {', '.join(missing)}. "
            "Please check your .env file."
        )

    driver = environ.get("DB_DRIVER") or DEFAULT_DRIVER
    port_value = environ.get("DB_PORT")

    try:
        port = int(port_value) if port_value else default_port(driver)
    except ValueError:
        raise ConfigurationError(f"DB_PORT must be a number, got '{port_value}'.")

    return DatabaseSettings(
        driver=driver,
        host=environ["DB_HOST"],
        user=environ["DB_USER"],
        password=environ.get("DB_PASSWORD", ""),
        name=environ["DB_NAME"],
        port=port,
    )


def database_url(environ=None) -> URL:
    """DATABASE_URL wins when present, otherwise the DB_* variables are used."""
    environ = os.environ if environ is None else environ

    if environ.get("DATABASE_URL"):
        try:
            return make_url(environ["DATABASE_URL"])
        except ArgumentError as e:
            raise ConfigurationError(f"DATABASE_URL is not a valid database URL: {e}") from e

    return load_settings(environ).url
