"""
Application errors.

Everything raised on purpose derives from PersonnelError so the main menu can
catch failures uniformly and print a readable message.
"""


class PersonnelError(Exception):
    """Base class for all application errors."""


class ConfigurationError(PersonnelError):
    """Connection settings are missing from the environment."""


class StoreConnectionError(PersonnelError):
    """The database is unreachable."""


class QueryError(PersonnelError):
    """A statement was rejected by the database."""


class NotFound(PersonnelError):
    """A name or id did not match any row."""


class ValidationError(PersonnelError):
    """Operator input was rejected by a prompt."""
