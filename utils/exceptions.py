"""
utils/exceptions.py
-------------------
Error taxonomy shared by every layer.

    ProjectsError
    ├── DatabaseConnectionError  - no connection could be opened
    ├── PersistenceError         - a SQL statement failed, transaction rolled back
    └── NotFoundError            - an id-qualified operation matched no row
"""


class ProjectsError(Exception):
    """Base class for all application errors."""


class DatabaseConnectionError(ProjectsError):
    """The database driver could not establish a connection."""


class PersistenceError(ProjectsError):
    """
    A SQL statement failed inside a transaction.

    The transaction has already been rolled back when this is raised.
    The driver error is available as ``__cause__``.
    """


class NotFoundError(ProjectsError):
    """Raised by the service layer when a requested entity does not exist."""
