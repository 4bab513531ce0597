"""Store and resource exceptions.

Raised by the service layer when a statement cannot be carried out.
The API layer registers a handler for each of them and turns them into
`{"error": message}` JSON responses.
"""

from fastapi import status


class StoreError(Exception):
    """Base class for everything the handlers report to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreConnectionError(StoreError):
    """The database is unreachable or rejected the credentials."""

    def __init__(self, message: str = "Database connection failed"):
        super().__init__(message)


class QueryError(StoreError):
    """A statement failed for a reason that is not classified further."""


class DuplicateKeyError(StoreError):
    """A client-supplied primary key collides with an existing row."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StoreError):
    """The statement matched no row."""

    status_code = status.HTTP_404_NOT_FOUND
