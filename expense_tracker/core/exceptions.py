# expense_tracker/core/exceptions.py
from fastapi import status


class RecordServiceError(Exception):
    """Base class for failures surfaced by the record service.

    Each subclass carries the HTTP status it maps to; ``message`` is the
    plain-text body returned to the client.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecordServiceError):
    """A referenced record (e.g. the category of a transaction) does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RecordServiceError):
    """The record targeted by an update or delete does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(RecordServiceError):
    """The underlying storage operation failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
