"""
Database utilities for storage error handling
"""
import functools
import logging
from typing import Callable, Any, TypeVar, cast, Awaitable

from sqlalchemy.exc import SQLAlchemyError

from .exceptions import StorageError

logger = logging.getLogger(__name__)

# Define a type variable for the return type of the decorated function
T = TypeVar('T')

def translate_storage_errors(
    message: str
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator for service methods that converts SQLAlchemy failures into
    ``StorageError``.

    The wrapped callable must be a method of an object exposing the
    request's session as ``self.db``. The session is rolled back before the
    error is raised so it stays usable.

    Args:
        message: Client-facing text carried by the raised ``StorageError``

    Returns:
        Decorated coroutine function
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> T:
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                logger.exception(f"{func.__name__} failed: {str(e)}")
                try:
                    await self.db.rollback()
                except SQLAlchemyError:
                    logger.warning(f"Rollback after {func.__name__} failure did not complete")
                raise StorageError(message) from e

        return cast(Callable[..., Awaitable[T]], wrapper)

    return decorator
