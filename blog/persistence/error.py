"""Persistence layer errors."""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import SQLAlchemyError

P = ParamSpec("P")
R = TypeVar("R")


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class DatabaseError(PersistenceError):
    """A database operation failed.

    The message carries driver detail for server-side logs only; it is never
    returned to API clients.
    """

    pass


def wrap_database_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Re-raise SQLAlchemy errors from a repository method as DatabaseError."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            raise DatabaseError(f"{func.__qualname__} failed: {e}") from e

    return wrapper
