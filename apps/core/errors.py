"""
Application error taxonomy.

Every service in the project raises errors from this small closed set of
kinds. Callers branch on the kind (``kind_of`` / ``is_kind`` or the exception
class), never on the message text or on ORM-specific exceptions.

Hierarchy:
    AppError (base, carries ``kind``)
    ├── NotFoundError          kind=not_found
    ├── InvalidInputError      kind=invalid_input
    ├── ConflictError          kind=conflict
    ├── UnauthorizedError      kind=unauthorized
    ├── ForbiddenError         kind=forbidden
    └── InternalError          kind=internal
        └── InvalidTransactionError

Storage-level absence (``ObjectDoesNotExist`` and malformed primary keys) is
translated into ``NotFoundError`` by ``translate_storage_error`` at the point
where it is first observed. Every other storage failure passes through
unchanged so callers can tell "not there" from "something is broken".

Usage:
    from apps.core.errors import not_found_boundary

    with not_found_boundary():
        store = Store.objects.get(id=store_id)
"""

import enum
from contextlib import contextmanager
from typing import Optional

from django.core.exceptions import ObjectDoesNotExist, ValidationError


class ErrorKind(str, enum.Enum):
    """High-level error category."""

    UNKNOWN = 'unknown'
    NOT_FOUND = 'not_found'
    INVALID_INPUT = 'invalid_input'
    CONFLICT = 'conflict'
    UNAUTHORIZED = 'unauthorized'
    FORBIDDEN = 'forbidden'
    INTERNAL = 'internal'


class AppError(Exception):
    """
    Base exception for all application errors.

    Subclasses pin ``kind`` and may override ``default_message`` so that
    ``raise StoreNotFoundError()`` carries a sensible message.
    """

    kind = ErrorKind.INTERNAL
    default_message = 'internal error'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Requested row does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = 'not found'


class InvalidInputError(AppError):
    """Request data failed validation."""

    kind = ErrorKind.INVALID_INPUT
    default_message = 'invalid input'


class ConflictError(AppError):
    """Operation conflicts with existing state."""

    kind = ErrorKind.CONFLICT
    default_message = 'conflict'


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = 'unauthorized'


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = 'forbidden'


class InternalError(AppError):
    kind = ErrorKind.INTERNAL
    default_message = 'internal error'


class InvalidTransactionError(InternalError):
    """No usable transaction was supplied for a multi-row write."""

    default_message = 'invalid transaction'


def kind_of(exc: BaseException) -> ErrorKind:
    """Return the kind carried by ``exc`` or ``ErrorKind.UNKNOWN``."""
    if isinstance(exc, AppError):
        return exc.kind
    return ErrorKind.UNKNOWN


def is_kind(exc: BaseException, kind: ErrorKind) -> bool:
    return kind_of(exc) == kind


def translate_storage_error(exc: BaseException) -> BaseException:
    """
    Map a storage-layer exception onto the taxonomy.

    Args:
        exc: Exception raised by the ORM or the database driver

    Returns:
        ``NotFoundError`` (chained to ``exc``) for row-absent conditions,
        otherwise ``exc`` itself
    """
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, (ObjectDoesNotExist, ValidationError)):
        # A malformed key can never match a row, so it is reported as absent.
        translated = NotFoundError()
        translated.__cause__ = exc
        return translated
    return exc


@contextmanager
def not_found_boundary(error_class: type = NotFoundError):
    """
    Translate row-absent failures raised inside the block.

    Args:
        error_class: NotFoundError subclass to raise instead of the generic one

    Raises:
        error_class: If the block raised a row-absent storage error
    """
    try:
        yield
    except (ObjectDoesNotExist, ValidationError) as exc:
        if error_class is NotFoundError:
            raise translate_storage_error(exc) from exc
        raise error_class() from exc

