"""Domain exceptions for reviews app.

Each one refines a kind from ``apps.core.errors``; callers that only care about
the kind keep working when a new refinement is added.
"""

from apps.core.errors import (
    ConflictError,
    InvalidInputError,
    InvalidTransactionError,
    NotFoundError,
)


class StoreNotFoundError(NotFoundError):
    default_message = 'store not found'


class ReviewNotFoundError(NotFoundError):
    default_message = 'review not found'


class UserNotFoundError(NotFoundError):
    default_message = 'user not found'


class InvalidRatingError(InvalidInputError):
    """Rating must be between 1 and 5."""

    default_message = 'rating must be between 1 and 5'


class InvalidFileIdsError(InvalidInputError):
    """Some file ids are unknown, deleted, or belong to another store."""

    default_message = 'invalid file IDs'


class AlreadyExistsError(ConflictError):
    default_message = 'already exists'


__all__ = [
    'StoreNotFoundError',
    'ReviewNotFoundError',
    'UserNotFoundError',
    'InvalidRatingError',
    'InvalidFileIdsError',
    'AlreadyExistsError',
    'InvalidTransactionError',
]
