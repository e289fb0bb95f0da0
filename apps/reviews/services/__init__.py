"""
Reviews services - Business logic layer.

This package contains the business operations for the reviews app:
- Review authoring with menu/file links
- Store and user review listings with like counts
- The like ledger
"""

from .review_management import (
    ReviewService,
    default_review_service,
    create_review,
    list_reviews,
    get_review_by_id,
    get_user_reviews,
)

from .like_management import (
    LikeLedger,
    like_review,
    unlike_review,
)

from .validation import ExistenceValidator, normalize_ids

# Domain Exceptions
from .exceptions import (
    StoreNotFoundError,
    ReviewNotFoundError,
    UserNotFoundError,
    InvalidRatingError,
    InvalidFileIdsError,
    AlreadyExistsError,
    InvalidTransactionError,
)

__all__ = [
    # Review Management Services
    'ReviewService',
    'default_review_service',
    'create_review',
    'list_reviews',
    'get_review_by_id',
    'get_user_reviews',
    # Like Ledger
    'LikeLedger',
    'like_review',
    'unlike_review',
    # Validation
    'ExistenceValidator',
    'normalize_ids',
    # Exceptions
    'StoreNotFoundError',
    'ReviewNotFoundError',
    'UserNotFoundError',
    'InvalidRatingError',
    'InvalidFileIdsError',
    'AlreadyExistsError',
    'InvalidTransactionError',
]
