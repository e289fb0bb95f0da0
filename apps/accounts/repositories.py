"""User lookups used by the review services."""

from apps.core.errors import not_found_boundary

from .models import User


class UserRepository:

    def find_by_id(self, user_id) -> User:
        """
        Fetch an active user.

        Raises:
            NotFoundError: If no active user has this id
        """
        with not_found_boundary():
            return User.objects.get(id=user_id, is_active=True)
