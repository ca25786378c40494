"""User repository interface."""

from abc import abstractmethod
from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.base import ResourceRepository
from blog.domain.value import UserId


class UserRepository(ResourceRepository[User, UserId]):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The unique username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: User IDs to look up

        Returns:
            Mapping of user ID to user for the users that exist
        """
        pass
