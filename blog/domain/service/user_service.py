"""User domain service."""

import logfire

from blog.domain.error import NotAuthorizedError, UserNotFoundError, ValidationError
from blog.domain.model.common import utcnow
from blog.domain.model.user import User
from blog.domain.repository import UserRepository
from blog.domain.value import Identity, UserId

from .base import Service
from .ownership_service import OwnershipGuard

MAX_DISPLAY_NAME_LENGTH = 100
MAX_BIO_LENGTH = 500


class UserService(Service):
    """Domain service for user profiles and capabilities."""

    def __init__(
        self, user_repository: UserRepository, ownership_guard: OwnershipGuard
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            ownership_guard: Guard for owner-only profile edits
        """
        self.user_repository = user_repository
        self.ownership_guard = ownership_guard

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            UserNotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise UserNotFoundError(str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get a user by username.

        Args:
            username: Username

        Returns:
            The user

        Raises:
            UserNotFoundError: If no user has this username
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                logfire.warn("User not found", username=username)
                raise UserNotFoundError(username)
            return user

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Get several users at once; missing users are left out.

        Args:
            user_ids: User IDs

        Returns:
            Mapping of user ID to user
        """
        if not user_ids:
            return {}
        return await self.user_repository.find_by_ids(list(set(user_ids)))

    async def update_profile(
        self,
        user_id: UserId,
        identity: Identity | None,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Update a user's profile.

        Only the profile owner may edit it. Fields left as None are kept.

        Args:
            user_id: ID of the profile to edit
            identity: Identity of the actor
            display_name: New display name
            bio: New bio
            avatar_url: New avatar URL

        Returns:
            Updated user

        Raises:
            NotAuthorizedError: If the actor does not own the profile
            UserNotFoundError: If the user does not exist
            ValidationError: If a field is too long
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            self.ownership_guard.authorize_mutation(
                identity, user_id, "profile", user_id
            )

            if display_name is not None and len(display_name) > MAX_DISPLAY_NAME_LENGTH:
                raise ValidationError(
                    f"Display name must be at most {MAX_DISPLAY_NAME_LENGTH} characters"
                )
            if bio is not None and len(bio) > MAX_BIO_LENGTH:
                raise ValidationError(f"Bio must be at most {MAX_BIO_LENGTH} characters")

            user = await self.get_by_id(user_id)

            update_data = {"updated_at": utcnow()}
            if display_name is not None:
                update_data["display_name"] = display_name
            if bio is not None:
                update_data["bio"] = bio
            if avatar_url is not None:
                update_data["avatar_url"] = avatar_url

            saved = await self.user_repository.save(user.model_copy(update=update_data))
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in update_data if k != "updated_at"),
            )
            return saved

    async def require_moderator(self, identity: Identity) -> User:
        """Load the acting user and require moderator capability.

        Args:
            identity: Authenticated identity

        Returns:
            The moderator's user record

        Raises:
            NotAuthorizedError: If the user is unknown or not a moderator
        """
        user = await self.user_repository.find_by_id(identity.id)
        if user is None or not user.is_moderator:
            logfire.warn("Moderation denied", user_id=str(identity.id))
            raise NotAuthorizedError("comments", "moderation", str(identity.id))
        return user
