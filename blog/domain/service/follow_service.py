"""Follow domain service."""

import logfire

from blog.domain.error import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
    UserNotFoundError,
)
from blog.domain.model.common import Page, utcnow
from blog.domain.model.follow import Follow
from blog.domain.model.user import User
from blog.domain.repository import FollowRepository, UserRepository
from blog.domain.value import Identity, UserId

from .base import Service, validate_pagination


class FollowService(Service):
    """Domain service for users following each other."""

    def __init__(
        self, follow_repository: FollowRepository, user_repository: UserRepository
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_repository: User repository
        """
        self.follow_repository = follow_repository
        self.user_repository = user_repository

    async def follow(self, identity: Identity, user_id: UserId) -> Follow:
        """Follow a user.

        Args:
            identity: Authenticated follower
            user_id: User to follow

        Returns:
            The new follow

        Raises:
            SelfFollowError: If the user tries to follow themselves
            UserNotFoundError: If the user to follow does not exist
            AlreadyFollowingError: If the user is already followed
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(identity.id),
            followee_id=str(user_id),
        ):
            if identity.id == user_id:
                raise SelfFollowError()
            await self._require_user(user_id)

            follow = Follow(
                follower_id=identity.id, followee_id=user_id, created_at=utcnow()
            )
            if not await self.follow_repository.add(follow):
                raise AlreadyFollowingError(str(user_id))

            logfire.info(
                "User followed", follower_id=str(identity.id), followee_id=str(user_id)
            )
            return follow

    async def unfollow(self, identity: Identity, user_id: UserId) -> None:
        """Stop following a user.

        Raises:
            SelfFollowError: If the user tries to unfollow themselves
            UserNotFoundError: If the user to unfollow does not exist
            NotFollowingError: If the user was not followed
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=str(identity.id),
            followee_id=str(user_id),
        ):
            if identity.id == user_id:
                raise SelfFollowError()
            await self._require_user(user_id)

            if not await self.follow_repository.remove(identity.id, user_id):
                raise NotFollowingError(str(user_id))

            logfire.info(
                "User unfollowed", follower_id=str(identity.id), followee_id=str(user_id)
            )

    async def is_following(self, identity: Identity | None, user_id: UserId) -> bool:
        """Whether the caller follows the user; anonymous callers follow no one."""
        if identity is None or identity.id == user_id:
            return False
        return await self.follow_repository.exists(identity.id, user_id)

    async def count(self, user_id: UserId) -> tuple[int, int]:
        """Count a user's followers and followees.

        Returns:
            Tuple of (followers, following)
        """
        return await self.follow_repository.count(user_id)

    async def list_followers(
        self, user_id: UserId, page: int = 1, per_page: int | None = None
    ) -> Page[User]:
        """List the users following a user, most recent first.

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If page or per_page are out of range
        """
        per_page = validate_pagination(page, per_page)
        with logfire.span("follow_service.list_followers", user_id=str(user_id)):
            await self._require_user(user_id)
            ids, total = await self.follow_repository.find_followers(
                user_id, limit=per_page, offset=(page - 1) * per_page
            )
            return await self._page(ids, total, page, per_page)

    async def list_following(
        self, user_id: UserId, page: int = 1, per_page: int | None = None
    ) -> Page[User]:
        """List the users a user follows, most recent first.

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If page or per_page are out of range
        """
        per_page = validate_pagination(page, per_page)
        with logfire.span("follow_service.list_following", user_id=str(user_id)):
            await self._require_user(user_id)
            ids, total = await self.follow_repository.find_following(
                user_id, limit=per_page, offset=(page - 1) * per_page
            )
            return await self._page(ids, total, page, per_page)

    async def _require_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def _page(
        self, ids: list[UserId], total: int, page: int, per_page: int
    ) -> Page[User]:
        users = await self.user_repository.find_by_ids(ids) if ids else {}
        return Page[User](
            items=[users[user_id] for user_id in ids if user_id in users],
            total=total,
            page=page,
            per_page=per_page,
        )
