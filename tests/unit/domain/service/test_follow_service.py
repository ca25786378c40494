"""Unit tests for FollowService."""

from uuid import uuid4

import pytest

from blog.domain.error import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
    UserNotFoundError,
    ValidationError,
)
from blog.domain.repository import FollowRepository, UserRepository
from blog.domain.service import FollowService
from blog.domain.value import UserId
from tests.factories import identity_for, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_users(env, *usernames):
    user_repo = await env.get(UserRepository)
    return [await user_repo.save(make_user(name)) for name in usernames]


class TestFollow:
    """Tests for follow and unfollow."""

    @pytest.mark.asyncio
    async def test_follow_user(self, unit_env):
        """A follow is stored and counted on both sides."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob = await seed_users(unit_env, "alice", "bob")

        # Act
        follow = await follow_service.follow(identity_for(alice), bob.id)

        # Assert
        assert follow.follower_id == alice.id
        assert follow.followee_id == bob.id
        assert await follow_service.count(bob.id) == (1, 0)
        assert await follow_service.count(alice.id) == (0, 1)
        assert await follow_service.is_following(identity_for(alice), bob.id)

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        (alice,) = await seed_users(unit_env, "alice")

        with pytest.raises(SelfFollowError):
            await follow_service.follow(identity_for(alice), alice.id)

    @pytest.mark.asyncio
    async def test_follow_twice(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        alice, bob = await seed_users(unit_env, "alice", "bob")
        await follow_service.follow(identity_for(alice), bob.id)

        with pytest.raises(AlreadyFollowingError):
            await follow_service.follow(identity_for(alice), bob.id)

        assert await follow_service.count(bob.id) == (1, 0)

    @pytest.mark.asyncio
    async def test_follow_unknown_user(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        (alice,) = await seed_users(unit_env, "alice")

        with pytest.raises(UserNotFoundError):
            await follow_service.follow(identity_for(alice), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unfollow(self, unit_env):
        # Arrange
        follow_service = await unit_env.get(FollowService)
        follow_repo = await unit_env.get(FollowRepository)
        alice, bob = await seed_users(unit_env, "alice", "bob")
        await follow_service.follow(identity_for(alice), bob.id)

        # Act
        await follow_service.unfollow(identity_for(alice), bob.id)

        # Assert
        assert not await follow_repo.exists(alice.id, bob.id)
        assert await follow_service.count(bob.id) == (0, 0)

    @pytest.mark.asyncio
    async def test_unfollow_when_not_following(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        alice, bob = await seed_users(unit_env, "alice", "bob")

        with pytest.raises(NotFollowingError):
            await follow_service.unfollow(identity_for(alice), bob.id)

    @pytest.mark.asyncio
    async def test_anonymous_follows_no_one(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        (bob,) = await seed_users(unit_env, "bob")

        assert await follow_service.is_following(None, bob.id) is False


class TestListFollows:
    """Tests for list_followers and list_following."""

    @pytest.mark.asyncio
    async def test_list_followers_and_following(self, unit_env):
        # Arrange
        follow_service = await unit_env.get(FollowService)
        alice, bob, carol = await seed_users(unit_env, "alice", "bob", "carol")
        await follow_service.follow(identity_for(bob), alice.id)
        await follow_service.follow(identity_for(carol), alice.id)
        await follow_service.follow(identity_for(alice), carol.id)

        # Act
        followers = await follow_service.list_followers(alice.id)
        following = await follow_service.list_following(alice.id)

        # Assert
        assert {u.id for u in followers.items} == {bob.id, carol.id}
        assert followers.total == 2
        assert [u.id for u in following.items] == [carol.id]
        assert following.total == 1

    @pytest.mark.asyncio
    async def test_followers_paginated(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        alice, bob, carol = await seed_users(unit_env, "alice", "bob", "carol")
        await follow_service.follow(identity_for(bob), alice.id)
        await follow_service.follow(identity_for(carol), alice.id)

        page = await follow_service.list_followers(alice.id, page=2, per_page=1)

        assert len(page.items) == 1
        assert page.total == 2
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_followers_of_unknown_user(self, unit_env):
        follow_service = await unit_env.get(FollowService)

        with pytest.raises(UserNotFoundError):
            await follow_service.list_followers(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_invalid_pagination(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        (alice,) = await seed_users(unit_env, "alice")

        with pytest.raises(ValidationError):
            await follow_service.list_following(alice.id, page=0)
