"""Integration tests for PostgresCommentRepository.

Require a PostgreSQL database at DATABASE__URL with migrations applied.
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.model.common import utcnow
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.value import CommentStatus
from tests.factories import make_comment, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("DATABASE__URL"), reason="DATABASE__URL is not set"
    ),
]

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def seed_post(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    author = await user_repo.save(make_user(f"user_{uuid4().hex[:12]}"))
    post = await post_repo.save(make_post(author.id))
    return author, post


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author, post = await seed_post(integration_env)
        comment = make_comment(post.id, author_id=author.id)

        # Act
        await comment_repo.save(comment)
        found = await comment_repo.find_by_id(comment.id)

        # Assert
        assert found is not None
        assert found.id == comment.id
        assert found.status == CommentStatus.APPROVED
        assert found.depth == 0

    @pytest.mark.asyncio
    async def test_transition_status_only_from_pending(self, integration_env):
        """The conditional update refuses to overwrite a decided status."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        _, post = await seed_post(integration_env)
        comment = await comment_repo.save(
            make_comment(post.id, status=CommentStatus.PENDING)
        )

        # Act
        first = await comment_repo.transition_status(
            comment.id, CommentStatus.PENDING, CommentStatus.APPROVED, utcnow()
        )
        second = await comment_repo.transition_status(
            comment.id, CommentStatus.PENDING, CommentStatus.SPAM, utcnow()
        )

        # Assert
        assert first is not None
        assert first.status == CommentStatus.APPROVED
        assert second is None

    @pytest.mark.asyncio
    async def test_soft_delete_only_once(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        _, post = await seed_post(integration_env)
        comment = await comment_repo.save(make_comment(post.id))

        first = await comment_repo.soft_delete(comment.id, utcnow())
        second = await comment_repo.soft_delete(comment.id, utcnow())

        assert first is not None and first.is_deleted
        assert second is None

    @pytest.mark.asyncio
    async def test_find_by_post_paginates_oldest_first(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        _, post = await seed_post(integration_env)
        start = utcnow()
        saved = [
            await comment_repo.save(
                make_comment(post.id, created_at=start + timedelta(seconds=i))
            )
            for i in range(3)
        ]

        # Act
        items, total = await comment_repo.find_by_post(
            post_id=post.id, status=None, author_id=None, limit=2, offset=2
        )

        # Assert
        assert total == 3
        assert [c.id for c in items] == [saved[2].id]

    @pytest.mark.asyncio
    async def test_count_replies_skips_deleted(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        _, post = await seed_post(integration_env)
        root = await comment_repo.save(make_comment(post.id))
        await comment_repo.save(make_comment(post.id, parent=root))
        await comment_repo.save(make_comment(post.id, parent=root, deleted=True))

        counts = await comment_repo.count_replies([root.id])

        assert counts == {root.id: 1}
