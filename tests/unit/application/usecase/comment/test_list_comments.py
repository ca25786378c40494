"""Unit tests for ListCommentsUseCase and ListRepliesUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.application.usecase.comment.list_comments import (
    ListCommentsRequest,
    ListCommentsUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from blog.domain.error import PostNotFoundError
from blog.domain.model.common import utcnow
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from tests.factories import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_tombstones_are_masked(self, unit_env):
        """Deleted comments keep their place but hide content and author."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        alice = await user_repo.save(make_user("alice"))
        post = await post_repo.save(make_post(alice.id))
        start = utcnow()
        deleted = await comment_repo.save(
            make_comment(
                post.id, author_id=alice.id, content="Regrettable", created_at=start,
                deleted=True,
            )
        )
        await comment_repo.save(
            make_comment(
                post.id, author_id=alice.id, parent=deleted,
                created_at=start + timedelta(seconds=5),
            )
        )

        # Act
        response = await use_case.execute(ListCommentsRequest(post_id=str(post.id)))

        # Assert
        tombstone, reply = response.comments
        assert tombstone.is_deleted
        assert tombstone.content == "[deleted]"
        assert tombstone.author is None
        assert tombstone.replies_count == 1
        assert reply.parent_id == tombstone.id
        assert reply.author.username == "alice"

    @pytest.mark.asyncio
    async def test_pagination_totals(self, unit_env):
        """Pagination view reports totals for the whole thread."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(make_user().id))
        start = utcnow()
        for i in range(3):
            await comment_repo.save(
                make_comment(post.id, created_at=start + timedelta(seconds=i))
            )

        # Act
        response = await use_case.execute(
            ListCommentsRequest(post_id=str(post.id), page=2, per_page=2)
        )

        # Assert
        assert len(response.comments) == 1
        assert response.pagination.total == 3
        assert response.pagination.total_pages == 2
        assert response.pagination.page == 2

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(PostNotFoundError):
            await use_case.execute(ListCommentsRequest(post_id=str(uuid4())))


class TestListRepliesUseCase:
    """Tests for ListRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_direct_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListRepliesUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post(make_user().id)
        root = await comment_repo.save(make_comment(post.id))
        child = await comment_repo.save(make_comment(post.id, parent=root))
        await comment_repo.save(make_comment(post.id, parent=child))

        # Act
        response = await use_case.execute(ListRepliesRequest(comment_id=str(root.id)))

        # Assert
        assert [c.id for c in response.comments] == [str(child.id)]
        assert response.comments[0].replies_count == 1
