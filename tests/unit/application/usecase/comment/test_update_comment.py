"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment.update_comment import (
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import CommentDeletedError, NotAuthorizedError
from blog.domain.repository import CommentRepository, UserRepository
from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentStatus, PostId
from tests.factories import identity_for, make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_keeps_status(self, unit_env):
        """Editing a pending comment leaves it pending."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_service = await unit_env.get(UserService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)

        update_comment_use_case = UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

        author = await user_repo.save(make_user("alice"))
        comment = await comment_repo.save(
            make_comment(
                PostId(uuid4()),
                author_id=author.id,
                status=CommentStatus.PENDING,
                content="Original",
            )
        )

        # Act
        response = await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id),
                content="Updated",
                identity=identity_for(author),
            )
        )

        # Assert
        assert response.comment.content == "Updated"
        assert response.comment.status == "pending"
        assert response.comment.author.username == "alice"

    @pytest.mark.asyncio
    async def test_update_by_other_user(self, unit_env):
        """Only the author may edit."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), author_id=make_user().id)
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    content="Updated",
                    identity=identity_for(make_user("mallory")),
                )
            )

    @pytest.mark.asyncio
    async def test_update_deleted_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), author_id=author.id, deleted=True)
        )

        with pytest.raises(CommentDeletedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    content="Updated",
                    identity=identity_for(author),
                )
            )
