"""Unit tests for UpdatePostUseCase."""

import pytest

from blog.application.usecase.post.update_post import (
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import NotAuthorizedError, PostNotFoundError
from blog.domain.repository import PostRepository
from blog.domain.service import PostService
from tests.factories import identity_for, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_title(self, unit_env):
        """Author can change the title; content is kept."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        update_post_use_case = UpdatePostUseCase(post_service=post_service)

        author = make_user()
        post = await post_repo.save(make_post(author.id, title="Draft"))

        # Act
        response = await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id), identity=identity_for(author), title="Final"
            )
        )

        # Assert
        assert response.post.title == "Final"
        assert response.post.content == post.content
        assert response.post.author_id == str(author.id)

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id),
                    identity=identity_for(make_user("mallory")),
                    title="Mine",
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_post_cannot_be_updated(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_repo.save(make_post(author.id))
        await post_service.delete_post(post.id, identity_for(author))

        with pytest.raises(PostNotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id), identity=identity_for(author), title="Back"
                )
            )
