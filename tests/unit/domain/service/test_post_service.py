"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, PostNotFoundError, ValidationError
from blog.domain.model.common import utcnow
from blog.domain.repository import PostRepository
from blog.domain.service import PostService
from blog.domain.value import PostId
from tests.factories import identity_for, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env):
        """Created posts are stored and owned by the author."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()

        # Act
        post = await post_service.create_post(author.id, "Title", "Body")

        # Assert
        assert post.author_id == author.id
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content", [("   ", "Body"), ("x" * 201, "Body"), ("Title", "")]
    )
    async def test_invalid_post(self, unit_env, title, content):
        """Blank or oversized titles and empty bodies are rejected."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(make_user().id, title, content)


class TestGetPost:
    """Tests for get_post method."""

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(PostNotFoundError):
            await post_service.get_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleted_post_is_not_found(self, unit_env):
        """Soft-deleted posts are hidden."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_repo.save(make_post(author.id))
        await post_service.delete_post(post.id, identity_for(author))

        # Act & Assert
        with pytest.raises(PostNotFoundError):
            await post_service.get_post(post.id)


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        """Fields left as None are kept."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_repo.save(make_post(author.id, title="Old title"))

        # Act
        updated = await post_service.update_post(
            post.id, identity_for(author), content="New body"
        )

        # Assert
        assert updated.title == "Old title"
        assert updated.content == "New body"

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(
                post.id, identity_for(make_user("mallory")), title="Mine now"
            )

    @pytest.mark.asyncio
    async def test_anonymous_cannot_update(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, None, title="Mine now")


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, identity_for(make_user("bob")))

        assert (await post_service.get_post(post.id)).id == post.id


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_newest_first_with_totals(self, unit_env):
        """Pages are ordered newest first and report totals across pages."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        start = utcnow()
        posts = [
            await post_repo.save(
                make_post(author.id, title=f"Post {i}").model_copy(
                    update={"created_at": start + timedelta(minutes=i)}
                )
            )
            for i in range(3)
        ]

        # Act
        first = await post_service.list_posts(page=1, per_page=2)
        second = await post_service.list_posts(page=2, per_page=2)

        # Assert
        assert [p.id for p in first.items] == [posts[2].id, posts[1].id]
        assert [p.id for p in second.items] == [posts[0].id]
        assert first.total == 3
        assert first.total_pages == 2

    @pytest.mark.asyncio
    async def test_deleted_posts_are_hidden(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        kept = await post_repo.save(make_post(author.id))
        gone = await post_repo.save(make_post(author.id))
        await post_service.delete_post(gone.id, identity_for(author))

        page = await post_service.list_posts()

        assert [p.id for p in page.items] == [kept.id]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_filter_by_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("alice"), make_user("bob")
        await post_repo.save(make_post(alice.id))
        bobs = await post_repo.save(make_post(bob.id))

        page = await post_service.list_posts(author_id=bob.id)

        assert [p.id for p in page.items] == [bobs.id]

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(make_user().id))

        page = await post_service.list_posts(page=5, per_page=10)

        assert page.items == []
        assert page.total == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,per_page", [(0, 10), (1, 0), (1, 101)])
    async def test_invalid_pagination(self, unit_env, page, per_page):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.list_posts(page=page, per_page=per_page)
