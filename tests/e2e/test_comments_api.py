"""End-to-end tests for threaded comments and moderation."""

import pytest

from blog.domain.value import UserRole
from tests.harness import create_api_fixture

# E2E test fixture
api_env = create_api_fixture()


async def create_post(api_env, author) -> str:
    response = await api_env.client.post(
        "/posts",
        json={"title": "Threads", "content": "Let's discuss"},
        headers=await api_env.auth_headers(author),
    )
    assert response.status_code == 201
    return response.json()["post"]["id"]


async def approve(api_env, moderator, comment_id: str) -> None:
    response = await api_env.client.post(
        f"/comments/{comment_id}/moderate",
        json={"action": "approve"},
        headers=await api_env.auth_headers(moderator),
    )
    assert response.status_code == 200


class TestCommentLifecycle:
    """Create, moderate, reply, edit and delete through the API."""

    @pytest.mark.asyncio
    async def test_moderation_then_reply(self, api_env):
        """Replies need an approved parent."""
        # Arrange
        alice = await api_env.seed_user("alice")
        bob = await api_env.seed_user("bob")
        mod = await api_env.seed_user("moderator", role=UserRole.MODERATOR)
        post_id = await create_post(api_env, alice)

        # Act - top-level comment starts pending
        created = await api_env.client.post(
            "/comments",
            json={"post_id": post_id, "content": "First thoughts"},
            headers=await api_env.auth_headers(alice),
        )
        comment_id = created.json()["comment"]["id"]

        early_reply = await api_env.client.post(
            f"/comments/{comment_id}/replies",
            json={"content": "Me too"},
            headers=await api_env.auth_headers(bob),
        )

        await approve(api_env, mod, comment_id)

        reply = await api_env.client.post(
            f"/comments/{comment_id}/replies",
            json={"content": "Me too"},
            headers=await api_env.auth_headers(bob),
        )

        # Assert
        assert created.status_code == 201
        assert created.json()["comment"]["status"] == "pending"
        assert created.json()["comment"]["depth"] == 0

        assert early_reply.status_code == 400
        assert early_reply.json()["error"]["code"] == 400

        assert reply.status_code == 201
        body = reply.json()["comment"]
        assert body["parent_id"] == comment_id
        assert body["post_id"] == post_id
        assert body["depth"] == 1
        assert body["author"]["username"] == "bob"

    @pytest.mark.asyncio
    async def test_nesting_limit(self, api_env):
        """A reply at the third level is rejected."""
        # Arrange
        alice = await api_env.seed_user("alice")
        mod = await api_env.seed_user("moderator", role=UserRole.MODERATOR)
        post_id = await create_post(api_env, alice)
        headers = await api_env.auth_headers(alice)

        parent_id = None
        for depth in range(3):
            payload = {"post_id": post_id, "content": f"level {depth}"}
            if parent_id:
                payload["parent_id"] = parent_id
            response = await api_env.client.post("/comments", json=payload, headers=headers)
            assert response.status_code == 201
            assert response.json()["comment"]["depth"] == depth
            parent_id = response.json()["comment"]["id"]
            await approve(api_env, mod, parent_id)

        # Act
        response = await api_env.client.post(
            "/comments",
            json={"post_id": post_id, "parent_id": parent_id, "content": "too deep"},
            headers=headers,
        )

        # Assert
        assert response.status_code == 400
        assert "nesting" in response.json()["error"]["message"]

    @pytest.mark.asyncio
    async def test_edit_and_delete_ownership(self, api_env):
        """Only the author edits or deletes."""
        # Arrange
        alice = await api_env.seed_user("alice")
        bob = await api_env.seed_user("bob")
        post_id = await create_post(api_env, alice)
        created = await api_env.client.post(
            "/comments",
            json={"post_id": post_id, "content": "Original"},
            headers=await api_env.auth_headers(alice),
        )
        comment_id = created.json()["comment"]["id"]

        # Act
        forbidden = await api_env.client.patch(
            f"/comments/{comment_id}",
            json={"content": "Hijacked"},
            headers=await api_env.auth_headers(bob),
        )
        edited = await api_env.client.patch(
            f"/comments/{comment_id}",
            json={"content": "Edited"},
            headers=await api_env.auth_headers(alice),
        )
        deleted = await api_env.client.delete(
            f"/comments/{comment_id}", headers=await api_env.auth_headers(alice)
        )
        edit_after_delete = await api_env.client.patch(
            f"/comments/{comment_id}",
            json={"content": "Back again"},
            headers=await api_env.auth_headers(alice),
        )
        other_after_delete = await api_env.client.delete(
            f"/comments/{comment_id}", headers=await api_env.auth_headers(bob)
        )
        tombstone = await api_env.client.get(f"/comments/{comment_id}")

        # Assert
        assert forbidden.status_code == 403
        assert forbidden.json()["error"]["code"] == 403
        assert edited.status_code == 200
        assert edited.json()["comment"]["content"] == "Edited"
        assert deleted.status_code == 204
        assert edit_after_delete.status_code == 410
        assert other_after_delete.status_code == 403
        assert tombstone.status_code == 200
        assert tombstone.json()["comment"]["content"] == "[deleted]"
        assert tombstone.json()["comment"]["author"] is None

    @pytest.mark.asyncio
    async def test_anonymous_comment(self, api_env):
        """Posting without a token creates an anonymous comment."""
        alice = await api_env.seed_user("alice")
        post_id = await create_post(api_env, alice)

        response = await api_env.client.post(
            "/comments", json={"post_id": post_id, "content": "Hi from nobody"}
        )

        assert response.status_code == 201
        assert response.json()["comment"]["author"] is None

    @pytest.mark.asyncio
    async def test_invalid_token_rejected_even_when_optional(self, api_env):
        """A token that is present must be valid."""
        alice = await api_env.seed_user("alice")
        post_id = await create_post(api_env, alice)

        response = await api_env.client.post(
            "/comments",
            json={"post_id": post_id, "content": "Hello"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == 401


class TestModerationApi:
    """Moderation endpoints."""

    @pytest.mark.asyncio
    async def test_member_cannot_moderate(self, api_env):
        alice = await api_env.seed_user("alice")
        post_id = await create_post(api_env, alice)
        created = await api_env.client.post(
            "/comments", json={"post_id": post_id, "content": "Pending"}
        )
        comment_id = created.json()["comment"]["id"]

        response = await api_env.client.post(
            f"/comments/{comment_id}/moderate",
            json={"action": "approve"},
            headers=await api_env.auth_headers(alice),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_second_moderation_conflicts_and_log_records_first(self, api_env):
        # Arrange
        alice = await api_env.seed_user("alice")
        mod = await api_env.seed_user("moderator", role=UserRole.MODERATOR)
        post_id = await create_post(api_env, alice)
        created = await api_env.client.post(
            "/comments", json={"post_id": post_id, "content": "Buy now!!!"}
        )
        comment_id = created.json()["comment"]["id"]
        headers = await api_env.auth_headers(mod)

        # Act
        first = await api_env.client.post(
            f"/comments/{comment_id}/moderate",
            json={"action": "mark_as_spam", "reason": "Advertising"},
            headers=headers,
        )
        second = await api_env.client.post(
            f"/comments/{comment_id}/moderate",
            json={"action": "approve"},
            headers=headers,
        )
        log = await api_env.client.get(
            f"/comments/{comment_id}/moderation-log", headers=headers
        )

        # Assert
        assert first.status_code == 200
        assert first.json()["comment"]["status"] == "spam"
        assert second.status_code == 409
        assert second.json()["error"]["code"] == 409
        entries = log.json()["entries"]
        assert len(entries) == 1
        assert entries[0]["action"] == "mark_as_spam"
        assert entries[0]["reason"] == "Advertising"

    @pytest.mark.asyncio
    async def test_unknown_action(self, api_env):
        mod = await api_env.seed_user("moderator", role=UserRole.MODERATOR)
        alice = await api_env.seed_user("alice")
        post_id = await create_post(api_env, alice)
        created = await api_env.client.post(
            "/comments", json={"post_id": post_id, "content": "Hello"}
        )
        comment_id = created.json()["comment"]["id"]

        response = await api_env.client.post(
            f"/comments/{comment_id}/moderate",
            json={"action": "delete"},
            headers=await api_env.auth_headers(mod),
        )

        assert response.status_code == 400


class TestListingApi:
    """Listing comments and replies."""

    @pytest.mark.asyncio
    async def test_list_with_pagination_and_filter(self, api_env):
        # Arrange
        alice = await api_env.seed_user("alice")
        mod = await api_env.seed_user("moderator", role=UserRole.MODERATOR)
        post_id = await create_post(api_env, alice)
        ids = []
        for i in range(3):
            response = await api_env.client.post(
                "/comments", json={"post_id": post_id, "content": f"comment {i}"}
            )
            ids.append(response.json()["comment"]["id"])
        await approve(api_env, mod, ids[0])

        # Act
        page = await api_env.client.get(
            f"/posts/{post_id}/comments", params={"page": 2, "per_page": 2}
        )
        approved = await api_env.client.get(
            f"/posts/{post_id}/comments", params={"status": "approved"}
        )
        beyond = await api_env.client.get(
            f"/posts/{post_id}/comments", params={"page": 5, "per_page": 2}
        )

        # Assert
        assert page.status_code == 200
        assert [c["id"] for c in page.json()["comments"]] == [ids[2]]
        assert page.json()["pagination"] == {
            "total": 3,
            "page": 2,
            "per_page": 2,
            "total_pages": 2,
        }
        assert [c["id"] for c in approved.json()["comments"]] == [ids[0]]
        assert beyond.json()["comments"] == []
        assert beyond.json()["pagination"]["total"] == 3

    @pytest.mark.asyncio
    async def test_invalid_page_size(self, api_env):
        alice = await api_env.seed_user("alice")
        post_id = await create_post(api_env, alice)

        response = await api_env.client.get(
            f"/posts/{post_id}/comments", params={"per_page": 500}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_comments_of_unknown_post(self, api_env):
        response = await api_env.client.get(
            "/posts/00000000-0000-0000-0000-000000000000/comments"
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == 404

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, api_env):
        response = await api_env.client.get("/comments/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == 400
