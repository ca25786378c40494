"""Unit tests for AuthenticationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.error import AuthenticationError
from blog.domain.service import AuthenticationService, JWTService
from blog.domain.value import UserId
from blog.util.jwt import create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _bearer(unit_env, user_id: UserId) -> dict[str, str]:
    jwt_service = await unit_env.get(JWTService)
    token = jwt_service.create_token(user_id, "carol@example.com")
    return {"Authorization": f"Bearer {token}"}


class TestResolveRequired:
    """Tests for resolve_required."""

    @pytest.mark.asyncio
    async def test_valid_bearer_token(self, unit_env):
        """A valid token should resolve to the identity it was issued for."""
        # Arrange
        service = await unit_env.get(AuthenticationService)
        user_id = UserId(uuid4())
        headers = await _bearer(unit_env, user_id)

        # Act
        identity = service.resolve_required(headers)

        # Assert
        assert identity.id == user_id
        assert identity.email == "carol@example.com"

    @pytest.mark.asyncio
    async def test_lowercase_header_and_scheme(self, unit_env):
        """Header name and scheme are case-insensitive."""
        # Arrange
        service = await unit_env.get(AuthenticationService)
        user_id = UserId(uuid4())
        token = (await _bearer(unit_env, user_id))["Authorization"].split(" ", 1)[1]

        # Act
        identity = service.resolve_required({"authorization": f"bearer {token}"})

        # Assert
        assert identity.id == user_id

    @pytest.mark.asyncio
    async def test_missing_header(self, unit_env):
        """No credential means unauthorized."""
        service = await unit_env.get(AuthenticationService)

        with pytest.raises(AuthenticationError):
            service.resolve_required({})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        ["Basic dXNlcjpwYXNz", "Bearer", "Bearer   ", "Token abc"],
    )
    async def test_malformed_header(self, unit_env, header):
        """Non-bearer schemes and empty tokens are rejected."""
        service = await unit_env.get(AuthenticationService)

        with pytest.raises(AuthenticationError):
            service.resolve_required({"Authorization": header})

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        """Expired tokens are unauthorized with a specific message."""
        # Arrange
        service = await unit_env.get(AuthenticationService)
        token = create_token(
            uuid4(),
            "carol@example.com",
            "test-signing-secret-with-at-least-32-bytes",
            timedelta(seconds=-10),
        )

        # Act & Assert
        with pytest.raises(AuthenticationError, match="expired"):
            service.resolve_required({"Authorization": f"Bearer {token}"})

    @pytest.mark.asyncio
    async def test_wrong_secret(self, unit_env):
        """Tokens signed elsewhere are unauthorized."""
        # Arrange
        service = await unit_env.get(AuthenticationService)
        token = create_token(
            uuid4(),
            "carol@example.com",
            "some-other-secret-0123456789-abcdef",
            timedelta(hours=1),
        )

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Invalid token"):
            service.resolve_required({"Authorization": f"Bearer {token}"})


class TestResolveOptional:
    """Tests for resolve_optional."""

    @pytest.mark.asyncio
    async def test_no_header_is_anonymous(self, unit_env):
        """Without a header the caller is anonymous."""
        service = await unit_env.get(AuthenticationService)

        assert service.resolve_optional({}) is None

    @pytest.mark.asyncio
    async def test_invalid_header_still_rejected(self, unit_env):
        """A present but invalid credential is not silently ignored."""
        service = await unit_env.get(AuthenticationService)

        with pytest.raises(AuthenticationError):
            service.resolve_optional({"Authorization": "Bearer not-a-token"})

    @pytest.mark.asyncio
    async def test_valid_header(self, unit_env):
        """A valid credential resolves to an identity."""
        # Arrange
        service = await unit_env.get(AuthenticationService)
        user_id = UserId(uuid4())
        headers = await _bearer(unit_env, user_id)

        # Act
        identity = service.resolve_optional(headers)

        # Assert
        assert identity is not None
        assert identity.id == user_id
