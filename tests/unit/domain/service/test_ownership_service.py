"""Unit tests for OwnershipGuard."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError
from blog.domain.service import OwnershipGuard
from blog.domain.value import Identity, UserId


def _identity() -> Identity:
    return Identity(id=UserId(uuid4()), email="dave@example.com")


class TestAuthorizeMutation:
    """Tests for authorize_mutation."""

    def test_owner_passes(self):
        """The owner may mutate their own resource."""
        guard = OwnershipGuard()
        identity = _identity()

        guard.authorize_mutation(identity, identity.id)

    def test_other_user_forbidden(self):
        """Anyone else is forbidden."""
        guard = OwnershipGuard()

        with pytest.raises(NotAuthorizedError):
            guard.authorize_mutation(_identity(), UserId(uuid4()), "post", uuid4())

    def test_anonymous_caller_forbidden(self):
        """No identity never owns anything."""
        guard = OwnershipGuard()

        with pytest.raises(NotAuthorizedError):
            guard.authorize_mutation(None, UserId(uuid4()))

    def test_unowned_resource_forbidden(self):
        """Anonymous comments have no owner, so nobody passes the guard."""
        guard = OwnershipGuard()

        with pytest.raises(NotAuthorizedError):
            guard.authorize_mutation(_identity(), None, "comment")

    def test_anonymous_caller_on_unowned_resource_forbidden(self):
        """None is not equal to None for ownership purposes."""
        guard = OwnershipGuard()

        assert guard.is_owner(None, None) is False
        with pytest.raises(NotAuthorizedError):
            guard.authorize_mutation(None, None)
