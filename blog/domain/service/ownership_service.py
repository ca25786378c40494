"""Ownership guard.

A single check shared by every mutation of an owned resource: posts,
profiles and comments.
"""

from uuid import UUID

import logfire

from blog.domain.error import NotAuthorizedError
from blog.domain.value import Identity

from .base import Service


class OwnershipGuard(Service):
    """Permit a mutation only when the actor owns the resource."""

    def is_owner(self, identity: Identity | None, resource_owner_id: UUID | None) -> bool:
        """Check whether an identity owns a resource.

        Anonymous actors own nothing, and resources without an owner
        (anonymous comments) are owned by nobody.

        Args:
            identity: Authenticated identity, or None
            resource_owner_id: Owner of the resource, or None

        Returns:
            True if the identity owns the resource
        """
        if identity is None or resource_owner_id is None:
            return False
        return identity.id == resource_owner_id

    def authorize_mutation(
        self,
        identity: Identity | None,
        resource_owner_id: UUID | None,
        resource: str = "resource",
        resource_id: UUID | str | None = None,
    ) -> None:
        """Require that an identity owns a resource before mutating it.

        Args:
            identity: Authenticated identity, or None
            resource_owner_id: Owner of the resource, or None
            resource: Resource kind, for the error message
            resource_id: Resource ID, for the error message

        Raises:
            NotAuthorizedError: If the identity does not own the resource
        """
        if self.is_owner(identity, resource_owner_id):
            return

        user_id = str(identity.id) if identity else None
        logfire.warn(
            "Mutation denied by ownership guard",
            resource=resource,
            resource_id=str(resource_id) if resource_id else None,
            user_id=user_id,
        )
        raise NotAuthorizedError(resource, str(resource_id or ""), user_id)
