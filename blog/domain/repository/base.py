"""Generic resource repository interfaces.

Every owned resource (users, posts, comments) shares the same storage
capabilities. They are declared once here and specialised per entity
instead of being redeclared for each resource type.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, Optional, TypeVar

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT")


class ResourceRepository(ABC, Generic[EntityT, IdT]):
    """Repository for a single entity type keyed by id."""

    @abstractmethod
    async def find_by_id(self, entity_id: IdT) -> Optional[EntityT]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """Save an entity (create or update).

        Args:
            entity: The entity to save

        Returns:
            The saved entity
        """
        pass


class SoftDeletableRepository(ResourceRepository[EntityT, IdT]):
    """Repository for entities that are tombstoned instead of removed."""

    @abstractmethod
    async def soft_delete(
        self, entity_id: IdT, deleted_at: datetime
    ) -> Optional[EntityT]:
        """Mark an entity as deleted without removing it.

        Args:
            entity_id: The entity ID
            deleted_at: Deletion timestamp

        Returns:
            The updated entity, or None if it does not exist or was already
            deleted
        """
        pass
