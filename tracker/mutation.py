"""
Task Tracker API - Resource Mutation Protocol

Create/update/delete with optimistic concurrency, shared by the task and
user resources.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from tracker.repository import MutableRepositoryInterface

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MutationResult(str, Enum):
    """Outcome of an update or delete."""
    UPDATED = "updated"
    DELETED = "deleted"
    ID_MISMATCH = "id_mismatch"
    NOT_FOUND = "not_found"


class ConcurrencyConflictError(Exception):
    """A record was modified concurrently and cannot be replaced safely."""

    def __init__(self, resource: str, resource_id: int, expected_version: Optional[int] = None):
        self.resource = resource
        self.resource_id = resource_id
        self.expected_version = expected_version
        super().__init__(
            f"Concurrent modification of {resource} {resource_id} "
            f"(expected version {expected_version})"
        )


class ResourceMutator(Generic[T]):
    """Applies the create/update/delete protocol to one resource store."""

    def __init__(
        self,
        repository: MutableRepositoryInterface[T],
        resource_name: str,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.repository = repository
        self.resource_name = resource_name
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def create(self, resource: T) -> T:
        """Insert ``resource`` with a server timestamp and a store-assigned id."""
        resource.id = None
        resource.mark_created(self._clock())
        created = await self.repository.create(resource)
        logger.info("%s with ID %s created successfully.", self.resource_name, created.id)
        return created

    async def update(
        self,
        resource_id: int,
        resource: T,
        expected_version: Optional[int] = None,
    ) -> MutationResult:
        """
        Replace the stored record with ``resource``.

        Raises ConcurrencyConflictError when the record still exists but the
        replace did not apply; the caller must resubmit with fresh data.
        """
        if resource.id != resource_id:
            logger.warning(
                "%s ID mismatch. URL ID: %s, body ID: %s.",
                self.resource_name, resource_id, resource.id,
            )
            return MutationResult.ID_MISMATCH

        if await self.repository.replace(resource, expected_version):
            logger.info("%s with ID %s updated successfully.", self.resource_name, resource_id)
            return MutationResult.UPDATED

        if not await self.repository.exists(resource_id):
            logger.warning("%s with ID %s does not exist during update.", self.resource_name, resource_id)
            return MutationResult.NOT_FOUND

        logger.error(
            "Concurrency conflict while updating %s with ID %s (expected version %s).",
            self.resource_name, resource_id, expected_version,
        )
        raise ConcurrencyConflictError(self.resource_name, resource_id, expected_version)

    async def delete(self, resource_id: int) -> MutationResult:
        existing = await self.repository.get_by_id(resource_id)
        if existing is None:
            logger.warning("Attempted to delete non-existent %s with ID %s.", self.resource_name, resource_id)
            return MutationResult.NOT_FOUND

        # Removed by someone else between the lookup and the delete
        if not await self.repository.delete(resource_id):
            logger.warning("%s with ID %s vanished before delete.", self.resource_name, resource_id)
            return MutationResult.NOT_FOUND

        logger.info("%s with ID %s deleted successfully.", self.resource_name, resource_id)
        return MutationResult.DELETED
