from abc import abstractmethod
from typing import Optional

from pymongo.errors import DuplicateKeyError

from tracker.repository import InMemoryRepository, MongoRepository, MutableRepositoryInterface
from tracker.users.models import User


class UserRepositoryInterface(MutableRepositoryInterface[User]):
    """Abstract interface for the credential store.

    Usernames are unique and compared case-sensitively. Implementations raise
    ``pymongo.errors.DuplicateKeyError`` when a write would break uniqueness.
    """

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if username exists."""
        pass


class MongoUserRepository(MongoRepository[User], UserRepositoryInterface):
    """MongoDB implementation of the user repository."""

    COLLECTION_NAME = "users"
    model = User

    async def get_by_username(self, username: str) -> Optional[User]:
        doc = await self.collection.find_one({"username": username})
        if doc is None:
            return None
        return User.from_dict(doc)

    async def exists_by_username(self, username: str) -> bool:
        return await self.collection.count_documents({"username": username}, limit=1) > 0


class InMemoryUserRepository(InMemoryRepository[User], UserRepositoryInterface):
    """In-memory user repository for testing, with a unique username index."""

    model = User

    def _check_unique(self, doc: dict) -> None:
        for other in self._docs.values():
            if other["_id"] != doc["_id"] and other["username"] == doc["username"]:
                raise DuplicateKeyError(
                    f"E11000 duplicate key error collection: users index: username_1 "
                    f"dup key: {{ username: \"{doc['username']}\" }}",
                    11000,
                )

    async def get_by_username(self, username: str) -> Optional[User]:
        matches = self._find(lambda doc: doc["username"] == username)
        return matches[0] if matches else None

    async def exists_by_username(self, username: str) -> bool:
        return any(doc["username"] == username for doc in self._docs.values())
