"""
Task Tracker API - User Service

User resource operations on top of the shared mutation protocol.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from pymongo.errors import DuplicateKeyError

from tracker.auth.errors import AuthError
from tracker.auth.password import PasswordHasher
from tracker.mutation import MutationResult, ResourceMutator
from tracker.users.models import User
from tracker.users.repository import UserRepositoryInterface
from tracker.users.schemas import UserCreateRequest, UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


def user_to_response(user: User) -> UserResponse:
    """Public view of a user, without the password hash."""
    return UserResponse(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        created_on=user.created_on,
        version=user.version,
    )


class UserService:
    """Service layer for the user resource."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        hasher: PasswordHasher,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.repository = repository
        self.hasher = hasher
        self.mutator = ResourceMutator(repository, "User", clock=clock)

    async def create_user(self, request: UserCreateRequest) -> UserResponse | AuthError:
        if not request.username or not request.username.strip():
            logger.warning("Invalid user data provided.")
            return AuthError.INVALID_USERNAME

        user = User(
            id=request.id,
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            password_hash=self.hasher.hash(request.password),
        )
        try:
            created = await self.mutator.create(user)
        except DuplicateKeyError:
            logger.warning("User creation failed: Username '%s' already exists.", request.username)
            return AuthError.DUPLICATE_USERNAME
        return user_to_response(created)

    async def list_users(self) -> List[UserResponse]:
        users = await self.repository.list_all()
        logger.info("Retrieved %d users.", len(users))
        return [user_to_response(user) for user in users]

    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            logger.warning("User with ID %s not found.", user_id)
            return None
        return user_to_response(user)

    async def get_user_by_username(self, username: str) -> Optional[UserResponse]:
        user = await self.repository.get_by_username(username)
        if user is None:
            logger.warning("User with username %s not found.", username)
            return None
        return user_to_response(user)

    async def update_user(self, user_id: int, request: UserUpdateRequest) -> MutationResult | AuthError:
        """Replace a user in full. Raises ConcurrencyConflictError on a stale version."""
        # Cheap rejections first so a bad request never pays for a bcrypt hash
        if request.id != user_id:
            logger.warning("User ID mismatch: %s != %s.", user_id, request.id)
            return MutationResult.ID_MISMATCH
        if not request.username.strip():
            logger.warning("Update of user %s rejected: empty username.", user_id)
            return AuthError.INVALID_USERNAME

        user = User(
            id=request.id,
            username=request.username,
            first_name=request.first_name,
            last_name=request.last_name,
            created_on=request.created_on,
            password_hash=self.hasher.hash(request.password) if request.password else None,
        )
        try:
            return await self.mutator.update(user_id, user, expected_version=request.version)
        except DuplicateKeyError:
            logger.warning("Update of user %s rejected: Username '%s' already exists.", user_id, request.username)
            return AuthError.DUPLICATE_USERNAME

    async def delete_user(self, user_id: int) -> MutationResult:
        return await self.mutator.delete(user_id)
