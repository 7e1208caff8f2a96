import logging
from datetime import datetime
from typing import Callable, Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from tracker.auth.errors import AuthError
from tracker.auth.password import PasswordHasher
from tracker.auth.schemas import LoginRequest, RegisterRequest
from tracker.auth.tokens import TokenIssuer
from tracker.mutation import ResourceMutator
from tracker.users.models import User
from tracker.users.repository import UserRepositoryInterface

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login workflows.

    Business-rule failures come back as ``AuthError`` values rather than
    exceptions; callers match on the result.
    """

    def __init__(
        self,
        repository: UserRepositoryInterface,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.repository = repository
        self.hasher = hasher
        self.token_issuer = token_issuer
        self.mutator = ResourceMutator(repository, "User", clock=clock)

    async def register(self, request: RegisterRequest) -> User | AuthError:
        """Register a new user. The returned user still carries its hash."""
        username = request.username
        logger.info("Register called for username: %s", username)

        if not username or not username.strip():
            logger.warning("Registration failed: empty username.")
            return AuthError.INVALID_USERNAME

        try:
            if await self.repository.exists_by_username(username):
                logger.warning("Registration failed: Username '%s' already exists.", username)
                return AuthError.DUPLICATE_USERNAME

            user = User(
                id=None,
                username=username,
                first_name=request.first_name,
                last_name=request.last_name,
                password_hash=self.hasher.hash(request.password),
            )
            created = await self.mutator.create(user)
        except DuplicateKeyError:
            # Lost the race against a concurrent registration of the same name
            logger.warning("Registration failed: Username '%s' already exists (unique index).", username)
            return AuthError.DUPLICATE_USERNAME
        except PyMongoError:
            logger.exception("Error occurred during user registration for username: %s.", username)
            return AuthError.PERSISTENCE_FAILURE

        logger.info("User '%s' registered successfully with ID %s.", username, created.id)
        return created

    async def login(self, request: LoginRequest) -> str | AuthError:
        """Verify credentials and issue a bearer token."""
        username = request.username
        logger.info("Login called for username: %s", username)

        try:
            user = await self.repository.get_by_username(username)
        except PyMongoError:
            logger.exception("Error occurred during login for username: %s.", username)
            return AuthError.PERSISTENCE_FAILURE

        if user is None or not self.hasher.verify(request.password, user.password_hash):
            logger.warning("Login failed: Invalid credentials for username: %s.", username)
            return AuthError.INVALID_CREDENTIALS

        token = self.token_issuer.issue(user.username)
        logger.info("Login successful for username: %s.", username)
        return token

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self.repository.get_by_username(username)
