from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tracker.auth.password import PasswordHasher
from tracker.auth.service import AuthService
from tracker.auth.tokens import TokenIssuer
from tracker.config import settings
from tracker.users.dependencies import get_user_repository
from tracker.users.models import User
from tracker.users.repository import UserRepositoryInterface


# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


def get_auth_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(repository, hasher, token_issuer)


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    username = token_issuer.decode(credentials.credentials)
    if username is None:
        raise credentials_exception

    user = await auth_service.get_user_by_username(username)
    if user is None:
        raise credentials_exception

    return user


# Type alias for cleaner dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
