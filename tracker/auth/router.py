"""
Task Tracker API - Authentication Router

Endpoints for user registration, login, and current user info.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from tracker.auth.dependencies import CurrentUser, get_auth_service
from tracker.auth.errors import AuthError
from tracker.auth.schemas import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from tracker.auth.service import AuthService
from tracker.users.schemas import UserResponse
from tracker.users.service import user_to_response


router = APIRouter(prefix="/auth", tags=["Authentication"])


def _error_response(error: AuthError, status_code: int) -> JSONResponse:
    if error is AuthError.PERSISTENCE_FAILURE:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content={"message": error.message})


@router.post(
    "/register",
    response_model=UserResponse,
    responses={400: {"model": MessageResponse}},
    summary="Register a new user",
)
async def register(
    request: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Register a new user.

    The response never includes the password hash.
    """
    result = await auth_service.register(request)
    if isinstance(result, AuthError):
        return _error_response(result, status.HTTP_400_BAD_REQUEST)
    return user_to_response(result)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": MessageResponse}},
    summary="Login and get access token",
)
async def login(
    request: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Authenticate user and return a JWT access token.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    result = await auth_service.login(request)
    if isinstance(result, AuthError):
        return _error_response(result, status.HTTP_401_UNAUTHORIZED)
    return TokenResponse(token=result)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user info",
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    """
    Get the current authenticated user's public information.

    Requires a valid JWT token in the Authorization header.
    """
    return user_to_response(current_user)
