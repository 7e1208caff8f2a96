"""
Task Tracker API - User Router

CRUD endpoints for the user resource.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from tracker.auth.dependencies import get_password_hasher
from tracker.auth.errors import AuthError
from tracker.auth.password import PasswordHasher
from tracker.auth.schemas import MessageResponse
from tracker.mutation import MutationResult
from tracker.users.dependencies import get_user_repository
from tracker.users.repository import UserRepositoryInterface
from tracker.users.schemas import UserCreateRequest, UserResponse, UserUpdateRequest
from tracker.users.service import UserService


router = APIRouter(prefix="/user", tags=["Users"])


def get_user_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """Dependency to get user service instance."""
    return UserService(repository, hasher)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    request: Request,
    response: Response,
    service: Annotated[UserService, Depends(get_user_service)],
    user: Annotated[Optional[UserCreateRequest], Body()] = None,
) -> UserResponse:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User data is invalid.",
        )

    result = await service.create_user(user)
    if result is AuthError.INVALID_USERNAME:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User data is invalid.",
        )
    if isinstance(result, AuthError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.message,
        )

    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=result.id))
    return result


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List all users",
)
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> List[UserResponse]:
    return await service.list_users()


@router.get(
    "/username/{username}",
    response_model=UserResponse,
    responses={404: {"model": MessageResponse}},
    summary="Get a user by username",
)
async def get_user_by_username(
    username: str,
    service: Annotated[UserService, Depends(get_user_service)],
):
    user = await service.get_user_by_username(username)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"User with username '{username}' not found."},
        )
    return user


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
async def get_user_by_id(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    user = await service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Replace a user",
)
async def update_user(
    user_id: int,
    user: UserUpdateRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    """
    Replace a user by ID. The body ID must match the URL ID.

    Omitting ``password`` keeps the current one.
    """
    result = await service.update_user(user_id, user)
    if result is MutationResult.ID_MISMATCH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User ID mismatch.",
        )
    if result is MutationResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    if isinstance(result, AuthError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.message,
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    result = await service.delete_user(user_id)
    if result is MutationResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
