"""
FastAPI router for the accounts bounded context.

All routes delegate to the user service. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from app.application.accounts.dtos import (
    UpdateEmailCommand,
    UpdatePasswordCommand,
    UpdateUserCommand,
)
from app.application.accounts.user_service import UserService
from app.domain.accounts.entities import User
from app.interfaces.accounts.dependencies import get_user_service
from app.interfaces.accounts.schemas import (
    CreateUserRequest,
    ErrorResponse,
    UpdateEmailRequest,
    UpdatePasswordRequest,
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_BAD_REQUEST = {400: {"model": ErrorResponse}}
_CONFLICT = {409: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT},
    summary="Create a user",
    description="Validate, hash the password and persist a new user.",
)
def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user account."""
    user = service.create(
        User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
        )
    )
    return UserResponse.from_entity(user)


@router.get(
    "/by-email/{email}",
    response_model=UserResponse,
    responses=_NOT_FOUND,
    summary="Find a user by email",
)
def get_user_by_email(
    email: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user holding an email address."""
    return UserResponse.from_entity(service.get_by_email(email))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=_NOT_FOUND,
    summary="Get a user",
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return a user by id."""
    return UserResponse.from_entity(service.get_by_id(user_id))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses=_NOT_FOUND,
    summary="Update a user's names",
    description="Apply the non-empty first and last names from the body.",
)
def update_user(
    user_id: str,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Change a user's first and/or last name."""
    command = UpdateUserCommand(
        first_name=request.first_name,
        last_name=request.last_name,
    )
    return UserResponse.from_entity(service.update(user_id, command))


@router.put(
    "/{user_id}/password",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Replace a user's password",
)
def update_password(
    user_id: str,
    request: UpdatePasswordRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Replace a user's password."""
    service.update_password(user_id, UpdatePasswordCommand(password=request.password))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{user_id}/email",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
    summary="Change a user's email",
)
def update_email(
    user_id: str,
    request: UpdateEmailRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Move a user to a new email address."""
    user = service.update_email(user_id, UpdateEmailCommand(email=request.email))
    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Delete a user",
)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Permanently remove a user."""
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
