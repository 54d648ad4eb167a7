"""User and school account routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from quizcms.config import Settings
from quizcms.database import get_db
from quizcms.dependencies import get_cipher, get_settings
from quizcms.models.auth import (
    DeletedResponse,
    SchoolCreate,
    SchoolResponse,
    UserListResponse,
    UserResponse,
    UserStatusResponse,
)
from quizcms.models.db.user import User
from quizcms.services import auth_service
from quizcms.services.password_cipher import PasswordCipher
from quizcms.utils import clamp_page

router = APIRouter(prefix="/api/users", tags=["users"])
schools_router = APIRouter(prefix="/api/schools", tags=["schools"])


def user_to_response(user: User) -> UserResponse:
    """Convert User model to UserResponse."""
    return UserResponse(
        id=user.id,
        username=user.username,
        role=user.role,
        status=user.status,
        created_at=user.created_at,
    )


def _get_user_or_404(db: DbSession, user_id: int) -> User:
    user = auth_service.get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get("", response_model=UserListResponse)
def list_users(
    db: Annotated[DbSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
    role: str | None = None,
) -> UserListResponse:
    """List users, one page at a time."""
    page, page_size = clamp_page(
        page, page_size, settings.default_page_size, settings.max_page_size
    )
    users, total = auth_service.list_users(db, page, page_size, role)
    return UserListResponse(
        users=[user_to_response(u) for u in users],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.patch("/{user_id}/status", response_model=UserStatusResponse)
def toggle_status(
    user_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> UserStatusResponse:
    """Activate or deactivate a user."""
    user = auth_service.toggle_user_status(db, _get_user_or_404(db, user_id))
    return UserStatusResponse(
        **user_to_response(user).model_dump(),
        message=f"User status updated to {'active' if user.status else 'inactive'}",
    )


@router.delete("/{user_id}", response_model=DeletedResponse)
def delete_user(
    user_id: int,
    db: Annotated[DbSession, Depends(get_db)],
) -> DeletedResponse:
    """Delete user."""
    user = _get_user_or_404(db, user_id)
    auth_service.delete_user(db, user)
    return DeletedResponse(message="User deleted successfully", deleted_id=user_id)


@schools_router.post("", response_model=SchoolResponse, status_code=status.HTTP_201_CREATED)
def create_school(
    data: SchoolCreate,
    db: Annotated[DbSession, Depends(get_db)],
    cipher: Annotated[PasswordCipher, Depends(get_cipher)],
) -> SchoolResponse:
    """Create a school account."""
    if auth_service.get_user_by_username(db, data.username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )
    try:
        school = auth_service.create_school(db, cipher, data.username, data.password)
    except auth_service.DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken") from e
    return SchoolResponse(
        **user_to_response(school).model_dump(),
        password=data.password,
    )


@schools_router.get("", response_model=list[SchoolResponse])
def list_schools(
    db: Annotated[DbSession, Depends(get_db)],
    cipher: Annotated[PasswordCipher, Depends(get_cipher)],
) -> list[SchoolResponse]:
    """List school accounts with their readable passwords."""
    return [
        SchoolResponse(
            **user_to_response(school).model_dump(),
            password=auth_service.school_password(cipher, school),
        )
        for school in auth_service.list_schools(db)
    ]
