"""Registration and login routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session as DbSession

from quizcms.database import get_db
from quizcms.models.auth import LoginResponse, UserLogin, UserRegister, UserResponse
from quizcms.routes.users import user_to_response
from quizcms.services.auth_service import (
    DuplicateUsernameError,
    authenticate,
    create_user,
    get_user_by_username,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: UserRegister,
    db: Annotated[DbSession, Depends(get_db)],
) -> UserResponse:
    """Register a new user."""
    if get_user_by_username(db, data.username):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )

    try:
        user = create_user(db, data.username, data.password, role=data.role, status=data.status)
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken") from e
    return user_to_response(user)


@router.post("/login", response_model=LoginResponse)
def login(
    data: UserLogin,
    db: Annotated[DbSession, Depends(get_db)],
) -> LoginResponse:
    """Check credentials and return the user record."""
    user = authenticate(db, data.username, data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    return LoginResponse(
        **user_to_response(user).model_dump(),
        message="Login successful",
    )
