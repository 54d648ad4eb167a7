"""Pydantic models for accounts and login."""
from datetime import datetime

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)
    role: str = Field("user", min_length=1, max_length=20)
    status: bool = True

    class Config:
        str_strip_whitespace = True


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User response (public info)."""

    id: int
    username: str
    role: str
    status: bool
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class LoginResponse(UserResponse):
    """Successful login: the user record, no token."""

    message: str


class UserStatusResponse(UserResponse):
    """User after a status toggle."""

    message: str


class UserListResponse(BaseModel):
    """Paginated user listing."""

    users: list[UserResponse]
    total: int
    page: int
    page_size: int = Field(..., alias="pageSize")

    class Config:
        populate_by_name = True


class SchoolCreate(BaseModel):
    """School account creation request."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)

    class Config:
        str_strip_whitespace = True


class SchoolResponse(UserResponse):
    """School account with its readable password."""

    password: str | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class DeletedResponse(BaseModel):
    """Deletion acknowledgement."""

    message: str
    deleted_id: int = Field(..., alias="deletedId")

    class Config:
        populate_by_name = True
