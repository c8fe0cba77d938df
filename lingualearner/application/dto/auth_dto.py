from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...domain.models.user import NAME_MAX_LENGTH, NAME_MIN_LENGTH, PASSWORD_MIN_LENGTH
from .user_dto import UserResponse, UserSummary


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=256)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class UserLoginRequest(BaseModel):
    """
    DTO for user login request.

    The email is deliberately not shape-validated: a malformed address is just
    an unknown one and must produce the same "Invalid credentials" response.
    """
    email: str = Field(max_length=320)
    password: str = Field(max_length=256)


class RegistrationResponse(BaseModel):
    """DTO for registration response"""
    success: bool = True
    message: str = "User registered successfully!"
    user: UserResponse


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    user: UserSummary
