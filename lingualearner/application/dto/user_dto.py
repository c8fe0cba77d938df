from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, EmailStr, field_validator


class SocialLinks(BaseModel):
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class UserSummary(BaseModel):
    id: str
    email: str
    name: str


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    social_links: SocialLinks = SocialLinks()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserProfileUpdateRequest(BaseModel):
    """
    Partial profile update. Every field is optional; falsy values (missing,
    null or "") are treated as "not provided" and leave the field untouched.
    """
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    social_links: Optional[SocialLinks] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value


class ProfileResponse(BaseModel):
    user: UserResponse


class UserCheckResponse(BaseModel):
    message: str = "User is authenticated"
    user: UserResponse


class ProfileUpdateResponse(BaseModel):
    message: str = "Profile updated successfully"
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
