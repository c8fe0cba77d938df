import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from ..exceptions import ValidationError

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
# bcrypt only reads the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72

_URL_PATTERN = re.compile(r"^https?://.+")


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return (email or "").strip().lower()


def is_http_url(value: str) -> bool:
    return bool(_URL_PATTERN.match(value))


def validate_password(password: str) -> None:
    """
    Check a plaintext password before it is hashed

    Raises:
        ValidationError: If it is shorter than 6 characters or longer than 72 bytes
    """
    if len(password or "") < PASSWORD_MIN_LENGTH:
        raise ValidationError("Password must be at least 6 characters long")
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError("Password cannot exceed 72 bytes")


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    ``hashed_password`` must already be a bcrypt hash; a plaintext password is
    rejected so it can never reach the store.
    """
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    social_links: Dict[str, str] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        self.name = (self.name or "").strip()
        self.email = normalize_email(self.email)
        if len(self.name) < NAME_MIN_LENGTH:
            raise ValidationError("Name must be at least 2 characters")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError("Name cannot exceed 50 characters")
        if not self.email or "@" not in self.email:
            raise ValidationError("Invalid email format")
        if not self.hashed_password or not self.hashed_password.startswith("$2"):
            raise ValidationError("Password hash is required")
        if self.bio is not None:
            self.bio = self.bio.strip()
        if self.profile_picture and not is_http_url(self.profile_picture):
            raise ValidationError("Profile picture must be a valid URL")
