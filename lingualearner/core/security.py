# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import DecodeError, ExpiredSignatureError, InvalidTokenError

# Local application imports
from .config import get_settings
from ..domain.exceptions import TokenExpiredError, TokenInvalidError
from ..domain.models.user import PASSWORD_MAX_BYTES


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > PASSWORD_MAX_BYTES:
        # Never accepted at registration, so it cannot match
        return False
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_jwt_token(payload: Dict[str, Any], issued_at: Optional[int] = None) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub)
        issued_at: Unix timestamp to stamp as ``iat``; defaults to now

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    if issued_at is None:
        issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        TokenExpiredError: If the ``exp`` claim has elapsed
        TokenInvalidError: On signature mismatch, malformed input or missing claims
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat", "sub"]},
        )
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except (InvalidTokenError, DecodeError):
        raise TokenInvalidError()


def issue_access_token(user_id: str, issued_at: Optional[int] = None) -> str:
    """Sign a bearer token for ``user_id`` valid for the configured lifetime."""
    return create_jwt_token({"sub": str(user_id)}, issued_at=issued_at)


def verify_access_token(token: str) -> str:
    """
    Verify a bearer token and return the user id it was issued for.

    Raises:
        TokenExpiredError: If the token is past its expiry
        TokenInvalidError: For anything else that fails verification
    """
    if not token:
        raise TokenInvalidError()
    payload = decode_jwt_token(token)
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise TokenInvalidError()
    return user_id
