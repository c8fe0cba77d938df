"""
Domain exception hierarchy for the LinguaLearner backend.

Use cases and repositories raise these; the API layer maps each family to an
HTTP status and a ``{"error": message}`` body (see ``main.py``).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DomainError(Exception):
    """Base exception for all domain errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation (400)
# -----------------------------------------------------------------------------


class ValidationError(DomainError):
    """Raised when input validation fails."""

    status_code = 400


class EmptyTextError(ValidationError):
    """Raised when a comment is submitted without text."""

    def __init__(self, message: str = "Comment text is required"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Authentication (401)
# -----------------------------------------------------------------------------


class AuthenticationError(DomainError):
    """Base for every failure that must surface as 401 Unauthenticated."""

    status_code = 401


class MissingCredentialsError(AuthenticationError):
    """Authorization header is absent or not a Bearer credential."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class TokenInvalidError(AuthenticationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Unknown email and wrong password both map here, with one message."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


# -----------------------------------------------------------------------------
# Authorization (403)
# -----------------------------------------------------------------------------


class ForbiddenError(DomainError):
    status_code = 403


# -----------------------------------------------------------------------------
# Lookup (404)
# -----------------------------------------------------------------------------


class NotFoundError(DomainError):
    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class PostNotFoundError(NotFoundError):
    def __init__(self, message: str = "Post not found"):
        super().__init__(message)


class CommentNotFoundError(NotFoundError):
    def __init__(self, message: str = "Comment not found"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Conflict (409)
# -----------------------------------------------------------------------------


class ConflictError(DomainError):
    status_code = 409


class UserAlreadyExistsError(ConflictError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class AlreadyLikedError(ConflictError):
    def __init__(self, message: str = "Already liked this post"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Store failures (500 / 503)
# -----------------------------------------------------------------------------


class StoreError(DomainError):
    """Unexpected failure reported by the document store."""

    status_code = 500


class StoreUnavailableError(StoreError):
    """The store did not answer within the configured timeout."""

    status_code = 503
