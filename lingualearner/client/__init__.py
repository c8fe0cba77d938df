"""Client-side session handling for the LinguaLearner API."""
from .api_client import ApiClientError, LinguaApiClient
from .session_store import AUTH_TOKEN_KEY, TokenStore

__all__ = [
    "ApiClientError",
    "AUTH_TOKEN_KEY",
    "LinguaApiClient",
    "TokenStore",
]
