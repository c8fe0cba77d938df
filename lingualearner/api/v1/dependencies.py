# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.base_container import BaseContainer
from ...domain.exceptions import AuthenticationError, MissingCredentialsError
from ...domain.models.user import User

logger = logging.getLogger(__name__)

# auto_error=False so a missing header and a non-Bearer header can be told apart
security_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container built by the app lifespan

    Tests replace it through ``app.dependency_overrides``.
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Dependency container is not initialized")
    return container


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    container: BaseContainer = Depends(get_container),
) -> User:
    """
    FastAPI dependency guarding protected routes

    Args:
        request: Incoming request; the resolved user is stored on ``request.state.user``
        credentials: HTTP Bearer token credentials, None when absent or not Bearer
        container: DI container

    Returns:
        The authenticated User

    Raises:
        MissingCredentialsError: Header absent or malformed (401)
        TokenExpiredError / TokenInvalidError: Token rejected (401)
        UserNotFoundError: Token outlived the account (404)
    """
    if credentials is None or not credentials.credentials:
        if request.headers.get("Authorization"):
            raise MissingCredentialsError("Invalid token format (missing Bearer)")
        raise MissingCredentialsError()

    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    try:
        user = await get_current_user_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        logger.debug(f"Rejected bearer token on {request.url.path}: {exception.message}")
        raise

    request.state.user = user
    return user
