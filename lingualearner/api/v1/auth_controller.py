# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import (
    RegistrationResponse,
    TokenResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    container: BaseContainer = Depends(get_container),
) -> RegistrationResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        RegistrationResponse with created user information
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=TokenResponse)
async def login_user(
    request: UserLoginRequest,
    container: BaseContainer = Depends(get_container),
) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)
