"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel, Field

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
    ResetPasswordRequest,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from board.config import Settings
from board.domain.error import NotFoundError
from board.interface.api.session import clear_session_cookie, set_session_cookie
from board.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SignupAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=6, max_length=50)
    password_confirm: str
    name: str = Field(min_length=1, max_length=20)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginAPIResponse(BaseModel):
    """Login response; the token itself travels in the cookie."""

    user_id: str
    username: str
    name: str


class PasswordResetAPIRequest(BaseModel):
    """API request for resetting a password."""

    username: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=20)
    new_password: str = Field(min_length=6, max_length=50)
    new_password_confirm: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _check_confirmation(password: str, confirmation: str) -> None:
    if password != confirmation:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match",
        )


@router.post(
    "/signup", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Raises:
        HTTPException: 400 if the passwords differ, 409 if the username is taken
    """
    _check_confirmation(request.password, request.password_confirm)

    result = await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            password=request.password,
            name=request.name,
        )
    )
    logger.info(f"User signed up: {result.username}")
    return result


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with username and password and set the session cookie.

    Raises:
        HTTPException: 401 for an unknown username or a wrong password
    """
    result = await login_use_case.execute(
        LoginRequest(username=request.username, password=request.password)
    )

    set_session_cookie(response, result.token, settings)
    logger.info(f"Login successful for user: {result.username}")

    return LoginAPIResponse(
        user_id=result.user_id, username=result.username, name=result.name
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_session_cookie(response)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except (JWTError, NotFoundError):
        # Invalid/expired token or deleted user - return unauthenticated
        return AuthStatusResponse(authenticated=False)


@router.post("/password-reset", response_model=ResetPasswordResponse)
async def reset_password(
    request: PasswordResetAPIRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> ResetPasswordResponse:
    """Set a new password for the account matching username and name.

    Raises:
        HTTPException: 400 if the passwords differ, 404 if no account matches
    """
    _check_confirmation(request.new_password, request.new_password_confirm)

    return await reset_password_use_case.execute(
        ResetPasswordRequest(
            username=request.username,
            name=request.name,
            new_password=request.new_password,
        )
    )
