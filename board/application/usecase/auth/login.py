"""Login use case."""

import logfire
import pydantic
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import InvalidCredentialsError
from board.domain.service import JWTService, UserService
from board.domain.value import Username


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: str
    name: str


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for username/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify credentials via user service
        2. Issue a session token for the user

        Args:
            request: Login request with credentials

        Returns:
            Login response with session token and user info

        Raises:
            InvalidCredentialsError: If the username or password is wrong
        """
        try:
            username = Username(request.username)
        except pydantic.ValidationError:
            # No account can carry a malformed username
            logfire.warn("Login failed: malformed username")
            raise InvalidCredentialsError() from None

        user = await self.user_service.login(username, request.password)

        token = self.jwt_service.create_token(
            user_id=str(user.id),
            username=user.username.root,
        )
        logfire.info("Session issued", user_id=str(user.id))

        return LoginResponse(
            token=token,
            user_id=str(user.id),
            username=user.username.root,
            name=user.name.root,
        )
