"""Register use case."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import UserService
from board.domain.value import DisplayName, Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    password: str
    name: str  # Display name


class RegisterResponse(BaseModel):
    """Register response."""

    user_id: str
    username: str
    name: str
    created_at: datetime


class RegisterUseCase(BaseUseCase[RegisterRequest, RegisterResponse]):
    """Use case for creating an account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration.

        Args:
            request: Register request

        Returns:
            Created account details

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        user = await self.user_service.register(
            username=Username(request.username),
            password=request.password,
            display_name=DisplayName(request.name),
        )

        return RegisterResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name.root,
            created_at=user.created_at,
        )
