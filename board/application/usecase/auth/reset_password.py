"""Reset password use case."""

import logfire
import pydantic
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import NotFoundError
from board.domain.service import UserService
from board.domain.value import DisplayName, Username


class ResetPasswordRequest(BaseModel):
    """Reset password request.

    The account is identified by its username together with its current
    display name.
    """

    username: str
    name: str
    new_password: str


class ResetPasswordResponse(BaseModel):
    """Reset password response."""

    user_id: str
    username: str


class ResetPasswordUseCase(BaseUseCase[ResetPasswordRequest, ResetPasswordResponse]):
    """Use case for setting a new password without logging in."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize reset password use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ResetPasswordRequest) -> ResetPasswordResponse:
        """Execute password reset.

        Raises:
            NotFoundError: If username and name don't match one account
        """
        try:
            username = Username(request.username)
            display_name = DisplayName(request.name)
        except pydantic.ValidationError:
            logfire.warn("Password reset failed: malformed account details")
            raise NotFoundError("User", request.username) from None

        user = await self.user_service.reset_password(
            username=username,
            display_name=display_name,
            new_password=request.new_password,
        )
        return ResetPasswordResponse(user_id=str(user.id), username=user.username.root)
