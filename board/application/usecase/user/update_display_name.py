"""Update display name use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import UserService
from board.domain.value import DisplayName, UserId


class UpdateDisplayNameRequest(BaseModel):
    """Update display name request."""

    user_id: str  # Authenticated user ID
    name: str


class UpdateDisplayNameResponse(BaseModel):
    """Update display name response."""

    user_id: str
    username: str
    name: str
    updated_at: datetime


class UpdateDisplayNameUseCase(
    BaseUseCase[UpdateDisplayNameRequest, UpdateDisplayNameResponse]
):
    """Use case for renaming the signed-in user.

    Existing posts and comments keep the author string they were written
    with.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update display name use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateDisplayNameRequest
    ) -> UpdateDisplayNameResponse:
        """Execute the rename.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.update_display_name(
            UserId(UUID(request.user_id)), DisplayName(request.name)
        )
        return UpdateDisplayNameResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name.root,
            updated_at=user.updated_at,
        )
