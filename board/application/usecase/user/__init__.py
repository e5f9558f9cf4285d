"""User use cases."""

from .get_my_profile import (
    GetMyProfileRequest,
    GetMyProfileResponse,
    GetMyProfileUseCase,
)
from .update_display_name import (
    UpdateDisplayNameRequest,
    UpdateDisplayNameResponse,
    UpdateDisplayNameUseCase,
)

__all__ = [
    "GetMyProfileRequest",
    "GetMyProfileResponse",
    "GetMyProfileUseCase",
    "UpdateDisplayNameRequest",
    "UpdateDisplayNameResponse",
    "UpdateDisplayNameUseCase",
]
