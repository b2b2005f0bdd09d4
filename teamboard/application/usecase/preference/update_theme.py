"""Update theme use case."""

from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.application.usecase.preference.get_theme import ThemeResponse
from teamboard.domain.service import PreferenceService


class UpdateThemeRequest(BaseModel):
    """Update theme request."""

    owner_id: str
    dark_mode: bool


class UpdateThemeUseCase(BaseUseCase):
    """Use case for switching between light and dark themes."""

    def __init__(self, preference_service: PreferenceService) -> None:
        self.preference_service = preference_service

    async def execute(self, request: UpdateThemeRequest) -> ThemeResponse:
        theme = await self.preference_service.set_theme(
            request.owner_id, request.dark_mode
        )
        return ThemeResponse(dark_mode=theme.dark_mode)
