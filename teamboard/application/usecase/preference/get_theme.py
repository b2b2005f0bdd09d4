"""Get theme use case."""

from pydantic import BaseModel

from teamboard.application.usecase.base import BaseUseCase
from teamboard.domain.service import PreferenceService


class GetThemeRequest(BaseModel):
    """Get theme request."""

    owner_id: str
    system_prefers_dark: bool = False


class ThemeResponse(BaseModel):
    """Theme preference response."""

    dark_mode: bool


class GetThemeUseCase(BaseUseCase):
    """Use case for reading the dashboard theme."""

    def __init__(self, preference_service: PreferenceService) -> None:
        self.preference_service = preference_service

    async def execute(self, request: GetThemeRequest) -> ThemeResponse:
        theme = await self.preference_service.get_theme(
            request.owner_id, system_prefers_dark=request.system_prefers_dark
        )
        return ThemeResponse(dark_mode=theme.dark_mode)
