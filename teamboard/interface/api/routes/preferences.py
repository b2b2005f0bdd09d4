"""Preference routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel

from teamboard.application.usecase.preference import (
    GetThemeRequest,
    GetThemeUseCase,
    ThemeResponse,
    UpdateThemeRequest,
    UpdateThemeUseCase,
)

router = APIRouter(prefix="/preferences", tags=["preferences"], route_class=DishkaRoute)


class ThemeBody(BaseModel):
    """Theme update body."""

    dark_mode: bool


def _require_owner(x_voter_id: str | None) -> str:
    if not x_voter_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Voter identity required for preferences",
        )
    return x_voter_id


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(
    get_theme_use_case: FromDishka[GetThemeUseCase],
    prefers_dark: bool = False,
    x_voter_id: str | None = Header(default=None, max_length=255),
) -> ThemeResponse:
    """Read the stored theme, falling back to the client's system preference."""
    return await get_theme_use_case.execute(
        GetThemeRequest(
            owner_id=_require_owner(x_voter_id), system_prefers_dark=prefers_dark
        )
    )


@router.put("/theme", response_model=ThemeResponse)
async def update_theme(
    body: ThemeBody,
    update_theme_use_case: FromDishka[UpdateThemeUseCase],
    x_voter_id: str | None = Header(default=None, max_length=255),
) -> ThemeResponse:
    """Store the theme preference."""
    return await update_theme_use_case.execute(
        UpdateThemeRequest(owner_id=_require_owner(x_voter_id), dark_mode=body.dark_mode)
    )
