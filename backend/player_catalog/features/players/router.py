"""Player API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
import structlog

from player_catalog.core import get_global_settings
from player_catalog.core.enums import PlayerOrder, Profession, Race
from player_catalog.core.rate_limiter import limiter, list_rate_limit
from .dependencies import PlayerServiceDep
from .filters import build_player_filter
from .schemas import (
    PageRequest,
    PlayerCreate,
    PlayerFilterParams,
    PlayerListResponse,
    PlayerResponse,
    PlayerUpdate,
)
from .transformers import player_orm_to_response, player_page_to_response

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/players", tags=["players"])


def get_filter_params(
    name: Optional[str] = Query(None, description="Substring of the name"),
    title: Optional[str] = Query(None, description="Substring of the title"),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None, description="Born at or after, epoch ms"),
    before: Optional[int] = Query(None, description="Born at or before, epoch ms"),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilterParams:
    """Collect the optional filter query parameters."""
    return PlayerFilterParams(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


def get_page_request(
    order: PlayerOrder = Query(PlayerOrder.ID, description="Sort key"),
    page_number: int = Query(0, ge=0, alias="pageNumber"),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
) -> PageRequest:
    """Collect pagination query parameters, defaulting the size from settings."""
    if page_size is None:
        page_size = get_global_settings().default_page_size
    return PageRequest(page_number=page_number, page_size=page_size, order=order)


FilterParamsDep = Annotated[PlayerFilterParams, Depends(get_filter_params)]
PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]


@router.get("", response_model=list[PlayerResponse])
@limiter.limit(list_rate_limit)
async def list_players(
    request: Request,
    player_service: PlayerServiceDep,
    filters: FilterParamsDep,
    page_request: PageRequestDep,
):
    """
    List one page of players matching the filters.

    Examples:
        GET /rest/players?race=HUMAN&minLevel=3&order=LEVEL&pageNumber=1
    """
    page = await player_service.list_players_page(
        build_player_filter(filters), page_request
    )
    return [player_orm_to_response(player) for player in page.items]


@router.get("/page", response_model=PlayerListResponse)
async def list_players_with_metadata(
    player_service: PlayerServiceDep,
    filters: FilterParamsDep,
    page_request: PageRequestDep,
):
    """List one page of players together with total count and page count."""
    page = await player_service.list_players_page(
        build_player_filter(filters), page_request
    )
    return player_page_to_response(page)


@router.get("/count", response_model=int)
async def count_players(player_service: PlayerServiceDep, filters: FilterParamsDep):
    """Count all players matching the filters."""
    return await player_service.count_players(build_player_filter(filters))


@router.post("", response_model=PlayerResponse)
async def create_player(player_data: PlayerCreate, player_service: PlayerServiceDep):
    """Create a player; level fields are derived from experience."""
    player = await player_service.create_player(player_data)
    return player_orm_to_response(player)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: int, player_service: PlayerServiceDep):
    """Get a player by id."""
    player = await player_service.get_player(player_id)
    return player_orm_to_response(player)


@router.post("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: int, patch: PlayerUpdate, player_service: PlayerServiceDep
):
    """Partially update a player."""
    player = await player_service.update_player(player_id, patch)
    return player_orm_to_response(player)


@router.delete("/{player_id}")
async def delete_player(player_id: int, player_service: PlayerServiceDep) -> None:
    """Delete a player."""
    await player_service.delete_player(player_id)
