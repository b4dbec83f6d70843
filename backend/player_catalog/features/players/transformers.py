"""Transformers for converting between layers in players feature.

Following the Data Mapper pattern to keep layers decoupled.
"""

from player_catalog.generics import PaginatedResult
from .orm_models import PlayerORM
from .schemas import PlayerListResponse, PlayerResponse


def player_orm_to_response(player: PlayerORM) -> PlayerResponse:
    """Transform PlayerORM domain model to PlayerResponse API schema.

    :param player: Player domain model from database
    :returns: Player response schema for API
    """
    return PlayerResponse.model_validate(player)


def player_page_to_response(page: PaginatedResult[PlayerORM]) -> PlayerListResponse:
    """Transform a page of players into the paginated API schema."""
    return PlayerListResponse(
        players=[player_orm_to_response(player) for player in page.items],
        total=page.total,
        page=page.page,
        size=page.size,
        pages=page.pages,
    )
