"""Player service for handling player data operations.

Thin orchestration layer:
- Field validation lives in ``validation``
- Level derivation lives in ``levels`` (applied via ``PlayerORM.apply_level``)
- All database access is delegated to the repository
"""

from typing import Optional

import structlog

from player_catalog.core.decorators import service_error_handler
from player_catalog.core.enums import PlayerOrder
from player_catalog.core.exceptions import PlayerNotFoundError
from player_catalog.generics import PaginatedResult
from player_catalog.utils import ensure_utc
from .filters import Predicate
from .orm_models import PlayerORM
from .repository import PlayerRepositoryInterface
from .schemas import PageRequest, PlayerCreate, PlayerUpdate
from .validation import (
    validate_birthday,
    validate_experience,
    validate_name,
    validate_player,
    validate_player_id,
    validate_profession,
    validate_race,
    validate_title,
)

logger = structlog.get_logger(__name__)


class PlayerService:
    """Service for handling player data operations (Thin Orchestration Layer).

    Responsibilities:
    - Validate inputs before any write reaches storage
    - Recompute level fields on every create and update
    - Delegate reads and writes to the repository

    Does NOT:
    - Execute SQL queries directly (delegated to repository)
    - Know about HTTP (the router maps exceptions to status codes)
    """

    def __init__(self, repository: PlayerRepositoryInterface):
        """Initialize player service with repository.

        :param repository: Storage for player records
        """
        self.repository = repository

    @service_error_handler("PlayerService")
    async def get_player(self, player_id: int) -> PlayerORM:
        """Get a player by id.

        :param player_id: Database identifier
        :returns: Stored player
        :raises BadRequestError: If the id is out of range
        :raises PlayerNotFoundError: If no player has this id
        """
        validate_player_id(player_id)

        player = await self.repository.get_by_id(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id, operation="get_player")

        return player

    @service_error_handler("PlayerService")
    async def list_players(
        self, predicate: Predicate, order: Optional[PlayerOrder] = None
    ) -> list[PlayerORM]:
        """Get every player matching the predicate, without pagination."""
        return await self.repository.find_all(predicate, order)

    @service_error_handler("PlayerService")
    async def list_players_page(
        self, predicate: Predicate, page_request: PageRequest
    ) -> PaginatedResult[PlayerORM]:
        """Get one page of matching players with total-count metadata."""
        return await self.repository.find_page(predicate, page_request)

    @service_error_handler("PlayerService")
    async def count_players(self, predicate: Predicate) -> int:
        """Count players matching the predicate."""
        return await self.repository.count(predicate)

    @service_error_handler("PlayerService")
    async def create_player(self, player_data: PlayerCreate) -> PlayerORM:
        """Validate, derive level fields and store a new player.

        :param player_data: Incoming player; id and level fields are ignored
        :returns: Stored player with its assigned id
        :raises BadRequestError: If any validated field is invalid
        """
        validate_player(player_data)

        player = PlayerORM(
            name=player_data.name,
            title=player_data.title,
            race=player_data.race,
            profession=player_data.profession,
            birthday=ensure_utc(player_data.birthday),
            experience=player_data.experience,
            banned=bool(player_data.banned),
        )
        player.apply_level()

        return await self.repository.create(player)

    @service_error_handler("PlayerService")
    async def update_player(self, player_id: int, patch: PlayerUpdate) -> PlayerORM:
        """Apply a partial update to a stored player.

        Only fields present in ``patch`` are validated and written. The banned
        flag is written only when the patch sets it to True, so a patch cannot
        lift an existing ban.

        :param player_id: Database identifier
        :param patch: Fields to change
        :returns: Updated player
        :raises BadRequestError: If the id or a present field is invalid
        :raises PlayerNotFoundError: If no player has this id
        """
        player = await self.get_player(player_id)

        # Validate every present field before touching the loaded record
        if patch.name is not None:
            validate_name(patch.name)
        if patch.title is not None:
            validate_title(patch.title)
        if patch.birthday is not None:
            validate_birthday(patch.birthday)
        if patch.race is not None:
            validate_race(patch.race)
        if patch.profession is not None:
            validate_profession(patch.profession)
        if patch.experience is not None:
            validate_experience(patch.experience)

        if patch.name is not None:
            player.name = patch.name
        if patch.title is not None:
            player.title = patch.title
        if patch.birthday is not None:
            player.birthday = ensure_utc(patch.birthday)
        if patch.race is not None:
            player.race = patch.race
        if patch.profession is not None:
            player.profession = patch.profession
        if patch.banned:
            player.banned = True
        if patch.experience is not None:
            player.experience = patch.experience

        player.apply_level()

        logger.info(
            "player_updated",
            player_id=player_id,
            fields=sorted(patch.model_dump(exclude_none=True)),
        )

        return await self.repository.save(player)

    @service_error_handler("PlayerService")
    async def delete_player(self, player_id: int) -> None:
        """Delete a stored player.

        The lookup and the delete run in the same session transaction.

        :raises BadRequestError: If the id is out of range
        :raises PlayerNotFoundError: If no player has this id
        """
        player = await self.get_player(player_id)
        await self.repository.delete(player)
