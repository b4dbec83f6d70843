"""Repository pattern implementation for players feature.

Provides collection-like interface for accessing player domain objects.
Isolates data access logic from business logic following Martin Fowler's Repository Pattern.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from player_catalog.core.enums import PlayerOrder
from player_catalog.generics import PaginatedResult
from .filters import Predicate
from .orm_models import PlayerORM
from .schemas import PageRequest

logger = structlog.get_logger(__name__)

_ORDER_COLUMNS = {
    PlayerOrder.ID: PlayerORM.id,
    PlayerOrder.NAME: PlayerORM.name,
    PlayerOrder.EXPERIENCE: PlayerORM.experience,
    PlayerOrder.BIRTHDAY: PlayerORM.birthday,
    PlayerOrder.LEVEL: PlayerORM.level,
}


class PlayerRepositoryInterface(ABC):
    """Interface for player repository.

    Defines contract for data access operations.
    Enables mocking and potential swap of implementations.
    """

    @abstractmethod
    async def get_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by identifier.

        :param player_id: Database identifier
        :returns: PlayerORM if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, predicate: Predicate, order: Optional[PlayerOrder] = None
    ) -> list[PlayerORM]:
        """Get every player matching the predicate.

        :param predicate: Filter built by ``filters``
        :param order: Optional sort key
        :returns: List of matching players
        """
        pass

    @abstractmethod
    async def find_page(
        self, predicate: Predicate, page_request: PageRequest
    ) -> PaginatedResult[PlayerORM]:
        """Get one page of players matching the predicate.

        :param predicate: Filter built by ``filters``
        :param page_request: Page number, size and ordering
        :returns: Page of players with total-count metadata
        """
        pass

    @abstractmethod
    async def count(self, predicate: Predicate) -> int:
        """Count players matching the predicate."""
        pass

    @abstractmethod
    async def create(self, player: PlayerORM) -> PlayerORM:
        """Add new player to repository.

        :param player: Player domain object to add
        :returns: Created player with generated id populated
        """
        pass

    @abstractmethod
    async def save(self, player: PlayerORM) -> PlayerORM:
        """Save existing player changes.

        :param player: Player domain object with changes
        :returns: Updated player with refreshed state
        """
        pass

    @abstractmethod
    async def delete(self, player: PlayerORM) -> None:
        """Remove player from repository.

        :param player: Player to delete
        """
        pass


class SQLAlchemyPlayerRepository(PlayerRepositoryInterface):
    """SQLAlchemy implementation of player repository.

    Handles all database operations for players using SQLAlchemy async sessions.
    Reads and the following write share the session's transaction, which is
    committed by the write.
    """

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        :param db: Async database session
        """
        self.db = db

    async def get_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by identifier."""
        player = await self.db.get(PlayerORM, player_id)

        logger.debug("player_lookup", player_id=player_id, found=player is not None)

        return player

    async def find_all(
        self, predicate: Predicate, order: Optional[PlayerOrder] = None
    ) -> list[PlayerORM]:
        """Get every player matching the predicate."""
        stmt = select(PlayerORM).where(predicate)
        if order is not None:
            stmt = stmt.order_by(_ORDER_COLUMNS[order], PlayerORM.id)

        result = await self.db.execute(stmt)
        players = list(result.scalars().all())

        logger.debug("players_listed", count=len(players))

        return players

    async def find_page(
        self, predicate: Predicate, page_request: PageRequest
    ) -> PaginatedResult[PlayerORM]:
        """Get one page of players matching the predicate."""
        total = await self.count(predicate)

        stmt = (
            select(PlayerORM)
            .where(predicate)
            .order_by(_ORDER_COLUMNS[page_request.order], PlayerORM.id)
            .offset(page_request.offset)
            .limit(page_request.page_size)
        )

        result = await self.db.execute(stmt)
        players = list(result.scalars().all())

        logger.debug(
            "players_page_listed",
            page=page_request.page_number,
            size=page_request.page_size,
            order=page_request.order.value,
            count=len(players),
            total=total,
        )

        return PaginatedResult.create(
            items=players,
            total=total,
            page=page_request.page_number,
            size=page_request.page_size,
        )

    async def count(self, predicate: Predicate) -> int:
        """Count players matching the predicate."""
        stmt = select(func.count(PlayerORM.id)).where(predicate)

        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def create(self, player: PlayerORM) -> PlayerORM:
        """Create new player record."""
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)

        logger.info("player_created", player_id=player.id, name=player.name)

        return player

    async def save(self, player: PlayerORM) -> PlayerORM:
        """Save existing player changes."""
        await self.db.commit()
        await self.db.refresh(player)

        logger.debug("player_saved", player_id=player.id)

        return player

    async def delete(self, player: PlayerORM) -> None:
        """Hard delete player."""
        player_id = player.id
        await self.db.delete(player)
        await self.db.commit()

        logger.info("player_deleted", player_id=player_id)
