"""Shared fixtures: an in-memory SQLite database and player factories."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import datetime, timezone  # noqa: E402
from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from player_catalog.core import Base  # noqa: E402
from player_catalog.core.enums import Profession, Race  # noqa: E402
from player_catalog.features.players.orm_models import PlayerORM  # noqa: E402
from player_catalog.features.players.repository import (  # noqa: E402
    SQLAlchemyPlayerRepository,
)
from player_catalog.features.players.service import PlayerService  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with factory() as session:
        yield session


@pytest.fixture
def repository(db_session) -> SQLAlchemyPlayerRepository:
    return SQLAlchemyPlayerRepository(db_session)


@pytest.fixture
def player_service(repository) -> PlayerService:
    return PlayerService(repository)


@pytest.fixture
def make_player():
    """Build a transient PlayerORM with consistent level fields."""

    def _make(**overrides) -> PlayerORM:
        fields = {
            "name": "Ix",
            "title": "Conqueror",
            "race": Race.HUMAN,
            "profession": Profession.WARRIOR,
            "birthday": datetime(2010, 1, 1, tzinfo=timezone.utc),
            "experience": 0,
            "banned": False,
        }
        fields.update(overrides)
        player = PlayerORM(**fields)
        player.apply_level()
        return player

    return _make


@pytest_asyncio.fixture
async def seeded_players(repository, make_player) -> list[PlayerORM]:
    """Five stored players covering every filterable field."""
    players = [
        make_player(
            name="Ix",
            title="Conqueror",
            race=Race.HUMAN,
            profession=Profession.WARRIOR,
            birthday=datetime(2005, 6, 1, tzinfo=timezone.utc),
            experience=0,
        ),
        make_player(
            name="Gimli",
            title="Lord of the Caves",
            race=Race.DWARF,
            profession=Profession.WARRIOR,
            birthday=datetime(2010, 1, 1, tzinfo=timezone.utc),
            experience=5_000,
            banned=True,
        ),
        make_player(
            name="Legolas",
            title="Prince of Mirkwood",
            race=Race.ELF,
            profession=Profession.ROGUE,
            birthday=datetime(2012, 3, 15, tzinfo=timezone.utc),
            experience=120_000,
        ),
        make_player(
            name="Azog",
            title="The Defiler",
            race=Race.ORC,
            profession=Profession.NAZGUL,
            birthday=datetime(2015, 7, 4, tzinfo=timezone.utc),
            experience=1_500_000,
            banned=True,
        ),
        make_player(
            name="Max%Power",
            title="Lord_of_Percent",
            race=Race.HUMAN,
            profession=Profession.SORCERER,
            birthday=datetime(2020, 12, 31, tzinfo=timezone.utc),
            experience=10_000_000,
        ),
    ]
    for player in players:
        await repository.create(player)
    return players
