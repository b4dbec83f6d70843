"""Create or drop the player catalog schema with SQLAlchemy metadata.

Usage:
    python -m player_catalog.init_db [init|drop|reset]
"""

import asyncio
import sys
from typing import Awaitable, Callable, Dict, NoReturn, Optional

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from player_catalog.core import Base, db_manager

# Register ORM models on Base.metadata
from player_catalog.features.players import orm_models  # noqa: F401

logger = structlog.get_logger(__name__)


def _masked_url(engine: AsyncEngine) -> str:
    return make_url(str(engine.url)).render_as_string(hide_password=True)


async def _apply_metadata(engine: AsyncEngine, action: str) -> None:
    """Run ``Base.metadata.<action>`` inside one transaction."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(getattr(Base.metadata, action))
    except SQLAlchemyError as e:
        logger.error(
            "schema_change_failed",
            action=action,
            database_url=_masked_url(engine),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise


async def init_db(engine: Optional[AsyncEngine] = None) -> None:
    """Create every table registered on ``Base.metadata`` that is missing.

    :param engine: Engine to use; defaults to the application engine
    :raises SQLAlchemyError: If the connection or DDL fails
    """
    engine = engine or db_manager.engine
    logger.info("schema_init_started", database_url=_masked_url(engine))
    await _apply_metadata(engine, "create_all")
    logger.info("schema_init_completed", tables=sorted(Base.metadata.tables))


async def drop_all_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop the player tables. Destroys all stored players."""
    engine = engine or db_manager.engine
    logger.warning("schema_drop_started", database_url=_masked_url(engine))
    await _apply_metadata(engine, "drop_all")
    logger.info("schema_drop_completed")


async def reset_db(engine: Optional[AsyncEngine] = None) -> None:
    """Drop and recreate the schema."""
    await drop_all_tables(engine)
    await init_db(engine)


COMMANDS: Dict[str, Callable[[], Awaitable[None]]] = {
    "init": init_db,
    "drop": drop_all_tables,
    "reset": reset_db,
}


async def _run(command: str) -> None:
    try:
        await COMMANDS[command]()
    finally:
        await db_manager.close()


def main() -> NoReturn:
    """Entry point for ``player-catalog-init-db``; defaults to ``init``."""
    command = sys.argv[1] if len(sys.argv) > 1 else "init"

    if command not in COMMANDS:
        logger.error("unknown_command", command=command)
        print(f"Usage: python -m player_catalog.init_db [{'|'.join(COMMANDS)}]")
        sys.exit(1)

    asyncio.run(_run(command))
    sys.exit(0)


if __name__ == "__main__":
    main()
