"""SQLAlchemy 2.0 ORM models for players feature with Rich Domain Model pattern.

The player record keeps its derived level fields next to the experience
counter they are computed from; ``apply_level`` is the only writer of
those two columns.
"""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime as SQLDateTime,
    Enum as SQLEnum,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from player_catalog.core.enums import Profession, Race
from player_catalog.core.models import Base
from player_catalog.utils import to_epoch_millis
from .levels import calculate_level_fields

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30


class PlayerORM(Base):
    """Player domain model (Rich Domain Model pattern).

    Combines data and behavior:
    - Database fields with type safety (SQLAlchemy 2.0 Mapped types)
    - Derived level calculation kept in sync with experience
    """

    __tablename__ = "player"
    __table_args__ = (
        Index("idx_player_race_profession", "race", "profession"),
        Index("idx_player_level", "level"),
    )

    # ========================================================================
    # DATABASE FIELDS
    # ========================================================================

    # 64-bit ids; SQLite only autoincrements a plain INTEGER primary key
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Identifier assigned by the database on creation",
    )

    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
        index=True,
        comment="Character name",
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
        comment="Character title",
    )

    race: Mapped[Race] = mapped_column(
        SQLEnum(Race, native_enum=False, length=16),
        nullable=False,
        comment="Character race",
    )

    profession: Mapped[Profession] = mapped_column(
        SQLEnum(Profession, native_enum=False, length=16),
        nullable=False,
        comment="Character profession",
    )

    birthday: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        comment="Character registration date",
    )

    banned: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Whether the character is banned",
    )

    experience: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Accumulated experience points",
    )

    level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Level derived from experience",
    )

    until_next_level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Experience points remaining until the next level",
    )

    # ========================================================================
    # DOMAIN LOGIC
    # ========================================================================

    def apply_level(self) -> None:
        """Recompute ``level`` and ``until_next_level`` from ``experience``."""
        self.level, self.until_next_level = calculate_level_fields(self.experience)

    @property
    def birthday_millis(self) -> int:
        """Birthday as milliseconds since the Unix epoch."""
        return to_epoch_millis(self.birthday)

    def __repr__(self) -> str:
        """Return string representation of the player."""
        return f"<PlayerORM(id={self.id}, name='{self.name}', level={self.level})>"
