"""Pydantic schemas for Player model."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from player_catalog.core.enums import PlayerOrder, Profession, Race
from player_catalog.utils import from_epoch_millis, to_epoch_millis


class PlayerBase(BaseModel):
    """Base player schema with common fields.

    Every field is optional at this layer: presence and ranges are checked by
    the service so that violations surface as bad requests naming the field.
    """

    name: Optional[str] = Field(None, description="Character name (1-12 chars)")
    title: Optional[str] = Field(None, description="Character title (1-30 chars)")
    race: Optional[Race] = Field(None, description="Character race")
    profession: Optional[Profession] = Field(None, description="Character profession")
    birthday: Optional[datetime] = Field(
        None,
        description="Registration date; epoch milliseconds or ISO 8601",
    )
    experience: Optional[int] = Field(
        None, description="Experience points in [0, 10000000]"
    )

    @field_validator("birthday", mode="before")
    @classmethod
    def parse_epoch_millis(cls, v: Any) -> Any:
        """Read numbers as epoch milliseconds.

        Pydantic alone would read small numbers as seconds.
        """
        if isinstance(v, bool):
            return v
        if isinstance(v, str) and v.strip().lstrip("-").isdigit():
            v = int(v)
        if isinstance(v, (int, float)):
            try:
                return from_epoch_millis(int(v))
            except OverflowError:
                raise ValueError("Date is invalid")
        return v


class PlayerCreate(PlayerBase):
    """Schema for creating a new player.

    Identifier and level fields sent by clients are ignored.
    """

    banned: Optional[bool] = Field(None, description="Ban flag, false when omitted")


class PlayerUpdate(PlayerBase):
    """Schema for a partial update; omitted or null fields keep their value."""

    banned: Optional[bool] = Field(
        None, description="Only a true value is applied to the stored record"
    )


class PlayerResponse(BaseModel):
    """Schema for player response data."""

    id: int = Field(..., description="Database ID")
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int = Field(..., description="Registration date, epoch milliseconds")
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(
        ...,
        serialization_alias="untilNextLevel",
        description="Experience points remaining until the next level",
    )

    @field_validator("birthday", mode="before")
    @classmethod
    def birthday_to_millis(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return to_epoch_millis(v)
        return v

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PlayerFilterParams(BaseModel):
    """Optional criteria for listing and counting players.

    ``None`` means the criterion is absent; ``0`` and ``False`` are real values.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = Field(None, description="Minimum birthday, epoch ms")
    before: Optional[int] = Field(None, description="Maximum birthday, epoch ms")
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None


class PageRequest(BaseModel):
    """Zero-based page selection with ordering."""

    page_number: int = Field(0, ge=0)
    page_size: int = Field(3, ge=1)
    order: PlayerOrder = PlayerOrder.ID

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class PlayerListResponse(BaseModel):
    """Schema for paginated Player list response."""

    players: list[PlayerResponse]
    total: int
    page: int
    size: int
    pages: int

    model_config = ConfigDict(from_attributes=True)
