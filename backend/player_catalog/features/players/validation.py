"""Field validation for player records.

Every check is a pure function over a single value. A violation raises
``BadRequestError`` naming the offending field; nothing is mutated.
"""

from datetime import datetime
from typing import Optional, Protocol

from player_catalog.core.enums import Profession, Race
from player_catalog.core.exceptions import BadRequestError
from player_catalog.core.validation import exceeds_length, is_empty_or_none
from player_catalog.utils import to_epoch_millis
from .orm_models import NAME_MAX_LENGTH, TITLE_MAX_LENGTH

MAX_PLAYER_ID = 2**63 - 1

MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000

# Exclusive bounds, epoch milliseconds
BIRTHDAY_AFTER_MILLIS = 946_674_000_482
BIRTHDAY_BEFORE_MILLIS = 32_535_205_199_494


class PlayerFields(Protocol):
    """Anything carrying the validated player fields (schemas or ORM rows)."""

    name: Optional[str]
    title: Optional[str]
    race: Optional[Race]
    profession: Optional[Profession]
    birthday: Optional[datetime]
    experience: Optional[int]


def validate_player_id(player_id: int) -> None:
    """Reject identifiers outside ``1..MAX_PLAYER_ID``."""
    if player_id <= 0 or player_id > MAX_PLAYER_ID:
        raise BadRequestError("Id is invalid", field="id", value=player_id)


def validate_name(name: Optional[str]) -> None:
    if is_empty_or_none(name) or exceeds_length(name, NAME_MAX_LENGTH):
        raise BadRequestError("Name is incorrect", field="name", value=name)


def validate_title(title: Optional[str]) -> None:
    if is_empty_or_none(title) or exceeds_length(title, TITLE_MAX_LENGTH):
        raise BadRequestError("Title is invalid", field="title", value=title)


def validate_experience(experience: Optional[int]) -> None:
    if experience is None or not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        raise BadRequestError(
            "Experience is invalid", field="experience", value=experience
        )


def validate_birthday(birthday: Optional[datetime]) -> None:
    """Require a birthday strictly between the two epoch-millisecond bounds."""
    if birthday is None:
        raise BadRequestError("Date is invalid", field="birthday")

    millis = to_epoch_millis(birthday)
    if (
        millis < 0
        or millis <= BIRTHDAY_AFTER_MILLIS
        or millis >= BIRTHDAY_BEFORE_MILLIS
    ):
        raise BadRequestError("Date is invalid", field="birthday", value=millis)


def validate_race(race: Optional[Race]) -> None:
    if race is None:
        raise BadRequestError("Race is invalid", field="race")


def validate_profession(profession: Optional[Profession]) -> None:
    if profession is None:
        raise BadRequestError("Profession is invalid", field="profession")


def validate_player(player: PlayerFields) -> None:
    """Run the checks required before a player is created.

    The bundle checks profession, race, experience, birthday and title, and
    checks experience a second time. Name is not part of it; a missing
    name is rejected by the NOT NULL column when the row is inserted.
    """
    validate_profession(player.profession)
    validate_race(player.race)
    validate_experience(player.experience)
    validate_birthday(player.birthday)
    validate_title(player.title)
    validate_experience(player.experience)
