"""Composable query predicates for listing and counting players.

Each constructor takes optional parameters and returns a SQLAlchemy boolean
expression over ``PlayerORM``. An absent parameter yields ``true()``, which
``and_`` drops, so constructors can be conjoined freely.
"""

from typing import Any, Optional

from sqlalchemy import ColumnElement, and_, true

from player_catalog.core.enums import Profession, Race
from player_catalog.utils import from_epoch_millis
from .orm_models import PlayerORM
from .schemas import PlayerFilterParams

Predicate = ColumnElement[bool]


def match_all() -> Predicate:
    """Predicate that leaves any conjunction unchanged."""
    return true()


def _in_range(column: Any, minimum: Any, maximum: Any) -> Predicate:
    """Inclusive range with either bound optional."""
    if minimum is None and maximum is None:
        return match_all()
    if minimum is None:
        return column <= maximum
    if maximum is None:
        return column >= minimum
    return column.between(minimum, maximum)


def by_name_contains(name: Optional[str] = None) -> Predicate:
    if name is None:
        return match_all()
    return PlayerORM.name.contains(name, autoescape=True)


def by_title_contains(title: Optional[str] = None) -> Predicate:
    if title is None:
        return match_all()
    return PlayerORM.title.contains(title, autoescape=True)


def by_race(race: Optional[Race] = None) -> Predicate:
    if race is None:
        return match_all()
    return PlayerORM.race == race


def by_profession(profession: Optional[Profession] = None) -> Predicate:
    if profession is None:
        return match_all()
    return PlayerORM.profession == profession


def by_experience_range(
    min_experience: Optional[int] = None, max_experience: Optional[int] = None
) -> Predicate:
    return _in_range(PlayerORM.experience, min_experience, max_experience)


def by_level_range(
    min_level: Optional[int] = None, max_level: Optional[int] = None
) -> Predicate:
    return _in_range(PlayerORM.level, min_level, max_level)


def by_birthday_range(
    after: Optional[int] = None, before: Optional[int] = None
) -> Predicate:
    """Birthday range with bounds given in epoch milliseconds."""
    return _in_range(
        PlayerORM.birthday,
        from_epoch_millis(after) if after is not None else None,
        from_epoch_millis(before) if before is not None else None,
    )


def by_banned(banned: Optional[bool] = None) -> Predicate:
    """Match the banned flag exactly; both True and False are meaningful."""
    if banned is None:
        return match_all()
    return PlayerORM.banned == banned


def combine(*predicates: Predicate) -> Predicate:
    """Conjoin predicates; no predicates means match everything."""
    if not predicates:
        return match_all()
    return and_(*predicates)


def build_player_filter(params: PlayerFilterParams) -> Predicate:
    """Conjoin every filter constructor for the supplied query parameters."""
    return combine(
        by_name_contains(params.name),
        by_title_contains(params.title),
        by_race(params.race),
        by_profession(params.profession),
        by_birthday_range(params.after, params.before),
        by_banned(params.banned),
        by_experience_range(params.min_experience, params.max_experience),
        by_level_range(params.min_level, params.max_level),
    )
