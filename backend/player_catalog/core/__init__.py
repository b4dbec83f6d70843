"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .database import get_db, db_manager
from .exceptions import (
    ServiceException,
    BadRequestError,
    PlayerNotFoundError,
)
from .enums import Race, Profession, PlayerOrder
from .validation import is_empty_or_none, exceeds_length
from .models import Base

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Database
    "get_db",
    "db_manager",
    # Exceptions
    "ServiceException",
    "BadRequestError",
    "PlayerNotFoundError",
    # Enums
    "Race",
    "Profession",
    "PlayerOrder",
    # Validation
    "is_empty_or_none",
    "exceeds_length",
    # Models
    "Base",
]
