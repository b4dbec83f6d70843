"""
Player Catalog Backend Application Package.

This package contains the application logic for the game-character catalog:
validation, level derivation, filtering and persistence of players.
"""

from .core import get_global_settings, db_manager, get_db

__version__ = "1.0.0"
__author__ = "Player Catalog Team"

__all__ = [
    "get_global_settings",
    "db_manager",
    "get_db",
]
