"""Players feature - player catalog CRUD, filtering and level derivation."""

from .router import router as players_router
from .service import PlayerService
from .orm_models import PlayerORM
from .schemas import (
    PageRequest,
    PlayerCreate,
    PlayerFilterParams,
    PlayerListResponse,
    PlayerResponse,
    PlayerUpdate,
)
from .dependencies import get_player_service, PlayerServiceDep

__all__ = [
    # Router
    "players_router",
    # Service
    "PlayerService",
    # Models
    "PlayerORM",
    # Schemas
    "PageRequest",
    "PlayerCreate",
    "PlayerFilterParams",
    "PlayerListResponse",
    "PlayerResponse",
    "PlayerUpdate",
    # Dependencies
    "get_player_service",
    "PlayerServiceDep",
]
