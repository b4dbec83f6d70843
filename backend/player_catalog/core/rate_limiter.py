"""Rate limiting for the player endpoints.

Requests are keyed by client IP. Limits are applied per route via
``@limiter.limit``; setting ``RATE_LIMIT_ENABLED=false`` turns them off.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_global_settings


def list_rate_limit() -> str:
    """Current limit string for listing endpoints, read from settings."""
    return get_global_settings().list_rate_limit


limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_global_settings().rate_limit_enabled,
)
