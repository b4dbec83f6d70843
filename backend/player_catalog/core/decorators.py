"""
Service layer decorators for common functionality.

This module provides decorators for error handling and logging
in the service layer.
"""

import functools
import inspect
import structlog
from typing import Any, Awaitable, Callable, Dict, ParamSpec, TypeVar

from player_catalog.core.exceptions import ServiceException

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def _build_context(
    func: Callable[..., Any],
    service_name: str,
    include_context: bool,
    args: tuple,
    kwargs: dict,
) -> Dict[str, Any]:
    """Build a logging context from the service call arguments."""
    context: Dict[str, Any] = {
        "service": service_name,
        "operation": func.__name__,
    }
    if not include_context:
        return context

    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()

    # Add method parameters to context (excluding self and database sessions)
    for name, value in bound_args.arguments.items():
        if name in ["self", "db", "session"]:
            continue
        # Limit string values to avoid huge log entries
        context[name] = str(value)[:200] if value is not None else None
    return context


def service_error_handler(
    service_name: str,
    include_context: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for logging service method calls and failures.

    Service exceptions are logged with their context and re-raised.
    Any other exception (storage or driver errors) is logged and
    re-raised unchanged.

    :param service_name: Name of the service (e.g., "PlayerService")
    :param include_context: Whether to include method parameters in log context
    :returns: Decorated coroutine function

    :example:
        @service_error_handler("PlayerService")
        async def get_player(self, player_id: int) -> PlayerORM:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context = _build_context(
                func, service_name, include_context, args, kwargs
            )

            logger.debug("Service method called", **context)

            try:
                result = await func(*args, **kwargs)
            except ServiceException as e:
                logger.warning(
                    "Service operation rejected",
                    error_type=e.__class__.__name__,
                    error_message=e.message,
                    error_context=e.context,
                    **context,
                )
                raise
            except Exception as e:
                logger.error(
                    "Unexpected error in service operation",
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                    **context,
                )
                raise

            logger.debug("Service method completed successfully", **context)
            return result

        return async_wrapper

    return decorator
