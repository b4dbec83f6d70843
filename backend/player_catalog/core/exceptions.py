"""
Service layer custom exceptions.

Two failure kinds reach callers of the player service: a request that
carries an invalid value (``BadRequestError``) and a lookup that finds no
record (``PlayerNotFoundError``). Storage failures are not wrapped.
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class BadRequestError(ServiceException):
    """Exception raised when a caller supplies an invalid field value."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(
            message=message,
            service=service,
            operation=operation,
            context=validation_context,
        )
        self.field = field


class PlayerNotFoundError(ServiceException):
    """Exception raised when no player exists for the requested id."""

    def __init__(
        self,
        player_id: int,
        message: str = "Player not found",
        operation: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            service="PlayerService",
            operation=operation,
            context={"player_id": player_id},
        )
        self.player_id = player_id
