"""Shared exceptions for the application."""

from typing import Any, Dict, List, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message, 400)
        self.field = field
        self.details = details or ([{'field': field, 'message': message}] if field else [])


class InsufficientStockError(DomainError):
    def __init__(self, available: int, requested: int) -> None:
        self.available = available
        self.requested = requested
        super().__init__(
            f'Insufficient stock. Available: {available}, Requested: {requested}', 400
        )


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Authentication required') -> None:
        super().__init__(message, 401)


class NotFoundError(CustomBaseError):
    def __init__(self, resource: str, resource_id: Any = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        message = (
            f"{resource} with ID '{resource_id}' not found"
            if resource_id is not None
            else f'{resource} not found'
        )
        super().__init__(message, 404)


class OperationFailedError(CustomBaseError):
    """Persistence failure; the cause is logged, never returned to clients."""

    def __init__(self, operation: str, reason: Optional[str] = None) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f'Failed to {operation}', 500)
