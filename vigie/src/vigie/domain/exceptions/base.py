"""
Base domain exceptions.
"""

from typing import Optional


class VigieException(Exception):
    """Base exception for all Vigie domain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundError(VigieException):
    """Raised when an entity is not found in its data source."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class ValidationError(VigieException):
    """Raised when request input fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={"field": field} if field else None,
        )
        self.field = field


class DataSourceError(VigieException):
    """Raised when the local item data cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Unable to read local data from {path}: {reason}",
            code="DATA_SOURCE_ERROR",
            details={"path": path},
        )
        self.path = path
