"""
Base entity and domain exceptions.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime
from typing import Optional, Any, Dict
from abc import ABC
from dataclasses import dataclass, field
import uuid


def new_id() -> str:
    """Generate a new opaque entity identifier."""
    return str(uuid.uuid4())


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if key.startswith('_'):
                continue
            if isinstance(value, datetime):
                data[key] = value.isoformat()
            elif isinstance(value, list):
                data[key] = [
                    item.to_dict() if hasattr(item, "to_dict") else item
                    for item in value
                ]
            elif hasattr(value, "value") and not isinstance(value, (str, int, float)):
                data[key] = value.value
            else:
                data[key] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input or entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class AuthenticationError(DomainException):
    """Exception raised when no valid caller identity is present."""

    def __init__(self, message: str = "User is not authenticated"):
        super().__init__(message, "UNAUTHENTICATED")


class AuthorizationError(DomainException):
    """Exception raised when the caller does not own the resource."""

    def __init__(self, message: str = "Not authorized to perform this action"):
        super().__init__(message, "UNAUTHORIZED")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any = None, message: Optional[str] = None):
        if message is None:
            message = f"{entity_type} not found"
            if entity_id is not None:
                message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ExternalServiceError(DomainException):
    """Exception raised when a call to an external service fails."""

    def __init__(self, service: str, message: str):
        super().__init__(f"{service} error: {message}", "EXTERNAL_SERVICE_ERROR")
        self.service = service
