"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic
from datetime import datetime

from app.domain.models.base import AuthenticationError
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepositoryInterface
from app.domain.services.identity_resolver import IdentityResolver


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Errors are logged with the operation name and propagated unchanged.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    @property
    def operation_name(self) -> str:
        return self.__class__.__name__

    async def execute(self, request: T = None) -> R:
        """
        Execute the use case: validate the request, then run the business logic.
        """
        self.execution_start = datetime.utcnow()

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except Exception as exc:
            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()
            logger.error(
                f"{self.operation_name} failed after {execution_time:.3f}s: "
                f"{type(exc).__name__}: {exc}"
            )
            raise

        self.execution_end = datetime.utcnow()
        execution_time = (self.execution_end - self.execution_start).total_seconds()
        logger.debug(f"{self.operation_name} completed in {execution_time:.3f}s")
        return result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    The surrounding unit of work commits or rolls back.
    """

    async def _execute_business_logic(self, request: T) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that require an authenticated caller.
    """

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository
        self.identity_resolver = IdentityResolver(user_repository)
        self.current_external_id: Optional[str] = None
        self.current_email: Optional[str] = None

    def set_current_user(self, external_id: str, email: Optional[str] = None) -> None:
        """Set the caller context from the verified token."""
        self.current_external_id = external_id
        self.current_email = email

    async def _validate_request(self, request: T) -> None:
        """Validate request with authentication check."""
        if not self.current_external_id:
            raise AuthenticationError()

        await super()._validate_request(request)

    def _resolve_current_user(self) -> User:
        """
        Get the caller's user row.

        Raises:
            AuthenticationError: If no caller is set
            EntityNotFoundError: If the caller has no user row
        """
        return self.identity_resolver.resolve(self.current_external_id)
