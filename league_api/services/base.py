"""
Base service class with transaction management.

Provides a foundation for all service classes with:
- Transaction context manager for automatic commit/rollback
- Custom exception hierarchy for consistent error handling
- Translation of document store failures into generic 500 errors
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy.exc import SQLAlchemyError

from league_api import db
from league_api.logger import get_logger
from league_api.repositories.base import StoreError

logger = get_logger(__name__)


class ServiceError(Exception):
    """Base exception for service layer errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error response.
    """

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(ServiceError):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, 404)


class ValidationError(ServiceError):
    """Exception raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class BaseService:
    """Base class for all services.

    Store calls are attempted exactly once. Any failure that is not already a
    ServiceError is logged with its cause and replaced by a ServiceError that
    carries only the caller's fixed message.

    Example:
        class TeamService(BaseService):
            def rename_team(self, team_id: str, name: str):
                with self.transaction('Rename failed'):
                    # Store calls here
                    # Automatically commits on success, rolls back on exception
                    pass
    """

    @contextmanager
    def store_errors(
        self,
        failure_message: str = "Database operation failed"
    ) -> Generator[None, None, None]:
        """Translate store failures raised in the block into a 500 ServiceError.

        Args:
            failure_message: User-facing message for the 500 response.

        Raises:
            ServiceError: Re-raised as-is, or wrapping any other failure.
        """
        try:
            yield
        except ServiceError:
            raise
        except (StoreError, SQLAlchemyError) as e:
            logger.error(f"Document store error: {e}", exc_info=True)
            raise ServiceError(failure_message, 500) from e
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            raise ServiceError(failure_message, 500) from e

    @contextmanager
    def transaction(
        self,
        failure_message: str = "Database operation failed"
    ) -> Generator[None, None, None]:
        """Context manager for document store writes.

        Commits on successful completion and rolls back on any exception.

        Args:
            failure_message: User-facing message for the 500 response.

        Raises:
            ServiceError: On store errors or unexpected exceptions.
        """
        try:
            with self.store_errors(failure_message):
                yield
                db.session.commit()
        except ServiceError:
            db.session.rollback()
            raise
