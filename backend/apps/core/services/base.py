"""
Base service class and utilities for all services.
Provides common functionality like logging and error handling.
"""
import logging
from typing import Dict, Optional


class BaseService:
    """
    Base service class that all other services should inherit from.
    Provides common functionality for logging and error handling.
    """

    def __init__(self):
        """Initialize the service with a logger."""
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}")

    def log_info(self, message: str, **kwargs) -> None:
        """
        Log an info message with optional context.

        Args:
            message: The message to log
            **kwargs: Additional context to include in the log
        """
        self.logger.info(message, extra={'context': kwargs})

    def log_error(self, message: str, exception: Optional[Exception] = None, **kwargs) -> None:
        """
        Log an error message with optional exception and context.

        Args:
            message: The error message to log
            exception: Optional exception that caused the error
            **kwargs: Additional context to include in the log
        """
        self.logger.error(
            message,
            exc_info=exception,
            extra={'context': kwargs}
        )

    def log_warning(self, message: str, **kwargs) -> None:
        """
        Log a warning message with optional context.

        Args:
            message: The warning message to log
            **kwargs: Additional context to include in the log
        """
        self.logger.warning(message, extra={'context': kwargs})


class ServiceException(Exception):
    """Base exception for service layer errors."""

    default_code = 'SERVICE_ERROR'
    status_code = 400

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Dict] = None):
        """
        Initialize service exception.

        Args:
            message: Error message
            code: Optional error code for categorization
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}


class ValidationError(ServiceException):
    """Raised when service validation fails."""
    default_code = 'VALIDATION_ERROR'


class ExternalServiceError(ServiceException):
    """Raised when an external service (API, Stripe, etc.) fails."""
    default_code = 'EXTERNAL_SERVICE_ERROR'


class InvalidArgument(ValidationError):
    """A request value is present but out of range or of the wrong type."""
    default_code = 'INVALID_ARGUMENT'


class MissingArgument(ValidationError):
    """A required request value is absent or empty."""
    default_code = 'MISSING_ARGUMENT'


class RemoteRejected(ExternalServiceError):
    """The payment processor refused the operation."""
    default_code = 'REMOTE_REJECTED'
