from fastapi import HTTPException, status
from functools import wraps
from typing import Any, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

class PlaygroundException(Exception):
    """Base exception for the DB playground."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

        logger.error(f"{self.__class__.__name__}: {message}", extra={"details": self.details})

class UserNotFoundError(PlaygroundException):
    """Raised when a user lookup matches no row."""

    def __init__(self, where: Mapping[str, Any]):
        criteria = ", ".join(f"{k}={v!r}" for k, v in where.items()) or "<none>"
        message = f"No user found matching {criteria}"
        super().__init__(message, {"where": dict(where)})

class DatabaseError(PlaygroundException):
    """Raised when database operations fail."""

    def __init__(self, operation: str, error: str):
        message = f"Database operation '{operation}' failed: {error}"
        details = {"operation": operation, "database_error": error}
        super().__init__(message, details)

class ConfigurationError(PlaygroundException):
    """Raised when application configuration is invalid."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for '{setting}': {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, details)

def to_http_exception(exc: PlaygroundException) -> HTTPException:
    """Convert a playground exception to an HTTP exception with a matching status code."""

    status_code_mapping = {
        UserNotFoundError: status.HTTP_404_NOT_FOUND,
        DatabaseError: status.HTTP_500_INTERNAL_SERVER_ERROR,
        ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    status_code = status_code_mapping.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail={
            "error": exc.__class__.__name__,
            "message": exc.message,
            **exc.details
        }
    )

def _internal_error(func) -> HTTPException:
    logger.exception(f"Unexpected error in {func.__name__}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": "InternalServerError",
            "message": "An unexpected error occurred"
        }
    )

# Global exception handler decorator (async endpoints)
def handle_playground_exceptions(func):
    """Decorator to convert playground exceptions raised by an endpoint into HTTP exceptions."""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except PlaygroundException as e:
            raise to_http_exception(e)
        except Exception:
            raise _internal_error(func)
    return wrapper
