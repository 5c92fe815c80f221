"""
Utility functions for the league API.

Contains request helpers and the handler decorator used by the API routes.
"""

from functools import wraps
from typing import Any, Callable, TypeVar

from flask import request

from league_api.logger import get_api_logger
from league_api.services.base import ServiceError

# Type variable for generic function decoration
F = TypeVar('F', bound=Callable[..., Any])

logger = get_api_logger()


def get_json_body() -> Any:
    """Get the decoded JSON request body.

    Returns:
        The decoded body, or None when the request has no body or the
        body is not valid JSON.
    """
    return request.get_json(silent=True)


def handle_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator keeping every failure of a handler inside the handler.

    ServiceErrors pass through to the registered error handlers; anything
    else is logged and turned into a 500 with the handler's fixed message.

    Args:
        failure_message: User-facing message for unexpected failures.
    """
    def decorator(f: F) -> F:
        @wraps(f)
        def decorated_function(*args: Any, **kwargs: Any) -> Any:
            try:
                return f(*args, **kwargs)
            except ServiceError:
                raise
            except Exception as e:
                logger.error(f"{f.__name__} failed: {e}", exc_info=True)
                raise ServiceError(failure_message, 500) from e
        return decorated_function  # type: ignore
    return decorator
