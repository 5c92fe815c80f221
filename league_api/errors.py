"""
Centralized error handling for the application.

Provides Flask error handlers and utility functions for consistent
error responses across the application. Error bodies are always
``{'error': <message>}`` and never carry the underlying failure.
"""

from typing import Tuple

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException

from league_api.logger import get_logger
from league_api.services.base import ServiceError

logger = get_logger(__name__)


def error_response(error: str, status_code: int = 400) -> Tuple[Response, int]:
    """Create a standardized error response.

    Args:
        error: Error message
        status_code: HTTP status code (default: 400)

    Returns:
        Tuple of (JSON response, status code)
    """
    return jsonify({'error': error}), status_code


def register_error_handlers(app: Flask) -> None:
    """Register centralized error handlers with the Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(ServiceError)
    def handle_service_error(error: ServiceError):
        """Handle ServiceError exceptions (including subclasses).

        Returns JSON error response with the error's status code.
        """
        if error.status_code >= 500:
            logger.error(f"Service error: {error.message}")
        else:
            logger.warning(f"Service error: {error.message}")
        return error_response(error.message, error.status_code)

    @app.errorhandler(400)
    def handle_bad_request(error):
        """Handle 400 Bad Request errors."""
        return error_response('Bad request', 400)

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle 404 Not Found errors."""
        return error_response('Resource not found', 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        return error_response('Method not allowed', 405)

    @app.errorhandler(429)
    def handle_rate_limit(error):
        """Handle 429 Too Many Requests errors."""
        return error_response('Too many requests. Please try again later.', 429)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        """Handle any other HTTP error raised by Flask or Werkzeug."""
        return error_response(error.name, error.code or 500)

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle 500 Internal Server errors.

        Logs the error and returns a generic message to avoid
        exposing internal details.
        """
        logger.error(f"Internal server error: {error}", exc_info=True)
        return error_response('An internal error occurred', 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        """Handle unexpected exceptions.

        Catches any unhandled exceptions and returns a 500 response.
        """
        logger.error(f"Unexpected error: {error}", exc_info=True)
        return error_response('An unexpected error occurred', 500)
