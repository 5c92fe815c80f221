"""
Logging for the league API.

Every record carries the id of the request it was emitted under. Writes to
the document store are additionally logged on the audit logger with the
action and document key attached, so they can be filtered in JSON output.
"""

import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = 'X-Request-ID'
AUDIT_LOGGER = 'league_api.audit'
TEXT_FORMAT = '[%(asctime)s] %(levelname)s [%(request_id)s] %(name)s: %(message)s'


def _json_enabled() -> bool:
    return os.environ.get('FLASK_CONFIG') == 'production'


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get('LOG_LEVEL', 'INFO').upper())
    return level if isinstance(level, int) else logging.INFO


class RequestContextFilter(logging.Filter):
    """Stamp records with the current request id, method and path."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, 'request_id', '-')
            record.http_method = request.method
            record.http_path = request.path
        else:
            record.request_id = '-'
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Request fields are present only for records emitted while handling a
    request; audit fields only for records from log_audit.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'ts': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
            'request_id': getattr(record, 'request_id', '-'),
        }
        if hasattr(record, 'http_method'):
            entry['request'] = {'method': record.http_method, 'path': record.http_path}
        if hasattr(record, 'audit'):
            entry['audit'] = record.audit
        if record.exc_info:
            entry['exc'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logger(name: str, use_json: Optional[bool] = None) -> logging.Logger:
    """
    Attach a stdout handler to the named logger once.

    Args:
        name: Logger name
        use_json: Force JSON output (default: on under the production config)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = _level_from_env()
    logger.setLevel(level)
    logger.addFilter(RequestContextFilter())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if use_json if use_json is not None else _json_enabled():
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger, typically for __name__."""
    return setup_logger(name)


def get_api_logger() -> logging.Logger:
    return get_logger('league_api.api')


def get_db_logger() -> logging.Logger:
    return get_logger('league_api.db')


def log_audit(
    action: str,
    entity_type: str,
    key: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Record a write to the document store.

    Args:
        action: What happened, e.g. 'league_created' or 'team_renamed'
        entity_type: 'league' or 'team'
        key: Document key that was written
        details: Fields worth keeping with the event
    """
    audit = {'action': action, 'entity': entity_type, 'key': key}
    if details:
        audit['details'] = details
    get_logger(AUDIT_LOGGER).info(
        f"{action} {entity_type} {key}", extra={'audit': audit}
    )


def register_request_logging(app: Flask) -> None:
    """Tag every request with an id and log its outcome.

    The id is taken from the incoming X-Request-ID header when present and
    echoed back on the response.

    Args:
        app: Flask application instance.
    """
    api_logger = get_api_logger()

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @app.after_request
    def log_response(response):
        response.headers[REQUEST_ID_HEADER] = getattr(g, 'request_id', '-')
        api_logger.info(f"{request.method} {request.path} -> {response.status_code}")
        return response
