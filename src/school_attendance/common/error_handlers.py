from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AlreadyMarkedError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidMonthError,
    ServerError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AlreadyMarkedError, 400),
    (InvalidMonthError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ServerError, 500),
)


def _status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def add_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(exc: DomainError):
        status = _status_for(exc)
        body = {"error": str(exc)}
        if isinstance(exc, ValidationError) and exc.errors:
            body["errors"] = exc.errors
        return jsonify(body), status

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def unhandled_exception(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500
