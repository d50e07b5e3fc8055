"""
Error taxonomy shared by the stores and the HTTP layer.

Stores raise these; ``register_error_handlers`` turns them into the JSON
envelope. Anything else becomes a generic 500.
"""

import logging

from flask import request
from markupsafe import escape
from werkzeug.exceptions import HTTPException

from expense_tracker.envelope import failure
from expense_tracker.models import db

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationFailed(AppError):
    status_code = 400
    default_message = "Validation failed"

    @classmethod
    def for_field(cls, field, message, error_type="value_error"):
        return cls(errors=[{"type": error_type, "loc": [field], "msg": message}])


class Conflict(AppError):
    status_code = 400
    default_message = "Resource already exists"


class Unauthorized(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class InvalidToken(Unauthorized):
    default_message = "Invalid token"


class NotFound(AppError):
    status_code = 404
    default_message = "Resource not found"


NOT_FOUND_PAGE = (
    "<!DOCTYPE html>\n"
    "<html><head><title>Not Found</title></head>\n"
    "<body><h1>Page not found</h1><p>Cannot {method} {path}</p></body></html>\n"
)


def register_error_handlers(app):

    @app.errorhandler(AppError)
    def handle_app_error(error):
        return failure(error.message, error.status_code, errors=error.errors)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_not_found(error):
        body = NOT_FOUND_PAGE.format(method=escape(request.method), path=escape(request.path))
        return body, 404, {"Content-Type": "text/html; charset=utf-8"}

    @app.errorhandler(429)
    def handle_rate_limited(error):
        return failure("Too many requests, please try again later.", 429)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return failure(error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        return failure("Something went wrong", 500)
