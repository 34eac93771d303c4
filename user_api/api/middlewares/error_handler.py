# user_api/api/middlewares/error_handler.py
import logging

from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

from user_api.api.schemas.error_schema import ErrorResponse
from user_api.core.exceptions import AppError, InternalServerError, ValidationFailedError

logger = logging.getLogger(__name__)


def _error_body(status_code: int, message: str, *, error: str | None = None, details=None) -> dict:
    body = ErrorResponse(
        error=error or HTTP_STATUS_CODES.get(status_code, "Unknown Error"),
        message=message,
        details=details or None,
    )
    return body.model_dump(exclude_none=True)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationFailedError)
    def handle_validation_error(err: ValidationFailedError):
        body = _error_body(err.status_code, err.message, error="Validation Failed", details=err.details)
        return jsonify(body), err.status_code

    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        if isinstance(err, InternalServerError):
            # The cause stays in the log, never in the body
            logger.error(
                "%s (request_id=%s)", err.message, g.get("request_id"), exc_info=err
            )
        return jsonify(_error_body(err.status_code, err.message)), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        code = err.code or 500
        return jsonify(_error_body(code, err.description or HTTP_STATUS_CODES.get(code, ""))), code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("unhandled error (request_id=%s)", g.get("request_id"), exc_info=err)
        return jsonify(_error_body(500, "An unexpected error occurred")), 500
