# user_api/api/middlewares/request_context.py
import logging
import time
import uuid

from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


def register_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_request() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        g.start_time = time.perf_counter()

    @app.after_request
    def log_request(response: Response) -> Response:
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id

        duration = time.perf_counter() - g.get("start_time", time.perf_counter())
        logger.info(
            "Method: %s | Path: %s | Status: %s | Duration: %.4fs | RequestID: %s",
            request.method,
            request.path,
            response.status_code,
            duration,
            request_id,
        )
        return response
