# user_api/main.py
from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from user_api.api.middlewares.error_handler import register_error_handlers
from user_api.api.middlewares.request_context import REQUEST_ID_HEADER, register_request_hooks
from user_api.api.routes import register_routes
from user_api.config.flask_config import configure_app
from user_api.config.settings import settings
from user_api.core.logger import setup_logging
from user_api.infrastructure.database.init_db import create_schema


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db_command() -> None:
        """Create the users table and its indexes."""
        create_schema()


def create_app() -> Flask:
    setup_logging()

    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origin_list}},
        allow_headers=["Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
        methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    )

    configure_app(app)
    register_request_hooks(app)
    register_routes(app, api_prefix=settings.api_prefix)
    register_error_handlers(app)
    register_cli(app)

    return app


app = create_app()
