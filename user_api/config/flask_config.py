from flask import Flask

from user_api.config.settings import settings


def configure_app(app: Flask) -> None:
    app.config["ENVIRONMENT"] = settings.environment
    app.config["DEBUG"] = settings.debug
    # Keep keys in the order the response schemas declare them
    app.json.sort_keys = False
