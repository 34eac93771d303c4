# user_api/config/settings.py
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "user_management"
    db_user: str = "postgres"
    db_password: str = "postgres"

    # Full SQLAlchemy URL; wins over the db_* values when set
    database_url: str | None = None

    db_pool_size: int = 5
    db_max_overflow: int = 20
    db_pool_recycle_seconds: int = 300
    db_pool_timeout_seconds: int = 5
    db_echo: bool = False

    environment: str = "development"
    debug: bool = False

    server_host: str = "0.0.0.0"
    server_port: int = 8080
    server_workers: int = 2
    # gunicorn --timeout / --graceful-timeout
    request_timeout_seconds: int = 60
    shutdown_grace_seconds: int = 30
    api_prefix: str = "/api/v1"

    log_level: str = "INFO"

    # Comma-separated, "*" allows any origin
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "db_host", "db_name", "db_user", "db_password", "database_url", "log_level",
        mode="before",
    )
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        return (
            f"postgresql+psycopg2://{user}:{password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
