# gunicorn.conf.py
# Production entry point: pip install ".[server]" && gunicorn
from user_api.config.settings import settings

wsgi_app = "user_api.main:app"

bind = f"{settings.server_host}:{settings.server_port}"
workers = settings.server_workers

# Workers silent for longer than this are killed and restarted
timeout = settings.request_timeout_seconds
# In-flight requests get this long to finish after SIGTERM
graceful_timeout = settings.shutdown_grace_seconds

loglevel = settings.log_level.lower()
