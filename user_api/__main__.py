# Development server. Production runs gunicorn with gunicorn.conf.py:
#   pip install ".[server]" && gunicorn
from user_api.config.settings import settings
from user_api.main import app

app.run(host=settings.server_host, port=settings.server_port, debug=settings.debug)
