# pylint: disable=invalid-name
import os

import gunicorn

# Tell gunicorn to run our app
wsgi_app = "minisite.wsgi:application"

# Replace gunicorn's 'Server' HTTP header to avoid leaking info to attackers
gunicorn.SERVER = ""

# Restart gunicorn worker processes every 1200-1250 requests
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "1200"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "50"))

# Log to stdout
accesslog = "-"

# Time out after 25 seconds by default
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "25"))

# Load app pre-fork to save memory and worker startup time
preload_app = True

# Access log fields are read by minisite.core.logs.GunicornJsonFormatter
logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "gunicorn_json": {"()": "minisite.core.logs.GunicornJsonFormatter"},
        "json": {"()": "minisite.core.logs.JSONFormatter"},
    },
    "handlers": {
        "access": {"class": "logging.StreamHandler", "formatter": "gunicorn_json"},
        "error": {"class": "logging.StreamHandler", "formatter": "json"},
    },
    "loggers": {
        "gunicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
        "gunicorn.error": {"handlers": ["error"], "level": "INFO", "propagate": False},
    },
}
# pylint: enable=invalid-name
