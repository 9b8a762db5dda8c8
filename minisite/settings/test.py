from .base import *  # noqa: F403  # pylint: disable=wildcard-import,unused-wildcard-import

# #############
# General

# pragma: allowlist nextline secret
SECRET_KEY = "fake_secret_key_to_run_tests"  # noqa: S105

ALLOWED_HOSTS = ["*"]

DEBUG = False

# Don't redirect to HTTPS in tests or send the HSTS header
SECURE_SSL_REDIRECT = False
SECURE_HSTS_SECONDS = 0

# Quieten down the logging in tests
LOGGING["handlers"]["console"]["class"] = "logging.NullHandler"  # type: ignore[index] # noqa: F405
LOGGING["handlers"]["gunicorn_console"]["class"] = "logging.NullHandler"  # type: ignore[index] # noqa: F405

# Wagtail
WAGTAILADMIN_BASE_URL = "http://testserver"

SECTIONS_ARCHIVE_PATH = "sections"

# No CDN in tests; purges are asserted by patching.
WAGTAILFRONTENDCACHE = {}

# #############
# Performance

# By default, Django uses a computationally difficult algorithm for passwords hashing.
# We don't need such a strong algorithm in tests, so use MD5
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

# Disable caches in tests
CACHES["default"] = {  # noqa: F405
    "BACKEND": "django.core.cache.backends.dummy.DummyCache",
}
