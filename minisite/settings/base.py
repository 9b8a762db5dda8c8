"""Django settings shared by every environment.

Environment-specific modules (``dev``, ``test``) import everything from here
and override what they need.
"""

import os
from pathlib import Path

import dj_database_url

env = os.environ.copy()

# Build paths inside the project like this: BASE_DIR / "subdir".
PROJECT_DIR = Path(__file__).resolve().parent.parent
BASE_DIR = PROJECT_DIR.parent

# #############
# General

DEBUG = env.get("DEBUG", "false").lower() == "true"

SECRET_KEY = env.get("SECRET_KEY")

ALLOWED_HOSTS = [host.strip() for host in env.get("ALLOWED_HOSTS", "").split(",") if host.strip()]

INSTALLED_APPS = [
    "minisite.core",
    "minisite.home",
    "minisite.sections",
    "wagtail.contrib.settings",
    "wagtail.contrib.frontend_cache",
    "wagtail.embeds",
    "wagtail.sites",
    "wagtail.users",
    "wagtail.snippets",
    "wagtail.documents",
    "wagtail.images",
    "wagtail.search",
    "wagtail.admin",
    "wagtail",
    "modelcluster",
    "taggit",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "minisite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.jinja2.Jinja2",
        "DIRS": [PROJECT_DIR / "jinja2"],
        "APP_DIRS": True,
        "OPTIONS": {
            "extensions": [
                "wagtail.jinja2tags.core",
                "wagtail.admin.jinja2tags.userbar",
            ],
        },
    },
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "minisite.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# #############
# Database

DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=int(env.get("DB_CONN_MAX_AGE", "60")),
    ),
}

# #############
# Caches

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
}

# Cache-Control headers for public pages, in seconds.
if "CACHE_CONTROL_S_MAXAGE" in env:
    CACHE_CONTROL_S_MAXAGE = int(env["CACHE_CONTROL_S_MAXAGE"])

if "CACHE_CONTROL_STALE_WHILE_REVALIDATE" in env:
    CACHE_CONTROL_STALE_WHILE_REVALIDATE = int(env["CACHE_CONTROL_STALE_WHILE_REVALIDATE"])

# Front-end cache purging is only enabled when a CDN is configured.
WAGTAILFRONTENDCACHE = {}

if "FRONTEND_CACHE_CLOUDFRONT_DISTRIBUTION_ID" in env:
    WAGTAILFRONTENDCACHE["default"] = {
        "BACKEND": "wagtail.contrib.frontend_cache.backends.CloudfrontBackend",
        "DISTRIBUTION_ID": env["FRONTEND_CACHE_CLOUDFRONT_DISTRIBUTION_ID"],
    }

# #############
# Auth

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# #############
# Internationalisation

LANGUAGE_CODE = "en-gb"
TIME_ZONE = "Europe/London"
USE_I18N = True
USE_TZ = True

# #############
# Static and media files

STATIC_URL = "/static/"
STATIC_ROOT = env.get("STATIC_DIR", BASE_DIR / "static")

MEDIA_URL = "/media/"
MEDIA_ROOT = env.get("MEDIA_DIR", BASE_DIR / "media")

# #############
# Security

SECURE_REFERRER_POLICY = "no-referrer-when-downgrade"
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "SAMEORIGIN"

if env.get("SECURE_SSL_REDIRECT", "true").lower() == "true":
    SECURE_SSL_REDIRECT = True
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

SECURE_HSTS_SECONDS = int(env.get("SECURE_HSTS_SECONDS", "0"))

# #############
# Logging

LOG_LEVEL = env.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "minisite.core.logs.JSONFormatter",
        },
        "gunicorn_json": {
            "()": "minisite.core.logs.GunicornJsonFormatter",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
        "gunicorn_console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "gunicorn_json",
        },
    },
    "loggers": {
        "minisite": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "wagtail": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "django.security": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "gunicorn.error": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "gunicorn.access": {
            "handlers": ["gunicorn_console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

# #############
# Wagtail

WAGTAIL_SITE_NAME = env.get("WAGTAIL_SITE_NAME", "Mini-site")

WAGTAILADMIN_BASE_URL = env.get("WAGTAILADMIN_BASE_URL", "")

# The admin lives under this path, with a trailing slash.
WAGTAILADMIN_HOME_PATH = env.get("WAGTAILADMIN_HOME_PATH", "admin/")

WAGTAILSEARCH_BACKENDS = {
    "default": {
        "BACKEND": "wagtail.search.backends.database",
    }
}

RICH_TEXT_BASIC = ["bold", "italic", "link", "ol", "ul"]

# #############
# Sections

# URL path segment of the section archive, e.g. "sections" serves /sections/.
SECTIONS_ARCHIVE_PATH = env.get("SECTIONS_ARCHIVE_PATH", "sections")
