import logging

import pytest
from django.conf import settings
from django.test import Client
from django.test.utils import override_settings
from wagtail.models import Page, Site

from minisite.home.models import HomePage


@pytest.fixture(scope="session", autouse=True)
def _custom_media_dir_settings(tmpdir_factory):
    with override_settings(MEDIA_ROOT=str(tmpdir_factory.mktemp("media"))):
        yield


@pytest.fixture
def enable_console_logging():
    """Fixture that re-enables console logging and ensures loggers propagate,
    so we can use the caplog pytest fixture.
    """
    original_logging = settings.LOGGING.copy()
    settings.LOGGING["handlers"]["console"] = {
        "level": "INFO",
        "class": "logging.StreamHandler",
    }
    for logger in settings.LOGGING["loggers"]:
        settings.LOGGING["loggers"][logger]["propagate"] = True

    logging.config.dictConfig(settings.LOGGING)

    yield

    logging.config.dictConfig(original_logging)


@pytest.fixture()
def csrf_check_client() -> Client:
    """A Django test client instance that enforces CSRF checks."""
    return Client(enforce_csrf_checks=True)


@pytest.fixture()
def root_page() -> Page:
    """Returns the root page. Useful for adding pages in tests."""
    return Page.objects.filter(depth=1).get()


@pytest.fixture()
def home_page() -> HomePage:
    """Returns the home page, which is created via a migration."""
    return HomePage.objects.first()


@pytest.fixture()
def default_site() -> Site:
    """Returns the default site, which is created via a migration."""
    return Site.objects.get(is_default_site=True)
