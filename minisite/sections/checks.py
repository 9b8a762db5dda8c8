import re
from collections.abc import Iterator
from typing import Any

from django.conf import settings
from django.core.checks import CheckMessage, Error, Tags, Warning, register  # pylint: disable=redefined-builtin

ARCHIVE_PATH_RE = re.compile(r"^[-\w]+$")


@register(Tags.urls)
def check_section_archive_path(*args: Any, **kwargs: Any) -> Iterator[CheckMessage]:
    archive_path = getattr(settings, "SECTIONS_ARCHIVE_PATH", "")

    if not isinstance(archive_path, str) or not ARCHIVE_PATH_RE.match(archive_path):
        yield Error(
            f"SECTIONS_ARCHIVE_PATH {archive_path!r} is not a valid path segment.",
            hint='Use a single slug-like path segment without slashes, e.g. "sections".',
            id="sections.E001",
        )


@register(Tags.database)
def check_section_archive_not_shadowed(*args: Any, **kwargs: Any) -> Iterator[CheckMessage]:
    """Warn when a page at the top of a site has the same URL as the section archive."""
    from wagtail.models import Site  # pylint: disable=import-outside-toplevel

    archive_path = getattr(settings, "SECTIONS_ARCHIVE_PATH", "")

    for site in Site.objects.select_related("root_page"):
        shadowed = site.root_page.get_children().filter(slug=archive_path).first()
        if shadowed is not None:
            yield Warning(
                f'The page "{shadowed.title}" on {site} is hidden by the section archive at /{archive_path}/.',
                hint="Change the page slug or SECTIONS_ARCHIVE_PATH.",
                obj=shadowed,
                id="sections.W001",
            )
