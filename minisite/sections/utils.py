from typing import TYPE_CHECKING, Any, Optional

from django.urls import reverse
from wagtail.models import Site

from minisite.sections.homepage import NO_HOMEPAGE, HomepageReference, HomepageResolution, resolve_homepage
from minisite.sections.models import SectionsSettings
from minisite.sections.repository import SectionPageRepository

if TYPE_CHECKING:
    from django.http import HttpRequest


def get_section_archive_path() -> str:
    return reverse("section_archive")


def get_homepage_reference(site: Optional[Site]) -> HomepageReference:
    """Read the homepage reference stored for the site. Never fails."""
    if site is None:
        return NO_HOMEPAGE

    # read-only: unlike for_site, a missing row is not created here
    setting = SectionsSettings.base_queryset().filter(site=site).only("homepage_page_id").first()
    if setting is None:
        return NO_HOMEPAGE

    return setting.homepage_reference


def set_homepage_reference(site: Site, value: Any) -> HomepageReference:
    """Store a new homepage reference for the site.

    Raises `InvalidHomepageReference` if the value is not a page id. Whether
    the page exists or is published is only checked when the archive is served.
    """
    reference = HomepageReference.from_value(value)

    setting = SectionsSettings.for_site(site)
    setting.homepage_page_id = reference.page_id
    setting.save(update_fields=["homepage_page_id"])

    return reference


def resolve_homepage_for_site(site: Optional[Site]) -> HomepageResolution:
    return resolve_homepage(get_homepage_reference(site), SectionPageRepository(site))


def resolve_homepage_for_request(request: "HttpRequest") -> HomepageResolution:
    """Resolve the section homepage for the site serving the request."""
    return resolve_homepage_for_site(Site.find_for_request(request))
