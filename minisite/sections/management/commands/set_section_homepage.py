import logging
from typing import TYPE_CHECKING, Any

from django.core.management.base import BaseCommand, CommandError
from wagtail.models import Site

from minisite.sections.homepage import InvalidHomepageReference
from minisite.sections.repository import SectionPageRepository
from minisite.sections.utils import set_homepage_reference

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from django.core.management.base import CommandParser


class Command(BaseCommand):
    """Sets or clears the section page shown at the section archive URL."""

    help = "Set or clear the section homepage for a site."

    def add_arguments(self, parser: "CommandParser") -> None:
        parser.add_argument(
            "page_id",
            nargs="?",
            help="ID of the section page to use as the homepage.",
        )
        parser.add_argument(
            "--site",
            type=int,
            dest="site_id",
            default=None,
            help="ID of the site to configure. Defaults to the default site.",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            default=False,
            help="Remove the homepage, so the archive shows its placeholder.",
        )

    def get_site(self, site_id: int | None) -> Site:
        try:
            if site_id is None:
                return Site.objects.get(is_default_site=True)
            return Site.objects.get(pk=site_id)
        except Site.DoesNotExist as e:
            raise CommandError("Site not found.") from e

    def handle(self, *args: Any, **options: Any) -> None:
        page_id = options["page_id"]
        clear = options["clear"]

        if clear and page_id is not None:
            raise CommandError("Pass either a page ID or --clear, not both.")
        if not clear and page_id is None:
            raise CommandError("Pass a page ID, or --clear to remove the homepage.")

        site = self.get_site(options["site_id"])

        try:
            reference = set_homepage_reference(site, None if clear else page_id)
        except InvalidHomepageReference as e:
            raise CommandError(str(e)) from e

        logger.info("Section homepage set", extra={"site_id": site.pk, "page_id": reference.page_id})

        if not reference.is_set:
            self.stdout.write(self.style.SUCCESS(f"Cleared the section homepage for {site}."))
            return

        if SectionPageRepository(site).get_published(reference.page_id) is None:  # type: ignore[arg-type]
            self.stderr.write(
                self.style.WARNING(
                    f"Page {reference.page_id} is not a published section page on {site}. "
                    "The archive will show its placeholder until it is."
                )
            )

        self.stdout.write(self.style.SUCCESS(f"Set the section homepage for {site} to page {reference.page_id}."))
