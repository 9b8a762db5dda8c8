from typing import TYPE_CHECKING, Optional

from django.db.models.functions import Lower

from minisite.sections.models import SectionPage

if TYPE_CHECKING:
    from wagtail.models import Site
    from wagtail.query import PageQuerySet


class SectionPageRepository:
    """Looks up the published section pages of a site.

    "Published" means live and not behind a view restriction. Without a site,
    section pages from every site are considered.
    """

    def __init__(self, site: Optional["Site"] = None) -> None:
        self.site = site

    def published(self) -> "PageQuerySet":
        """Return the published section pages, ordered alphabetically by title."""
        queryset = SectionPage.objects.live().public()
        if self.site is not None:
            queryset = queryset.in_site(self.site)
        return queryset.order_by(Lower("title"), "pk")

    def get_published(self, page_id: int) -> SectionPage | None:
        """Return the published section page with the given id, or None."""
        return self.published().filter(pk=page_id).first()

    def choices(self) -> list[tuple[int, str]]:
        return list(self.published().values_list("pk", "title"))
