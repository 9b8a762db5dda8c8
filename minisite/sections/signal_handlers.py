from typing import Any

from django.db.models.signals import post_delete, post_save
from wagtail.models import Page, PageViewRestriction
from wagtail.signals import page_published, page_unpublished

from minisite.core.cache import purge_cache_on_all_sites
from minisite.sections.models import SectionPage, SectionsSettings
from minisite.sections.utils import get_section_archive_path


def purge_section_archive_from_frontend_cache() -> None:
    purge_cache_on_all_sites(get_section_archive_path())


def purge_section_archive_after_settings_change(
    instance: SectionsSettings, created: bool = False, **kwargs: Any
) -> None:
    # a fresh row without a homepage serves the same placeholder as no row at all
    if created and instance.homepage_page_id is None:
        return
    purge_section_archive_from_frontend_cache()


def purge_section_archive_if_homepage_changed(instance: Page, **kwargs: Any) -> None:
    # note: unpublishing also covers page deletion
    if SectionsSettings.objects.filter(homepage_page_id=instance.pk).exists():
        purge_section_archive_from_frontend_cache()


def purge_section_archive_after_view_restriction_change(instance: PageViewRestriction, **kwargs: Any) -> None:
    """A restriction on the homepage, or on any of its ancestors, changes whether it is public."""
    page = Page.objects.filter(pk=instance.page_id).first()
    if page is None:
        return

    homepage_ids = SectionsSettings.objects.filter(homepage_page_id__isnull=False).values("homepage_page_id")
    if Page.objects.descendant_of(page, inclusive=True).filter(pk__in=homepage_ids).exists():
        purge_section_archive_from_frontend_cache()


def register_signal_handlers() -> None:
    post_save.connect(purge_section_archive_after_settings_change, sender=SectionsSettings)
    post_delete.connect(purge_section_archive_after_settings_change, sender=SectionsSettings)

    page_published.connect(purge_section_archive_if_homepage_changed, sender=SectionPage)
    page_unpublished.connect(purge_section_archive_if_homepage_changed, sender=SectionPage)

    post_save.connect(purge_section_archive_after_view_restriction_change, sender=PageViewRestriction)
    post_delete.connect(purge_section_archive_after_view_restriction_change, sender=PageViewRestriction)
