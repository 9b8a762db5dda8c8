from typing import TYPE_CHECKING, ClassVar

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from wagtail.contrib.settings.models import register_setting
from wagtail.fields import RichTextField
from wagtail.search import index

from minisite.core.models import BasePage, BaseSiteSetting
from minisite.sections.forms import SectionsSettingsForm
from minisite.sections.homepage import NO_HOMEPAGE, HomepageReference, InvalidHomepageReference

if TYPE_CHECKING:
    from wagtail.admin.panels import Panel


class SectionPage(BasePage):  # type: ignore[django-manager-missing]
    """A page in a mini-site section such as "About" or "Services".

    Section pages nest, so a section can have its own sub-pages. One of them
    can be chosen in the sections settings to be shown at the section archive URL.
    """

    template = "templates/pages/section_page.html"

    parent_page_types: ClassVar[list[str]] = ["home.HomePage", "SectionPage"]
    subpage_types: ClassVar[list[str]] = ["SectionPage"]

    summary = RichTextField(features=settings.RICH_TEXT_BASIC, blank=True)
    body = RichTextField()

    content_panels: ClassVar[list["str | Panel"]] = [
        *BasePage.content_panels,
        "summary",
        "body",
    ]

    search_fields: ClassVar[list[index.BaseField]] = [
        *BasePage.search_fields,
        index.SearchField("summary"),
        index.SearchField("body"),
    ]

    class Meta:
        verbose_name = "section page"
        verbose_name_plural = "section pages"


@register_setting(icon="home")
class SectionsSettings(BaseSiteSetting):
    """Settings class for the section archive."""

    base_form_class = SectionsSettingsForm

    # Kept as a plain id so deleting the page leaves a stale value behind,
    # which resolves to "no homepage" when the archive is served.
    homepage_page_id = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1)],
        verbose_name="homepage",
        help_text="The section page shown at the section archive URL. Only published section pages are listed.",
    )

    panels: ClassVar[list[str]] = ["homepage_page_id"]

    class Meta:
        verbose_name = "sections"

    @property
    def homepage_reference(self) -> HomepageReference:
        try:
            return HomepageReference.from_value(self.homepage_page_id)
        except InvalidHomepageReference:
            return NO_HOMEPAGE
