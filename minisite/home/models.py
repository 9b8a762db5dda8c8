from typing import ClassVar

from minisite.core.models import BasePage


class HomePage(BasePage):  # type: ignore[django-manager-missing]
    """The homepage model. Sections hang off it."""

    template = "templates/pages/home_page.html"

    # Only allow creating HomePages at the root level
    parent_page_types: ClassVar[list[str]] = ["wagtailcore.Page"]
