from typing import TYPE_CHECKING, Any, Optional

from wagtail import hooks
from wagtail.admin.userbar import EditPageItem

if TYPE_CHECKING:
    from django.http import HttpRequest
    from wagtail.models import Page

    from minisite.sections.homepage import HomepageResolution


@hooks.register("construct_wagtail_userbar")
def point_edit_link_at_section_homepage(request: "HttpRequest", items: list[Any], page: Optional["Page"]) -> None:
    """On the section archive, make "Edit this page" edit the section homepage.

    The archive has no page of its own to edit. If no published homepage is
    selected, the edit link is removed instead.
    """
    resolution: HomepageResolution | None = getattr(request, "section_homepage", None)
    if resolution is None:
        return

    position = next((index for index, item in enumerate(items) if isinstance(item, EditPageItem)), None)
    items[:] = [item for item in items if not isinstance(item, EditPageItem)]

    if resolution.found:
        if position is None:
            # Straight after the admin link
            position = min(1, len(items))
        items.insert(position, EditPageItem(resolution.page))
