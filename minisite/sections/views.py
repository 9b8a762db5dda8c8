from typing import TYPE_CHECKING, Any

from django.template.response import TemplateResponse
from django.utils.decorators import method_decorator
from django.views.generic import TemplateView

from minisite.core.cache import get_default_cache_control_decorator
from minisite.sections.models import SectionPage
from minisite.sections.utils import resolve_homepage_for_request

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse


@method_decorator(get_default_cache_control_decorator(), name="dispatch")
class SectionArchiveView(TemplateView):
    """Serves the section archive.

    The homepage chosen in the sections settings is rendered as if it was
    requested directly. Without a usable homepage, a placeholder notice is shown.
    """

    http_method_names = ["get", "head", "options"]
    template_name = "templates/pages/section_archive.html"

    def get(self, request: "HttpRequest", *args: Any, **kwargs: Any) -> "HttpResponse":
        resolution = resolve_homepage_for_request(request)

        # Read by the userbar hook, so the edit link follows the homepage.
        request.section_homepage = resolution  # type: ignore[attr-defined]

        if resolution.found:
            page: SectionPage = resolution.page  # type: ignore[assignment]
            context = page.get_context(request)
            context["is_section_archive"] = True
            return TemplateResponse(request, page.get_template(request), context)

        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["archive_title"] = str(SectionPage._meta.verbose_name_plural).capitalize()
        return context
