from django.conf import settings
from django.urls import URLPattern, URLResolver, include, path
from django.views.decorators.cache import never_cache
from django.views.decorators.vary import vary_on_headers
from django.views.generic import TemplateView
from wagtail import urls as wagtail_urls
from wagtail.admin import urls as wagtailadmin_urls
from wagtail.documents import urls as wagtaildocs_urls
from wagtail.utils.urlpatterns import decorate_urlpatterns

from minisite.core import views as core_views

# Internal URLs are not intended for public use.
internal_urlpatterns = [
    path("readiness", core_views.ready, name="readiness"),
]

# Private URLs are not meant to be cached.
private_urlpatterns = [
    path("-/", include((internal_urlpatterns, "internal"))),
    path(settings.WAGTAILADMIN_HOME_PATH, include(wagtailadmin_urls)),
    path("documents/", include(wagtaildocs_urls)),
]

debug_urlpatterns: list[URLResolver | URLPattern] = []

if settings.DEBUG:
    from django.conf.urls.static import static
    from django.contrib.staticfiles.urls import staticfiles_urlpatterns

    # Serve static and media files from development server
    debug_urlpatterns += staticfiles_urlpatterns()
    debug_urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    debug_urlpatterns += [
        # Add views for testing 404 and 500 templates
        path(
            "test404",
            TemplateView.as_view(template_name="templates/pages/errors/404.html"),
        ),
        path(
            "test500",
            TemplateView.as_view(template_name="templates/pages/errors/500.html"),
        ),
    ]

# Public URLs that are meant to be cached.
# The section archive must come before Wagtail's catch-all page serving.
urlpatterns: list[URLResolver | URLPattern] = [
    path("", include("minisite.sections.urls")),
]

# Set private URLs to use the "never cache" cache settings.
private_urlpatterns = decorate_urlpatterns(private_urlpatterns, never_cache)

# Set vary header to instruct cache to serve different version on different
# cookies, different request method (e.g. AJAX) and different protocol
# (http vs https).
urlpatterns = decorate_urlpatterns(
    urlpatterns,
    vary_on_headers("Cookie", "X-Requested-With", "X-Forwarded-Proto", "Accept-Encoding"),
)

# Join private and public URLs.
urlpatterns = private_urlpatterns + debug_urlpatterns + urlpatterns + [path("", include(wagtail_urls))]

# Error handlers
handler404 = "minisite.core.views.page_not_found"
handler500 = "minisite.core.views.server_error"
