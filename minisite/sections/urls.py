from django.conf import settings
from django.urls import path

from minisite.sections.views import SectionArchiveView

urlpatterns = [
    path(f"{settings.SECTIONS_ARCHIVE_PATH}/", SectionArchiveView.as_view(), name="section_archive"),
]
