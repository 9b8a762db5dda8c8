from typing import Any

from django import forms
from wagtail.admin.forms import WagtailAdminModelForm


class SectionsSettingsForm(WagtailAdminModelForm):
    """Sections settings form, offering the site's published section pages as homepage choices."""

    homepage_page_id = forms.TypedChoiceField(
        label="Homepage",
        coerce=int,
        empty_value=None,
        required=False,
        help_text="The section page shown at the section archive URL. Only published section pages are listed.",
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

        from minisite.sections.repository import (  # pylint: disable=import-outside-toplevel
            SectionPageRepository,
        )

        site = self.instance.site if self.instance.site_id else None
        choices = SectionPageRepository(site).choices()

        # keep a selection that no longer resolves, so saving the form does not silently clear it
        stored_page_id = self.instance.homepage_page_id
        if stored_page_id and stored_page_id not in {page_id for page_id, _title in choices}:
            choices.append((stored_page_id, f"(unavailable) page {stored_page_id}"))
            self.fields["homepage_page_id"].help_text = (
                f"Page {stored_page_id} is selected but is not a published section page on this site, "
                "so the section archive shows a placeholder."
            )

        self.fields["homepage_page_id"].choices = [("", "No homepage"), *choices]
