from django.test import TestCase
from django.urls import reverse
from wagtail.models import Site
from wagtail.test.utils import WagtailTestUtils

from minisite.sections.forms import SectionsSettingsForm
from minisite.sections.models import SectionsSettings
from minisite.sections.tests.factories import SectionPageFactory


class SettingsForm(SectionsSettingsForm):
    class Meta:
        model = SectionsSettings
        fields = ["homepage_page_id"]  # noqa: RUF012


class SectionsSettingsFormTestCase(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.site = Site.objects.get(is_default_site=True)
        cls.services = SectionPageFactory(title="Services")
        cls.about = SectionPageFactory(title="About")
        cls.draft = SectionPageFactory(title="Draft", live=False)

    def setUp(self):
        self.setting = SectionsSettings.for_site(self.site)

    def test_choices_are_published_pages_sorted_by_title(self):
        form = SettingsForm(instance=self.setting)

        self.assertEqual(
            list(form.fields["homepage_page_id"].choices),
            [("", "No homepage"), (self.about.pk, "About"), (self.services.pk, "Services")],
        )

    def test_saves_selected_page(self):
        form = SettingsForm(instance=self.setting, data={"homepage_page_id": str(self.about.pk)})

        self.assertTrue(form.is_valid(), form.errors)
        form.save()

        self.setting.refresh_from_db()
        self.assertEqual(self.setting.homepage_page_id, self.about.pk)

    def test_blank_clears_selection(self):
        self.setting.homepage_page_id = self.about.pk
        self.setting.save()

        form = SettingsForm(instance=self.setting, data={"homepage_page_id": ""})

        self.assertTrue(form.is_valid(), form.errors)
        form.save()

        self.setting.refresh_from_db()
        self.assertIsNone(self.setting.homepage_page_id)

    def test_unlisted_page_is_rejected(self):
        form = SettingsForm(instance=self.setting, data={"homepage_page_id": str(self.draft.pk)})

        self.assertFalse(form.is_valid())
        self.assertIn("homepage_page_id", form.errors)


    def test_stale_selection_is_listed(self):
        self.setting.homepage_page_id = self.draft.pk
        self.setting.save()

        form = SettingsForm(instance=self.setting)

        self.assertEqual(
            list(form.fields["homepage_page_id"].choices)[-1],
            (self.draft.pk, f"(unavailable) page {self.draft.pk}"),
        )
        self.assertEqual(form["homepage_page_id"].value(), self.draft.pk)
        self.assertIn("not a published section page", form.fields["homepage_page_id"].help_text)

    def test_stale_selection_survives_saving(self):
        self.setting.homepage_page_id = 424242
        self.setting.save()

        form = SettingsForm(instance=self.setting, data={"homepage_page_id": "424242"})

        self.assertTrue(form.is_valid(), form.errors)
        form.save()

        self.setting.refresh_from_db()
        self.assertEqual(self.setting.homepage_page_id, 424242)

    def test_choices_without_stale_selection_have_default_help_text(self):
        self.setting.homepage_page_id = self.about.pk
        self.setting.save()

        form = SettingsForm(instance=self.setting)

        self.assertEqual(len(form.fields["homepage_page_id"].choices), 3)
        self.assertIn("Only published section pages are listed", form.fields["homepage_page_id"].help_text)


class SectionsSettingsAdminTestCase(WagtailTestUtils, TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.site = Site.objects.get(is_default_site=True)
        cls.page = SectionPageFactory(title="About")
        cls.url = reverse("wagtailsettings:edit", args=["sections", "sectionssettings", cls.site.pk])

    def setUp(self):
        self.login()

    def test_edit_view_lists_published_pages(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, f'<option value="{self.page.pk}">About</option>', html=True)

    def test_edit_view_keeps_stale_homepage(self):
        SectionsSettings.objects.create(site=self.site, homepage_page_id=424242)

        response = self.client.get(self.url)

        self.assertContains(response, "(unavailable) page 424242")

    def test_edit_view_saves_homepage(self):
        response = self.client.post(self.url, {"homepage_page_id": str(self.page.pk)})

        self.assertEqual(response.status_code, 302)
        self.assertEqual(SectionsSettings.for_site(self.site).homepage_page_id, self.page.pk)
