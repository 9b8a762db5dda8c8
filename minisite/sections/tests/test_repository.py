from django.test import TestCase
from wagtail.models import Page, PageViewRestriction, Site

from minisite.home.models import HomePage
from minisite.sections.repository import SectionPageRepository
from minisite.sections.tests.factories import SectionPageFactory


class SectionPageRepositoryTestCase(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.site = Site.objects.get(is_default_site=True)

        cls.services = SectionPageFactory(title="Services")
        cls.about = SectionPageFactory(title="about")
        cls.careers = SectionPageFactory(title="Careers", parent=cls.about)
        cls.draft = SectionPageFactory(title="Draft", live=False)

        cls.private = SectionPageFactory(title="Private")
        PageViewRestriction.objects.create(
            page=cls.private,
            restriction_type=PageViewRestriction.PASSWORD,
            password="secret",  # noqa: S106
        )

        # A second site with its own section page
        root_page = Page.objects.get(depth=1)
        cls.other_home = root_page.add_child(instance=HomePage(title="Other home", slug="other-home"))
        cls.other_site = Site.objects.create(hostname="other.example.com", root_page=cls.other_home)
        cls.other_section = SectionPageFactory(title="Elsewhere", parent=cls.other_home)

    def test_published_lists_live_public_pages_alphabetically(self):
        pages = list(SectionPageRepository(self.site).published())

        self.assertEqual(pages, [self.about, self.careers, self.services])

    def test_published_is_scoped_to_the_site(self):
        self.assertEqual(list(SectionPageRepository(self.other_site).published()), [self.other_section])

    def test_published_without_a_site_covers_all_sites(self):
        pages = list(SectionPageRepository().published())

        self.assertEqual(pages, [self.about, self.careers, self.other_section, self.services])

    def test_get_published(self):
        repository = SectionPageRepository(self.site)

        self.assertEqual(repository.get_published(self.careers.pk), self.careers)
        self.assertIsNone(repository.get_published(self.draft.pk))
        self.assertIsNone(repository.get_published(self.private.pk))
        self.assertIsNone(repository.get_published(self.other_section.pk))
        self.assertIsNone(repository.get_published(self.site.root_page_id))
        self.assertIsNone(repository.get_published(999999))

    def test_choices(self):
        self.assertEqual(
            SectionPageRepository(self.site).choices(),
            [(self.about.pk, "about"), (self.careers.pk, "Careers"), (self.services.pk, "Services")],
        )
