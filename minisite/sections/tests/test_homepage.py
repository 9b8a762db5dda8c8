from django.test import SimpleTestCase

from minisite.sections.homepage import (
    MAX_PAGE_ID,
    NO_HOMEPAGE,
    HomepageReference,
    HomepageResolution,
    InvalidHomepageReference,
    resolve_homepage,
)


class FakeLookup:
    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def get_published(self, page_id):
        self.calls.append(page_id)
        return self.pages.get(page_id)


class HomepageReferenceTestCase(SimpleTestCase):
    def test_blank_values_are_unset(self):
        for value in (None, ""):
            with self.subTest(value=value):
                reference = HomepageReference.from_value(value)
                self.assertEqual(reference, NO_HOMEPAGE)
                self.assertFalse(reference.is_set)

    def test_integers_and_digit_strings(self):
        self.assertEqual(HomepageReference.from_value(12).page_id, 12)
        self.assertEqual(HomepageReference.from_value("12").page_id, 12)
        self.assertEqual(HomepageReference.from_value(" 7 ").page_id, 7)
        self.assertTrue(HomepageReference.from_value(3).is_set)

    def test_invalid_values(self):
        for value in (0, -4, "0", "abc", "1.5", 1.5, True, [], "-3", 10**20, "9999999999999999999999999"):
            with self.subTest(value=value), self.assertRaises(InvalidHomepageReference):
                HomepageReference.from_value(value)

    def test_largest_page_id(self):
        self.assertEqual(HomepageReference.from_value(MAX_PAGE_ID).page_id, MAX_PAGE_ID)

        with self.assertRaises(InvalidHomepageReference):
            HomepageReference.from_value(MAX_PAGE_ID + 1)

    def test_invalid_reference_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidHomepageReference, ValueError))


class ResolveHomepageTestCase(SimpleTestCase):
    def setUp(self):
        self.page = object()
        self.lookup = FakeLookup({5: self.page})

    def test_unset_reference_is_not_found_without_lookup(self):
        resolution = resolve_homepage(NO_HOMEPAGE, self.lookup)

        self.assertFalse(resolution.found)
        self.assertIsNone(resolution.page)
        self.assertEqual(self.lookup.calls, [])

    def test_published_reference_is_found(self):
        reference = HomepageReference(page_id=5)
        resolution = resolve_homepage(reference, self.lookup)

        self.assertTrue(resolution.found)
        self.assertIs(resolution.page, self.page)
        self.assertEqual(resolution.reference, reference)

    def test_stale_reference_is_not_found(self):
        with self.assertLogs("minisite.sections.homepage", level="INFO") as logs:
            resolution = resolve_homepage(HomepageReference(page_id=99), self.lookup)

        self.assertFalse(resolution.found)
        self.assertEqual(resolution, HomepageResolution(reference=HomepageReference(page_id=99)))
        self.assertEqual(logs.records[0].page_id, 99)

    def test_resolution_is_repeatable(self):
        reference = HomepageReference(page_id=5)

        self.assertEqual(resolve_homepage(reference, self.lookup), resolve_homepage(reference, self.lookup))
