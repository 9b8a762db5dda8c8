"""Selecting and resolving the page shown on the section archive.

The stored setting is a loosely-typed page id. It is turned into a
`HomepageReference` when read, and resolved against the currently published
section pages on every request. "Nothing selected" and "selected page is gone"
both resolve to the same not-found result.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Protocol

if TYPE_CHECKING:
    from minisite.sections.models import SectionPage


logger = logging.getLogger(__name__)

# upper bound of the PositiveIntegerField column the id is stored in
MAX_PAGE_ID = 2147483647


class InvalidHomepageReference(ValueError):
    """Raised when a value cannot identify a page at all."""


@dataclass(frozen=True)
class HomepageReference:
    """An optional reference to the section page used as the archive homepage."""

    page_id: int | None = None

    @classmethod
    def from_value(cls, value: Any) -> "HomepageReference":
        """Build a reference from a raw stored or submitted value.

        Blank values give the empty reference. Only the syntax is checked here;
        the page may or may not exist.
        """
        if value is None or value == "":
            return cls()

        # bool is an int subclass, but True is not a page id
        if isinstance(value, bool):
            raise InvalidHomepageReference(f"{value!r} is not a valid page id.")

        if isinstance(value, int):
            page_id = value
        elif isinstance(value, str) and value.strip().isdecimal():
            page_id = int(value.strip())
        else:
            raise InvalidHomepageReference(f"{value!r} is not a valid page id.")

        if not 0 < page_id <= MAX_PAGE_ID:
            raise InvalidHomepageReference(f"{value!r} is not a valid page id.")

        return cls(page_id=page_id)

    @property
    def is_set(self) -> bool:
        return self.page_id is not None


NO_HOMEPAGE = HomepageReference()


class PublishedSectionPageLookup(Protocol):
    def get_published(self, page_id: int) -> Optional["SectionPage"]: ...


@dataclass(frozen=True)
class HomepageResolution:
    """The outcome of resolving a `HomepageReference`."""

    reference: HomepageReference
    page: Optional["SectionPage"] = None

    @property
    def found(self) -> bool:
        return self.page is not None


def resolve_homepage(reference: HomepageReference, lookup: PublishedSectionPageLookup) -> HomepageResolution:
    """Resolve a reference to a published section page, if there is one."""
    if not reference.is_set:
        return HomepageResolution(reference=reference)

    page = lookup.get_published(reference.page_id)  # type: ignore[arg-type]
    if page is None:
        logger.info(
            "Section homepage does not resolve to a published page",
            extra={"page_id": reference.page_id},
        )

    return HomepageResolution(reference=reference, page=page)
