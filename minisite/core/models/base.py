from typing import TYPE_CHECKING, Optional, Self, cast

from django.utils.decorators import method_decorator
from wagtail.models import Page

from minisite.core.cache import get_default_cache_control_decorator

if TYPE_CHECKING:
    from django.db import models
    from wagtail.contrib.settings.models import (
        BaseSiteSetting as _WagtailBaseSiteSetting,
    )
    from wagtail.models import Site

    class WagtailBaseSiteSetting(_WagtailBaseSiteSetting, models.Model):
        """Explicit class definition for type checking. Indicates we're inheriting from Django's model."""
else:
    from wagtail.contrib.settings.models import (
        BaseSiteSetting as WagtailBaseSiteSetting,
    )

__all__ = ["BasePage", "BaseSiteSetting"]


# Apply default cache headers on this page model's serve method.
@method_decorator(get_default_cache_control_decorator(), name="serve")
class BasePage(Page):  # type: ignore[django-manager-missing]
    """Base page class with cache decorators."""

    show_in_menus_default = True

    class Meta:
        abstract = True


class BaseSiteSetting(WagtailBaseSiteSetting):
    """A customized site setting.

    - A missing site is reported as `DoesNotExist` rather than a lookup on `None`.
    - Use `.get` first so existing rows are read without a write.
    """

    class Meta:
        abstract = True

    @classmethod
    def for_site(cls, site: Optional["Site"]) -> Self:
        """Get or create an instance of this setting for the site."""
        if site is None:
            raise cls.DoesNotExist(f"{cls} does not exist for site None.")

        queryset = cls.base_queryset()

        try:
            return cast(Self, queryset.get(site=site))
        except cls.DoesNotExist:
            instance, _created = queryset.get_or_create(site=site)
            return cast(Self, instance)
