from collections.abc import Iterator
from typing import Any

from django.apps import apps
from django.core.checks import CheckMessage, Error, register
from wagtail.contrib.settings.models import (
    BaseSiteSetting as WagtailBaseSiteSetting,
)

from minisite.core.models.base import BaseSiteSetting


@register
def check_wagtail_settings(*args: Any, **kwargs: Any) -> Iterator[CheckMessage]:
    for model in apps.get_models():
        if issubclass(model, WagtailBaseSiteSetting) and not issubclass(model, BaseSiteSetting):
            yield Error(
                "Site setting does not extend project base.",
                hint=f"Ensure site setting extends {BaseSiteSetting!r}.",
                obj=model,
            )
