from django.apps import AppConfig


class SectionsConfig(AppConfig):
    """The sections app config."""

    default_auto_field = "django.db.models.AutoField"
    name = "minisite.sections"
    label = "sections"

    def ready(self) -> None:
        from . import checks  # noqa pylint: disable=import-outside-toplevel,unused-import
        from .signal_handlers import register_signal_handlers  # pylint: disable=import-outside-toplevel

        register_signal_handlers()
