from django.apps import AppConfig


class HomeConfig(AppConfig):
    """The home app config."""

    default_auto_field = "django.db.models.AutoField"
    name = "minisite.home"
