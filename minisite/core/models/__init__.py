from .base import BasePage, BaseSiteSetting

__all__ = ["BasePage", "BaseSiteSetting"]
