# -*- coding: utf-8 -*-
"""Centralized Translation Manager for user-facing text."""

from PyQt5.QtCore import Qt
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton translation lookup. The portal ships English only."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = "en"
            cls._instance._translations = {}
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "en": EN_TRANSLATIONS,
        }

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            logger.debug(f"Missing translation key: {key}")
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                pass
        return translation

    def is_rtl(self) -> bool:
        return self._current_language in ("ar", "he", "fa")

    def get_layout_direction(self):
        return Qt.RightToLeft if self.is_rtl() else Qt.LeftToRight


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    """Translate a key using the application translator."""
    return _translator.tr(key, **kwargs)


def get_layout_direction():
    return _translator.get_layout_direction()
