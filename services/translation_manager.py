# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_LANGUAGES = ("en", "de")


class TranslationManager:
    """Singleton Translation Manager."""

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
        from services.translations.de import DE_TRANSLATIONS
        self._translations = {
            "en": EN_TRANSLATIONS,
            "de": DE_TRANSLATIONS,
        }

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"Unsupported language '{lang_code}', falling back to English")
            lang_code = "en"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            # German dictionary may lag behind; English is the reference set
            translation = self._translations.get("en", {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format translation '{key}' with {kwargs}")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
