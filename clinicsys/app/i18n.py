from __future__ import annotations

from typing import Callable

from clinicsys.app.i18n_catalog import _TRANSLATIONS

DEFAULT_LANGUAGE = "pt"


class I18nManager:
    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self._language = language if language in _TRANSLATIONS else DEFAULT_LANGUAGE
        self._listeners: list[Callable[[], None]] = []

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        if language not in _TRANSLATIONS or language == self._language:
            return
        self._language = language
        for listener in list(self._listeners):
            listener()

    def t(self, key: str) -> str:
        """Texto traducido; si falta en el idioma activo se usa el portugués y, si no, la clave."""
        return _TRANSLATIONS.get(self._language, {}).get(key) or _TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)
