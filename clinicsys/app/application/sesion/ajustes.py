from __future__ import annotations

from typing import Callable

from clinicsys.app.bootstrap_logging import get_logger
from clinicsys.app.domain.enums import Tema

LOGGER = get_logger(__name__)


class ServicioAjustes:
    """Preferencias de apariencia y avisos de la sesión. Solo en memoria."""

    def __init__(self, tema: Tema = Tema.CLARO, notificaciones: bool = True) -> None:
        self._tema = Tema(tema)
        self._notificaciones = notificaciones
        self._listeners: list[Callable[[], None]] = []

    @property
    def tema(self) -> Tema:
        return self._tema

    @property
    def notificaciones(self) -> bool:
        return self._notificaciones

    def set_tema(self, tema: Tema) -> None:
        tema = Tema(tema)
        if tema == self._tema:
            return
        self._tema = tema
        LOGGER.info("settings_theme_changed", extra={"tema": tema.value})
        self._notificar()

    def set_notificaciones(self, activas: bool) -> None:
        if activas == self._notificaciones:
            return
        self._notificaciones = activas
        LOGGER.info("settings_notifications_changed", extra={"activas": activas})
        self._notificar()

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notificar(self) -> None:
        for listener in list(self._listeners):
            listener()
