from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QMessageBox, QWidget

from clinicsys.app.bootstrap_logging import get_logger, log_soft_exception
from clinicsys.app.domain.exceptions import DomainError
from clinicsys.app.i18n import I18nManager

LOGGER = get_logger(__name__)


def present_error(
    parent: QWidget,
    exc: Exception,
    context: str | None = None,
    i18n: Optional[I18nManager] = None,
) -> None:
    """
    Errores de dominio: aviso bloqueante con el mensaje tal cual.
    Cualquier otro: crash_soft.log + mensaje genérico.
    """
    i18n = i18n or I18nManager()

    if isinstance(exc, DomainError):
        QMessageBox.warning(parent, i18n.t("comun.validacion"), str(exc))
        return

    log_soft_exception(LOGGER, exc, {"context": (context or "").strip() or "-", "widget": type(parent).__name__})
    QMessageBox.critical(parent, i18n.t("comun.error"), i18n.t("comun.error_inesperado"))
