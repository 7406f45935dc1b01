from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from clinicsys.app.container import AppContainer
from clinicsys.app.i18n import I18nManager

_FUNCIONALIDADES = ("pacientes", "medicos", "clinicas", "citas", "tema", "acceso")


class PageSobre(QWidget):
    """Página informativa, sin estado."""

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._i18n = i18n
        layout = QVBoxLayout(self)
        self.lbl_titulo = QLabel()
        self.lbl_titulo.setObjectName("headerTitle")
        self.lbl_intro = QLabel()
        self.lbl_intro.setWordWrap(True)
        self.lbl_funcionalidades = QLabel()
        self.lbl_lista = QLabel()
        self.lbl_lista.setWordWrap(True)
        for label in (self.lbl_titulo, self.lbl_intro, self.lbl_funcionalidades, self.lbl_lista):
            layout.addWidget(label)
        layout.addStretch(1)

        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.lbl_titulo.setText(t("sobre.titulo"))
        self.lbl_intro.setText(t("sobre.intro"))
        self.lbl_funcionalidades.setText(t("sobre.funcionalidades"))
        self.lbl_lista.setText("\n".join(f"• {t(f'sobre.f.{clave}')}" for clave in _FUNCIONALIDADES))

    def on_show(self) -> None:
        pass

    def dispose(self) -> None:
        self._i18n.unsubscribe(self._retranslate)
