from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QCheckBox, QComboBox, QFormLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from clinicsys.app.bootstrap import IDIOMAS_SOPORTADOS
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import Tema
from clinicsys.app.i18n import I18nManager


class PageAjustes(QWidget):
    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._container = container
        self._i18n = i18n

        root = QVBoxLayout(self)

        self.box_apariencia = QGroupBox()
        apariencia = QVBoxLayout(self.box_apariencia)
        self.lbl_apariencia = QLabel()
        self.lbl_apariencia.setWordWrap(True)
        self.chk_oscuro = QCheckBox()
        self.chk_oscuro.toggled.connect(self._on_tema)
        apariencia.addWidget(self.lbl_apariencia)
        apariencia.addWidget(self.chk_oscuro)

        self.box_notificaciones = QGroupBox()
        notificaciones = QVBoxLayout(self.box_notificaciones)
        self.lbl_notificaciones = QLabel()
        self.lbl_notificaciones.setWordWrap(True)
        self.chk_notificaciones = QCheckBox()
        self.chk_notificaciones.toggled.connect(self._container.ajustes.set_notificaciones)
        notificaciones.addWidget(self.lbl_notificaciones)
        notificaciones.addWidget(self.chk_notificaciones)

        self.box_idioma = QGroupBox()
        idioma = QFormLayout(self.box_idioma)
        self.cbo_idioma = QComboBox()
        for codigo in IDIOMAS_SOPORTADOS:
            self.cbo_idioma.addItem(codigo, codigo)
        self.cbo_idioma.currentIndexChanged.connect(self._on_idioma)
        idioma.addRow(self.cbo_idioma)

        root.addWidget(self.box_apariencia)
        root.addWidget(self.box_notificaciones)
        root.addWidget(self.box_idioma)
        root.addStretch(1)

        self._i18n.subscribe(self._retranslate)
        self._retranslate()
        self.on_show()

    def _retranslate(self) -> None:
        t = self._i18n.t
        self.box_apariencia.setTitle(t("ajustes.apariencia"))
        self.lbl_apariencia.setText(t("ajustes.apariencia.desc"))
        self.chk_oscuro.setText(t("ajustes.modo_oscuro"))
        self.box_notificaciones.setTitle(t("ajustes.notificaciones"))
        self.lbl_notificaciones.setText(t("ajustes.notificaciones.desc"))
        self.chk_notificaciones.setText(t("ajustes.notificaciones.activar"))
        self.box_idioma.setTitle(t("ajustes.idioma"))
        for index in range(self.cbo_idioma.count()):
            self.cbo_idioma.setItemText(index, t(f"lang.{self.cbo_idioma.itemData(index)}"))

    def on_show(self) -> None:
        ajustes = self._container.ajustes
        for widget, valor in (
            (self.chk_oscuro, ajustes.tema == Tema.OSCURO),
            (self.chk_notificaciones, ajustes.notificaciones),
        ):
            widget.blockSignals(True)
            widget.setChecked(valor)
            widget.blockSignals(False)
        self.cbo_idioma.blockSignals(True)
        self.cbo_idioma.setCurrentIndex(max(self.cbo_idioma.findData(self._i18n.language), 0))
        self.cbo_idioma.blockSignals(False)

    def _on_tema(self, oscuro: bool) -> None:
        self._container.ajustes.set_tema(Tema.OSCURO if oscuro else Tema.CLARO)

    def _on_idioma(self, index: int) -> None:
        codigo = self.cbo_idioma.itemData(index)
        if codigo:
            self._i18n.set_language(codigo)

    def dispose(self) -> None:
        self._i18n.unsubscribe(self._retranslate)
