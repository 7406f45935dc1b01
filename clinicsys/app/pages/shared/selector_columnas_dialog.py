from __future__ import annotations

from PySide6.QtWidgets import QCheckBox, QDialog, QDialogButtonBox, QHBoxLayout, QPushButton, QVBoxLayout

from clinicsys.app.application.listados import VisibilidadColumnas
from clinicsys.app.i18n import I18nManager


class SelectorColumnasDialog(QDialog):
    """Una casilla por columna del listado; devuelve una VisibilidadColumnas nueva."""

    def __init__(
        self,
        i18n: I18nManager,
        visibilidad: VisibilidadColumnas,
        por_defecto: VisibilidadColumnas,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._visibilidad = visibilidad
        self._por_defecto = por_defecto
        self._checks: dict[str, QCheckBox] = {}
        self.setWindowTitle(i18n.t("columnas.titulo"))

        layout = QVBoxLayout(self)
        for columna in visibilidad.columnas:
            check = QCheckBox(columna.etiqueta, self)
            check.setChecked(columna.visible)
            self._checks[columna.clave] = check
            layout.addWidget(check)

        actions = QHBoxLayout()
        self.btn_reset = QPushButton(i18n.t("columnas.restablecer"), self)
        self.btn_reset.clicked.connect(self._reset)
        actions.addWidget(self.btn_reset)
        actions.addStretch(1)
        layout.addLayout(actions)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel, self)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def set_marcada(self, clave: str, marcada: bool) -> None:
        self._checks[clave].setChecked(marcada)

    def visibilidad_seleccionada(self) -> VisibilidadColumnas:
        return self._visibilidad.con_visibles(clave for clave, check in self._checks.items() if check.isChecked())

    def _reset(self) -> None:
        for clave, check in self._checks.items():
            check.setChecked(self._por_defecto.es_visible(clave))
