from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLineEdit, QWidget

from clinicsys.app.domain import Direccion
from clinicsys.app.domain.exceptions import ValidationError
from clinicsys.app.i18n import I18nManager
from clinicsys.app.ui.error_presenter import present_error


def required_label(text: str) -> str:
    return f"{text} *"


class FormularioEntidadDialog(QDialog):
    """
    Base de los formularios de alta/edición.

    `get_data()` construye y valida la entidad; si falla muestra el aviso y
    devuelve None. Guardar no cierra el diálogo mientras haya errores.
    """

    def __init__(self, i18n: I18nManager, title: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._i18n = i18n
        self._resultado: Optional[Any] = None
        self.setWindowTitle(title)
        self.form = QFormLayout()

        self.buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.buttons.button(QDialogButtonBox.Save).setText(i18n.t("comun.guardar"))
        self.buttons.button(QDialogButtonBox.Cancel).setText(i18n.t("comun.cancelar"))
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        layout = QFormLayout(self)
        layout.addRow(self.form)
        layout.addRow(self.buttons)

    def _construir(self) -> Any:
        raise NotImplementedError

    def _campos_por_error(self) -> dict[str, QWidget]:
        return {}

    def get_data(self) -> Optional[Any]:
        try:
            entidad = self._construir()
            entidad.validar()
        except ValidationError as exc:
            self._highlight_for_error(exc)
            present_error(self, exc, i18n=self._i18n)
            return None
        return entidad

    def accept(self) -> None:
        entidad = self.get_data()
        if entidad is None:
            return
        self._resultado = entidad
        super().accept()

    def resultado(self) -> Optional[Any]:
        return self._resultado

    def _mark_invalid(self, widget: QWidget) -> None:
        widget.setStyleSheet("border: 1px solid #d9534f;")
        QTimer.singleShot(2500, lambda: widget.setStyleSheet(""))

    def _highlight_for_error(self, exc: Exception) -> None:
        message = str(exc).lower()
        for campo, widget in self._campos_por_error().items():
            if campo in message:
                self._mark_invalid(widget)
                return


class DireccionFormWidget(QWidget):
    """Subformulario de dirección postal compartido por pacientes y clínicas."""

    def __init__(self, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.txt_cep = QLineEdit()
        self.txt_calle = QLineEdit()
        self.txt_numero = QLineEdit()
        self.txt_complemento = QLineEdit()
        self.txt_barrio = QLineEdit()
        self.txt_ciudad = QLineEdit()
        self.txt_estado = QLineEdit()
        self.txt_estado.setMaxLength(2)

        form = QFormLayout(self)
        form.setContentsMargins(0, 0, 0, 0)
        form.addRow(i18n.t("form.cep"), self.txt_cep)
        form.addRow(i18n.t("form.calle"), self.txt_calle)
        form.addRow(i18n.t("form.numero"), self.txt_numero)
        form.addRow(i18n.t("form.complemento"), self.txt_complemento)
        form.addRow(i18n.t("form.barrio"), self.txt_barrio)
        form.addRow(i18n.t("form.ciudad"), self.txt_ciudad)
        form.addRow(i18n.t("form.estado_uf"), self.txt_estado)

    def set_direccion(self, direccion: Direccion) -> None:
        self.txt_cep.setText(direccion.cep)
        self.txt_calle.setText(direccion.calle)
        self.txt_numero.setText(direccion.numero)
        self.txt_complemento.setText(direccion.complemento or "")
        self.txt_barrio.setText(direccion.barrio)
        self.txt_ciudad.setText(direccion.ciudad)
        self.txt_estado.setText(direccion.estado)

    def direccion(self) -> Direccion:
        return Direccion(
            cep=self.txt_cep.text(),
            calle=self.txt_calle.text(),
            numero=self.txt_numero.text(),
            complemento=self.txt_complemento.text() or None,
            barrio=self.txt_barrio.text(),
            ciudad=self.txt_ciudad.text(),
            estado=self.txt_estado.text().upper(),
        )
