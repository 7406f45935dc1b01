from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QTime
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QTimeEdit,
    QVBoxLayout,
    QWidget,
)

from clinicsys.app.domain import Disponibilidad, Medico
from clinicsys.app.domain.enums import DiaSemana
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.form_dialog import FormularioEntidadDialog, required_label


class _FranjaRow(QWidget):
    def __init__(self, i18n: I18nManager, franja: Disponibilidad, on_remove, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.cbo_dia = QComboBox()
        for dia in DiaSemana:
            self.cbo_dia.addItem(dia.value, dia)
        self.cbo_dia.setCurrentIndex(self.cbo_dia.findData(franja.dia))
        self.time_inicio = QTimeEdit(QTime.fromString(franja.hora_inicio, "HH:mm"))
        self.time_fin = QTimeEdit(QTime.fromString(franja.hora_fin, "HH:mm"))
        for editor in (self.time_inicio, self.time_fin):
            editor.setDisplayFormat("HH:mm")
        btn_quitar = QPushButton(i18n.t("form.disponibilidad.quitar"))
        btn_quitar.clicked.connect(lambda: on_remove(self))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.cbo_dia, 1)
        layout.addWidget(self.time_inicio)
        layout.addWidget(self.time_fin)
        layout.addWidget(btn_quitar)

    def franja(self) -> Disponibilidad:
        return Disponibilidad(
            dia=self.cbo_dia.currentData(),
            hora_inicio=self.time_inicio.time().toString("HH:mm"),
            hora_fin=self.time_fin.time().toString("HH:mm"),
        )


class DisponibilidadEditor(QWidget):
    """Lista editable de franjas semanales (sin comprobar solapes)."""

    def __init__(self, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._i18n = i18n
        self._rows: list[_FranjaRow] = []
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self.btn_agregar = QPushButton(i18n.t("form.disponibilidad.agregar"))
        self.btn_agregar.clicked.connect(lambda: self.agregar(Disponibilidad()))
        self._layout.addWidget(self.btn_agregar)

    def agregar(self, franja: Disponibilidad) -> None:
        row = _FranjaRow(self._i18n, franja, self._quitar, self)
        self._rows.append(row)
        self._layout.insertWidget(self._layout.count() - 1, row)

    def set_franjas(self, franjas: list[Disponibilidad]) -> None:
        for row in list(self._rows):
            self._quitar(row)
        for franja in franjas:
            self.agregar(franja)

    def franjas(self) -> list[Disponibilidad]:
        return [row.franja() for row in self._rows]

    def _quitar(self, row: _FranjaRow) -> None:
        self._rows.remove(row)
        self._layout.removeWidget(row)
        row.deleteLater()


class MedicoFormDialog(FormularioEntidadDialog):
    def __init__(self, i18n: I18nManager, medico: Optional[Medico] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(i18n, i18n.t("medicos.editar" if medico else "medicos.nuevo"), parent)
        self._medico_id: Optional[str] = None

        self.txt_nombre = QLineEdit()
        self.txt_crm = QLineEdit()
        self.txt_especialidad = QLineEdit()
        self.txt_telefono = QLineEdit()
        self.txt_email = QLineEdit()
        self.disponibilidad = DisponibilidadEditor(i18n)

        self.form.addRow(required_label(i18n.t("form.nombre_completo")), self.txt_nombre)
        self.form.addRow(required_label(i18n.t("form.crm")), self.txt_crm)
        self.form.addRow(required_label(i18n.t("form.especialidad")), self.txt_especialidad)
        self.form.addRow(i18n.t("form.telefono"), self.txt_telefono)
        self.form.addRow(i18n.t("form.email"), self.txt_email)
        self.form.addRow(i18n.t("form.disponibilidad"), self.disponibilidad)

        if medico is not None:
            self.set_medico(medico)

    def set_medico(self, medico: Medico) -> None:
        self._medico_id = medico.id
        self.txt_nombre.setText(medico.nombre_completo)
        self.txt_crm.setText(medico.crm)
        self.txt_especialidad.setText(medico.especialidad)
        self.txt_telefono.setText(medico.telefono)
        self.txt_email.setText(medico.email)
        self.disponibilidad.set_franjas(list(medico.disponibilidad))

    def _construir(self) -> Medico:
        return Medico(
            id=self._medico_id,
            nombre_completo=self.txt_nombre.text(),
            crm=self.txt_crm.text(),
            especialidad=self.txt_especialidad.text(),
            telefono=self.txt_telefono.text(),
            email=self.txt_email.text(),
            disponibilidad=self.disponibilidad.franjas(),
        )

    def _campos_por_error(self) -> dict[str, QWidget]:
        return {
            "nombre_completo": self.txt_nombre,
            "crm": self.txt_crm,
            "especialidad": self.txt_especialidad,
            "email": self.txt_email,
        }
