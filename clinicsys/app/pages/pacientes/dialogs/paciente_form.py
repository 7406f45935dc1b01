from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import QDateEdit, QLineEdit, QWidget

from clinicsys.app.domain import Paciente
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.form_dialog import DireccionFormWidget, FormularioEntidadDialog, required_label


class PacienteFormDialog(FormularioEntidadDialog):
    def __init__(self, i18n: I18nManager, paciente: Optional[Paciente] = None, parent: Optional[QWidget] = None) -> None:
        title = i18n.t("pacientes.editar" if paciente else "pacientes.nuevo")
        super().__init__(i18n, title, parent)
        self._paciente_id: Optional[str] = None

        self.txt_nombre = QLineEdit()
        self.txt_cpf = QLineEdit()
        self.date_fecha_nacimiento = QDateEdit()
        self.date_fecha_nacimiento.setDisplayFormat("dd/MM/yyyy")
        self.date_fecha_nacimiento.setCalendarPopup(True)
        self.date_fecha_nacimiento.setDate(QDate.currentDate())
        self.txt_telefono = QLineEdit()
        self.txt_email = QLineEdit()
        self.direccion = DireccionFormWidget(i18n)

        self.form.addRow(required_label(i18n.t("form.nombre_completo")), self.txt_nombre)
        self.form.addRow(required_label(i18n.t("form.cpf")), self.txt_cpf)
        self.form.addRow(required_label(i18n.t("form.fecha_nacimiento")), self.date_fecha_nacimiento)
        self.form.addRow(i18n.t("form.telefono"), self.txt_telefono)
        self.form.addRow(i18n.t("form.email"), self.txt_email)
        self.form.addRow(i18n.t("form.direccion"), self.direccion)

        if paciente is not None:
            self.set_paciente(paciente)

    def set_paciente(self, paciente: Paciente) -> None:
        self._paciente_id = paciente.id
        self.txt_nombre.setText(paciente.nombre_completo)
        self.txt_cpf.setText(paciente.cpf)
        if paciente.fecha_nacimiento:
            fecha = paciente.fecha_nacimiento
            self.date_fecha_nacimiento.setDate(QDate(fecha.year, fecha.month, fecha.day))
        self.txt_telefono.setText(paciente.telefono)
        self.txt_email.setText(paciente.email)
        self.direccion.set_direccion(paciente.direccion)

    def _construir(self) -> Paciente:
        return Paciente(
            id=self._paciente_id,
            nombre_completo=self.txt_nombre.text(),
            cpf=self.txt_cpf.text(),
            fecha_nacimiento=self.date_fecha_nacimiento.date().toPython(),
            telefono=self.txt_telefono.text(),
            email=self.txt_email.text(),
            direccion=self.direccion.direccion(),
        )

    def _campos_por_error(self) -> dict[str, QWidget]:
        return {
            "nombre_completo": self.txt_nombre,
            "cpf": self.txt_cpf,
            "fecha_nacimiento": self.date_fecha_nacimiento,
            "email": self.txt_email,
        }
