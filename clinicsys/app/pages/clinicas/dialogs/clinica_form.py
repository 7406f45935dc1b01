from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QLineEdit, QWidget

from clinicsys.app.domain import Clinica
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.shared.form_dialog import DireccionFormWidget, FormularioEntidadDialog, required_label


class ClinicaFormDialog(FormularioEntidadDialog):
    def __init__(self, i18n: I18nManager, clinica: Optional[Clinica] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(i18n, i18n.t("clinicas.editar" if clinica else "clinicas.nuevo"), parent)
        self._clinica_id: Optional[str] = None

        self.txt_nombre = QLineEdit()
        self.txt_cnpj = QLineEdit()
        self.txt_telefono = QLineEdit()
        self.txt_email = QLineEdit()
        self.direccion = DireccionFormWidget(i18n)

        self.form.addRow(required_label(i18n.t("form.nombre")), self.txt_nombre)
        self.form.addRow(required_label(i18n.t("form.cnpj")), self.txt_cnpj)
        self.form.addRow(i18n.t("form.telefono"), self.txt_telefono)
        self.form.addRow(i18n.t("form.email"), self.txt_email)
        self.form.addRow(i18n.t("form.direccion"), self.direccion)

        if clinica is not None:
            self.set_clinica(clinica)

    def set_clinica(self, clinica: Clinica) -> None:
        self._clinica_id = clinica.id
        self.txt_nombre.setText(clinica.nombre)
        self.txt_cnpj.setText(clinica.cnpj)
        self.txt_telefono.setText(clinica.telefono)
        self.txt_email.setText(clinica.email)
        self.direccion.set_direccion(clinica.direccion)

    def _construir(self) -> Clinica:
        return Clinica(
            id=self._clinica_id,
            nombre=self.txt_nombre.text(),
            cnpj=self.txt_cnpj.text(),
            telefono=self.txt_telefono.text(),
            email=self.txt_email.text(),
            direccion=self.direccion.direccion(),
        )

    def _campos_por_error(self) -> dict[str, QWidget]:
        return {"nombre": self.txt_nombre, "cnpj": self.txt_cnpj, "email": self.txt_email}
