from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QWidget

from clinicsys.app.application.listados import LISTADO_PACIENTES, DefinicionListado
from clinicsys.app.container import AppContainer
from clinicsys.app.domain import Paciente
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.pacientes.dialogs.paciente_form import PacienteFormDialog
from clinicsys.app.pages.shared.listado_page import PageListadoCrud


class PagePacientes(PageListadoCrud):
    prefijo_i18n = "pacientes"
    tipo = TipoEntidad.PACIENTE

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(container, i18n, container.pacientes, parent)

    def _definicion(self) -> DefinicionListado:
        return LISTADO_PACIENTES

    def _abrir_formulario(self, entidad: Optional[Paciente]) -> Optional[Paciente]:
        dialog = PacienteFormDialog(self._i18n, entidad, self)
        if dialog.exec() != QDialog.Accepted:
            return None
        return dialog.resultado()
