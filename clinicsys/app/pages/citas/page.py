from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QWidget

from clinicsys.app.application.listados import DefinicionListado, listado_citas, resolutor_para
from clinicsys.app.container import AppContainer
from clinicsys.app.domain import Cita
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.citas.dialogs.cita_form import CitaFormDialog
from clinicsys.app.pages.shared.listado_page import PageListadoCrud


class PageCitas(PageListadoCrud):
    """Agenda completa: más recientes primero, búsqueda por nombre de paciente o médico."""

    prefijo_i18n = "citas"
    tipo = TipoEntidad.CITA

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(container, i18n, container.citas, parent)

    def _definicion(self) -> DefinicionListado:
        almacen = self._container.almacen
        return listado_citas(resolutor_para(almacen.pacientes, almacen.medicos))

    def _abrir_formulario(self, entidad: Optional[Cita]) -> Optional[Cita]:
        almacen = self._container.almacen
        dialog = CitaFormDialog(self._i18n, almacen.pacientes, almacen.medicos, entidad, self)
        if dialog.exec() != QDialog.Accepted:
            return None
        return dialog.resultado()
