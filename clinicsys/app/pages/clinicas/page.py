from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QWidget

from clinicsys.app.application.listados import LISTADO_CLINICAS, DefinicionListado
from clinicsys.app.container import AppContainer
from clinicsys.app.domain import Clinica
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.clinicas.dialogs.clinica_form import ClinicaFormDialog
from clinicsys.app.pages.shared.listado_page import PageListadoCrud


class PageClinicas(PageListadoCrud):
    prefijo_i18n = "clinicas"
    tipo = TipoEntidad.CLINICA

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(container, i18n, container.clinicas, parent)

    def _definicion(self) -> DefinicionListado:
        return LISTADO_CLINICAS

    def _abrir_formulario(self, entidad: Optional[Clinica]) -> Optional[Clinica]:
        dialog = ClinicaFormDialog(self._i18n, entidad, self)
        if dialog.exec() != QDialog.Accepted:
            return None
        return dialog.resultado()
