from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QDialog, QWidget

from clinicsys.app.application.listados import LISTADO_MEDICOS, DefinicionListado
from clinicsys.app.container import AppContainer
from clinicsys.app.domain import Medico
from clinicsys.app.domain.enums import TipoEntidad
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.medicos.dialogs.medico_form import MedicoFormDialog
from clinicsys.app.pages.shared.listado_page import PageListadoCrud


class PageMedicos(PageListadoCrud):
    prefijo_i18n = "medicos"
    tipo = TipoEntidad.MEDICO

    def __init__(self, container: AppContainer, i18n: I18nManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(container, i18n, container.medicos, parent)

    def _definicion(self) -> DefinicionListado:
        return LISTADO_MEDICOS

    def _abrir_formulario(self, entidad: Optional[Medico]) -> Optional[Medico]:
        dialog = MedicoFormDialog(self._i18n, entidad, self)
        if dialog.exec() != QDialog.Accepted:
            return None
        return dialog.resultado()
