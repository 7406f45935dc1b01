from __future__ import annotations

from typing import Dict, List

from clinicsys.app.container import AppContainer
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.page_def import PageDef


class PageRegistry:
    """Registro in-memory de PageDef.

    Cada página registra su PageDef desde su propio register.py; MainWindow
    consume la lista en orden de inserción y crea los widgets vía factory().
    """

    def __init__(self) -> None:
        self._pages: Dict[str, PageDef] = {}

    def register(self, page: PageDef) -> None:
        if page.key in self._pages:
            raise ValueError(f"Página duplicada: {page.key}")
        self._pages[page.key] = page

    def get(self, key: str) -> PageDef:
        return self._pages[key]

    def list(self) -> List[PageDef]:
        return list(self._pages.values())


def register_pages(registry: PageRegistry, container: AppContainer, i18n: I18nManager) -> None:
    from clinicsys.app.pages.ajustes.register import register as register_ajustes
    from clinicsys.app.pages.citas.register import register as register_citas
    from clinicsys.app.pages.clinicas.register import register as register_clinicas
    from clinicsys.app.pages.dashboard.register import register as register_dashboard
    from clinicsys.app.pages.medicos.register import register as register_medicos
    from clinicsys.app.pages.pacientes.register import register as register_pacientes
    from clinicsys.app.pages.perfil.register import register as register_perfil
    from clinicsys.app.pages.sobre.register import register as register_sobre

    register_dashboard(registry, container, i18n)
    register_pacientes(registry, container, i18n)
    register_medicos(registry, container, i18n)
    register_clinicas(registry, container, i18n)
    register_citas(registry, container, i18n)
    register_perfil(registry, container, i18n)
    register_sobre(registry, container, i18n)
    register_ajustes(registry, container, i18n)


def get_pages(container: AppContainer, i18n: I18nManager) -> List[PageDef]:
    reg = PageRegistry()
    register_pages(reg, container, i18n)
    return reg.list()
