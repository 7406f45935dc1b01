from __future__ import annotations

from clinicsys.app.container import AppContainer
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.citas.page import PageCitas
from clinicsys.app.pages.page_def import PageDef
from clinicsys.app.pages.pages_registry import PageRegistry


def register(registry: PageRegistry, container: AppContainer, i18n: I18nManager) -> None:
    registry.register(
        PageDef(
            key="citas",
            title_key="nav.citas",
            factory=lambda: PageCitas(container, i18n),
        )
    )
