from __future__ import annotations

from clinicsys.app.application.sesion import ServicioAjustes
from clinicsys.app.domain.enums import Tema


def test_valores_por_defecto() -> None:
    ajustes = ServicioAjustes()

    assert ajustes.tema == Tema.CLARO
    assert ajustes.notificaciones is True


def test_cambios_notifican_solo_si_cambia_el_valor() -> None:
    ajustes = ServicioAjustes()
    avisos: list[str] = []
    ajustes.subscribe(lambda: avisos.append(ajustes.tema.value))

    ajustes.set_tema(Tema.OSCURO)
    ajustes.set_tema(Tema.OSCURO)
    ajustes.set_notificaciones(True)
    ajustes.set_notificaciones(False)

    assert avisos == ["dark", "dark"]
    assert ajustes.notificaciones is False


def test_set_tema_acepta_el_valor_textual() -> None:
    ajustes = ServicioAjustes()

    ajustes.set_tema("dark")

    assert ajustes.tema is Tema.OSCURO


def test_unsubscribe_corta_los_avisos() -> None:
    ajustes = ServicioAjustes()
    avisos: list[int] = []

    def _listener() -> None:
        avisos.append(1)

    ajustes.subscribe(_listener)
    ajustes.unsubscribe(_listener)
    ajustes.set_tema(Tema.OSCURO)

    assert avisos == []
