from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
try:
    from PySide6.QtWidgets import QApplication, QMessageBox
except ImportError as exc:  # pragma: no cover - depende de librerías del sistema
    pytest.skip(f"PySide6 no disponible: {exc}", allow_module_level=True)

from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import Tema
from clinicsys.app.i18n import I18nManager
from clinicsys.app.ui.main_window import MainWindow
from clinicsys.app.ui.theme import load_qss


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


def test_ventana_arranca_en_el_panel_con_saludo(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    container_demo.auth.registrar("Admin Clínica", "admin@clinicsys.com", "secreto")
    window = MainWindow(container_demo, I18nManager())

    assert window.current_key() == "dashboard"
    assert window.sidebar.count() == 8
    assert window.lbl_saludo.text() == "Olá, Admin Clínica"
    assert window.lbl_titulo.text() == "Dashboard"
    window.close()


def test_navegacion_crea_paginas_bajo_demanda(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    window = MainWindow(container_demo, I18nManager())

    assert window.stack.count() == 1
    window.navigate("citas")
    window.navigate("citas")

    assert window.stack.count() == 2
    assert window.current_key() == "citas"
    assert window.lbl_titulo.text() == "Agendamentos"
    window.close()


def test_idioma_y_tema_se_aplican_en_caliente(qapp: QApplication, container_demo: AppContainer) -> None:
    i18n = I18nManager()
    window = MainWindow(container_demo, i18n)

    i18n.set_language("es")
    container_demo.ajustes.set_tema(Tema.OSCURO)

    assert window.sidebar.item(0).text() == "Panel"
    assert qapp.styleSheet() == load_qss(Tema.OSCURO)
    window.close()


def test_logout_cierra_sesion_y_llama_al_callback(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    llamadas: list[bool] = []
    container_demo.auth.registrar("Admin", "admin@clinicsys.com", "secreto")
    window = MainWindow(container_demo, I18nManager(), on_logout=lambda: llamadas.append(True))
    window.show()

    window.btn_logout.click()

    assert llamadas == [True]
    assert not container_demo.auth.autenticado
    assert not window.isVisible()


def test_saludo_sigue_al_perfil_y_a_la_sesion(
    qapp: QApplication, container_demo: AppContainer, monkeypatch: pytest.MonkeyPatch
) -> None:
    del qapp
    monkeypatch.setattr(QMessageBox, "information", lambda *_args, **_kwargs: None)
    container_demo.auth.registrar("Ana Antiga", "ana@clinicsys.com", "secreto")
    window = MainWindow(container_demo, I18nManager())
    window.navigate("perfil")
    perfil = window.stack.currentWidget()

    perfil.txt_nombre.setText("Ana Nova")
    perfil.btn_guardar.click()

    assert window.lbl_saludo.text() == "Olá, Ana Nova"
    container_demo.auth.logout()
    assert window.lbl_saludo.text() == "Olá, "
    container_demo.auth.login("ana@clinicsys.com", "secreto")
    assert window.lbl_saludo.text() == "Olá, Ana Nova"
    window.close()


def test_cerrar_la_ventana_deja_de_escuchar_la_sesion(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    container_demo.auth.registrar("Ana", "ana@clinicsys.com", "secreto")
    window = MainWindow(container_demo, I18nManager())
    window._dispose_pages()

    container_demo.auth.actualizar_perfil("Otra", "ana@clinicsys.com")

    assert window.lbl_saludo.text() == "Olá, Ana"
