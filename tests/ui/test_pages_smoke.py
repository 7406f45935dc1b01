from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import timedelta

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
try:
    from PySide6.QtWidgets import QApplication, QMessageBox
except ImportError as exc:  # pragma: no cover - depende de librerías del sistema
    pytest.skip(f"PySide6 no disponible: {exc}", allow_module_level=True)

from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import Tema
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.ajustes.page import PageAjustes
from clinicsys.app.pages.citas.page import PageCitas
from clinicsys.app.pages.clinicas.page import PageClinicas
from clinicsys.app.pages.dashboard.page import PageDashboard
from clinicsys.app.pages.medicos.page import PageMedicos
from clinicsys.app.pages.pacientes.dialogs.paciente_form import PacienteFormDialog
from clinicsys.app.pages.pacientes.page import PagePacientes
from clinicsys.app.pages.perfil.page import PagePerfil
from clinicsys.app.pages.shared import listado_page


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def mensajes(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    capturados: list[str] = []
    for nombre in ("warning", "information", "critical"):
        monkeypatch.setattr(QMessageBox, nombre, lambda _parent, _title, text, **_: capturados.append(text))
    return capturados


def test_listado_de_pacientes_muestra_vacio_y_contador(qapp: QApplication, container: AppContainer) -> None:
    del qapp
    i18n = I18nManager()
    page = PagePacientes(container, i18n)

    assert page.tabla.esta_vacio()
    assert page.tabla.lbl_vacio.text() == i18n.t("pacientes.vacio")
    assert page.filtros.lbl_contador.text() == "Mostrando 0 de 0"
    page.dispose()


def test_alta_desde_la_pagina_refresca_la_tabla(
    qapp: QApplication, container: AppContainer, make_paciente, mensajes: list[str]
) -> None:
    del qapp
    page = PagePacientes(container, I18nManager())
    page._abrir_formulario = lambda _entidad: make_paciente()

    page.btn_nuevo.click()

    assert mensajes == []
    assert not page.tabla.esta_vacio()
    assert page.tabla.table.rowCount() == 1
    assert page.listado_actual().valor(0, "nombre") == "Ana Silva"
    page.dispose()


def test_busqueda_y_columnas_en_medicos(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    page = PageMedicos(container_demo, I18nManager())

    page.filtros.txt_busqueda.setText("derma")
    page._refresh()
    page.set_visibilidad(page.visibilidad().con_visibles(["nombre", "acciones"]))

    listado = page.listado_actual()
    assert [f.id for f in listado.filas] == ["d2"]
    assert listado.claves() == ("nombre", "acciones")
    assert page.tabla.table.columnCount() == 2
    page.dispose()


def test_eliminar_con_confirmacion(
    qapp: QApplication, container_demo: AppContainer, monkeypatch: pytest.MonkeyPatch
) -> None:
    del qapp
    page = PageClinicas(container_demo, I18nManager())
    respuestas = iter([False, True])
    monkeypatch.setattr(listado_page, "confirm_delete", lambda *_args, **_kwargs: next(respuestas))

    page._on_eliminar("c1")
    assert len(container_demo.almacen.clinicas) == 2

    page._on_eliminar("c1")
    assert [c.id for c in container_demo.almacen.clinicas] == ["c2"]
    assert page.tabla.table.rowCount() == 1
    page.dispose()


def test_editar_registro_inexistente_avisa(
    qapp: QApplication, container_demo: AppContainer, mensajes: list[str]
) -> None:
    del qapp
    i18n = I18nManager()
    page = PageClinicas(container_demo, i18n)

    page._on_editar("c-fantasma")

    assert mensajes == [i18n.t("comun.no_encontrado")]
    page.dispose()


def test_eliminar_registro_inexistente_avisa(
    qapp: QApplication, container_demo: AppContainer, mensajes: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    del qapp
    i18n = I18nManager()
    page = PageClinicas(container_demo, i18n)
    monkeypatch.setattr(listado_page, "confirm_delete", lambda *_args, **_kwargs: True)

    page._on_eliminar("c-fantasma")

    assert mensajes == [i18n.t("comun.no_encontrado")]
    assert len(container_demo.almacen.clinicas) == 2
    page.dispose()


def test_formulario_invalido_no_se_cierra(qapp: QApplication, mensajes: list[str]) -> None:
    del qapp
    dialogo = PacienteFormDialog(I18nManager())

    dialogo.accept()

    assert dialogo.resultado() is None
    assert len(mensajes) == 1
    dialogo.close()


def test_citas_muestran_nombres_y_orden(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    page = PageCitas(container_demo, I18nManager())

    listado = page.listado_actual()

    assert [f.id for f in listado.filas] == ["a2", "a1", "a3"]
    assert listado.valor(0, "paciente") == "Bruno Costa"
    container_demo.pacientes.eliminar("p2")
    assert page.listado_actual().valor(0, "paciente") == "N/A"
    page.dispose()


def test_dashboard_cuenta_y_se_actualiza(
    qapp: QApplication, container_demo: AppContainer, make_cita
) -> None:
    del qapp
    page = PageDashboard(container_demo, I18nManager())

    assert page.card_pacientes.value_text() == "2"
    assert page.card_proximas.value_text() == "2"
    assert [f.id for f in page.listado.filas] == ["a1", "a2"]

    container_demo.citas.agregar(make_cita(fecha_hora=container_demo.ahora() + timedelta(hours=1)))

    assert page.card_proximas.value_text() == "3"
    page.dispose()


def test_perfil_guarda_y_cambia_password(
    qapp: QApplication, container: AppContainer, mensajes: list[str]
) -> None:
    del qapp
    i18n = I18nManager()
    container.auth.registrar("Admin", "admin@clinicsys.com", "secreto")
    page = PagePerfil(container, i18n)

    assert page.txt_email.text() == "admin@clinicsys.com"
    page.txt_nombre.setText("Admin Editado")
    page.btn_guardar.click()
    assert container.auth.nombre_visible() == "Admin Editado"

    page.txt_actual.setText("mal")
    page.txt_nueva.setText("nueva")
    page.txt_confirmar.setText("nueva")
    page.btn_password.click()
    assert mensajes[-1] == i18n.t("perfil.password_incorrecta")

    page.txt_actual.setText("secreto")
    page.btn_password.click()
    assert mensajes[-1] == i18n.t("perfil.password_ok")
    assert page.txt_actual.text() == ""
    page.dispose()


def test_ajustes_cambian_tema_e_idioma(qapp: QApplication, container: AppContainer) -> None:
    del qapp
    i18n = I18nManager()
    page = PageAjustes(container, i18n)

    page.chk_oscuro.setChecked(True)
    page.chk_notificaciones.setChecked(False)
    page.cbo_idioma.setCurrentIndex(page.cbo_idioma.findData("es"))

    assert container.ajustes.tema == Tema.OSCURO
    assert container.ajustes.notificaciones is False
    assert i18n.language == "es"
    assert page.chk_oscuro.text() == i18n.t("ajustes.modo_oscuro")
    page.dispose()
