from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
try:
    from PySide6.QtWidgets import QApplication, QDialog
except ImportError as exc:  # pragma: no cover - depende de librerías del sistema
    pytest.skip(f"PySide6 no disponible: {exc}", allow_module_level=True)

from clinicsys.app.application.listados import LISTADO_PACIENTES
from clinicsys.app.container import AppContainer
from clinicsys.app.domain import Disponibilidad
from clinicsys.app.domain.enums import DiaSemana, EstadoCita
from clinicsys.app.i18n import I18nManager
from clinicsys.app.pages.citas.dialogs.cita_form import CitaFormDialog
from clinicsys.app.pages.clinicas.dialogs.clinica_form import ClinicaFormDialog
from clinicsys.app.pages.medicos.dialogs.medico_form import MedicoFormDialog
from clinicsys.app.pages.shared.selector_columnas_dialog import SelectorColumnasDialog


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


def test_selector_de_columnas_y_restablecer(qapp: QApplication) -> None:
    del qapp
    por_defecto = LISTADO_PACIENTES.visibilidad_inicial()
    dialogo = SelectorColumnasDialog(I18nManager(), por_defecto.con_visibles(["nombre"]), por_defecto)

    dialogo.set_marcada("cpf", True)
    assert dialogo.visibilidad_seleccionada().visibles() == ("nombre", "cpf")

    dialogo.btn_reset.click()
    assert dialogo.visibilidad_seleccionada() == por_defecto
    dialogo.close()


def test_formulario_de_medico_edita_franjas(qapp: QApplication, make_medico) -> None:
    del qapp
    medico = make_medico(id="d9", disponibilidad=[Disponibilidad(DiaSemana.MARTES, "09:00", "17:00")])
    dialogo = MedicoFormDialog(I18nManager(), medico)

    dialogo.disponibilidad.btn_agregar.click()
    dialogo.accept()

    resultado = dialogo.resultado()
    assert dialogo.result() == QDialog.Accepted
    assert resultado.id == "d9"
    assert [f.to_dict() for f in resultado.disponibilidad] == [
        {"dia": "Terça-feira", "hora_inicio": "09:00", "hora_fin": "17:00"},
        {"dia": "Segunda-feira", "hora_inicio": "08:00", "hora_fin": "12:00"},
    ]


def test_formulario_de_clinica_conserva_el_id(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    clinica = container_demo.almacen.clinicas[0]
    dialogo = ClinicaFormDialog(I18nManager(), clinica)
    dialogo.txt_nombre.setText("Clínica Renomeada")

    dialogo.accept()

    assert dialogo.resultado().id == clinica.id
    assert dialogo.resultado().nombre == "Clínica Renomeada"
    assert dialogo.resultado().direccion.ciudad == "São Paulo"


def test_formulario_de_cita_nueva_y_existente(qapp: QApplication, container_demo: AppContainer) -> None:
    del qapp
    almacen = container_demo.almacen
    nueva = CitaFormDialog(I18nManager(), almacen.pacientes, almacen.medicos)

    assert not nueva.cbo_estado.isVisibleTo(nueva)
    nueva.cbo_paciente.setCurrentIndex(nueva.cbo_paciente.findData("p1"))
    nueva.cbo_medico.setCurrentIndex(nueva.cbo_medico.findData("d2"))
    nueva.accept()
    assert nueva.resultado().estado == EstadoCita.AGENDADA
    assert nueva.resultado().medico_id == "d2"

    cita = almacen.citas[2]
    edicion = CitaFormDialog(I18nManager(), almacen.pacientes, almacen.medicos, cita)
    assert edicion.cbo_estado.isVisibleTo(edicion)
    assert edicion.cbo_estado.currentData() == EstadoCita.REALIZADA
    edicion.cbo_estado.setCurrentIndex(edicion.cbo_estado.findData(EstadoCita.CANCELADA))
    edicion.accept()
    assert edicion.resultado().estado == EstadoCita.CANCELADA
    assert edicion.resultado().id == cita.id


def test_formulario_de_cita_con_referencia_colgante(qapp: QApplication, container_demo: AppContainer, make_cita) -> None:
    del qapp
    almacen = container_demo.almacen
    cita = make_cita(id="a9", paciente_id="p-borrado", medico_id="d1")
    dialogo = CitaFormDialog(I18nManager(), almacen.pacientes, almacen.medicos, cita)

    assert dialogo.cbo_paciente.currentText() == "N/A"
    assert dialogo.cbo_paciente.currentData() == "p-borrado"
    dialogo.close()
