from __future__ import annotations

import logging

import pytest

from clinicsys.app.application.crud import ControladorEntidad
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.exceptions import ValidationError


def test_agregar_asigna_id_nuevo_y_devuelve_el_registro_guardado(container: AppContainer, make_paciente) -> None:
    entrada = make_paciente(id="p-del-cliente", nombre="  Ana Silva  ")

    guardado = container.pacientes.agregar(entrada)

    assert guardado.id is not None
    assert guardado.id.startswith("p")
    assert guardado.id != "p-del-cliente"
    assert guardado.nombre_completo == "Ana Silva"
    assert container.almacen.pacientes == (guardado,)
    assert entrada.id == "p-del-cliente"


def test_agregar_crece_en_uno_y_los_ids_son_unicos(container: AppContainer, make_medico) -> None:
    ids = {container.medicos.agregar(make_medico(nombre=f"Médico {n}")).id for n in range(5)}

    assert len(ids) == 5
    assert len(container.medicos.listar()) == 5


def test_agregar_invalido_no_modifica_la_coleccion(container: AppContainer, make_paciente) -> None:
    container.pacientes.agregar(make_paciente())
    antes = container.almacen.pacientes

    with pytest.raises(ValidationError):
        container.pacientes.agregar(make_paciente(nombre="   "))

    assert container.almacen.pacientes is antes


def test_actualizar_reemplaza_en_su_posicion(container: AppContainer, make_clinica, assert_expected_actual) -> None:
    primera = container.clinicas.agregar(make_clinica(nombre="Uno"))
    segunda = container.clinicas.agregar(make_clinica(nombre="Dos"))
    tercera = container.clinicas.agregar(make_clinica(nombre="Tres"))
    segunda.nombre = "Dos editada"

    assert container.clinicas.actualizar(segunda) is True

    assert_expected_actual(
        [primera.id, segunda.id, tercera.id],
        [c.id for c in container.almacen.clinicas],
        message="El orden de la colección no debe cambiar al editar.",
    )
    assert container.almacen.clinicas[1] == segunda
    assert len(container.almacen.clinicas) == 3


def test_actualizar_id_desconocido_devuelve_false_y_avisa(
    container: AppContainer, make_clinica, caplog: pytest.LogCaptureFixture
) -> None:
    container.clinicas.agregar(make_clinica())
    antes = container.almacen.clinicas
    fantasma = make_clinica(id="c-no-existe")

    with caplog.at_level(logging.WARNING):
        assert container.clinicas.actualizar(fantasma) is False

    assert container.almacen.clinicas is antes
    assert "crud_actualizar_no_encontrado" in caplog.text


def test_actualizar_invalido_propaga_y_no_cambia_nada(container: AppContainer, make_clinica) -> None:
    guardada = container.clinicas.agregar(make_clinica())
    guardada.cnpj = ""

    with pytest.raises(ValidationError):
        container.clinicas.actualizar(guardada)

    assert container.almacen.clinicas[0].cnpj == "12.345.678/0001-99"


def test_eliminar_quita_solo_el_id_pedido(container: AppContainer, make_paciente) -> None:
    uno = container.pacientes.agregar(make_paciente(nombre="Uno"))
    dos = container.pacientes.agregar(make_paciente(nombre="Dos"))

    assert container.pacientes.eliminar(uno.id) is True
    assert container.pacientes.eliminar(uno.id) is False

    assert [p.id for p in container.almacen.pacientes] == [dos.id]


def test_eliminar_id_desconocido_no_cambia_la_coleccion(container: AppContainer, make_paciente) -> None:
    container.pacientes.agregar(make_paciente())
    antes = container.almacen.pacientes

    assert container.pacientes.eliminar("p-fantasma") is False
    assert container.almacen.pacientes is antes


def test_controladores_no_comparten_estado_entre_tipos(container: AppContainer, make_paciente, make_medico) -> None:
    container.pacientes.agregar(make_paciente())
    container.medicos.agregar(make_medico())

    assert isinstance(container.pacientes, ControladorEntidad)
    assert len(container.almacen.pacientes) == 1
    assert len(container.almacen.medicos) == 1
    assert container.almacen.clinicas == ()
