from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import EstadoCita
from clinicsys.app.domain.exceptions import ValidationError


def test_alta_de_cita_siempre_nace_agendada(container: AppContainer, make_cita) -> None:
    guardada = container.citas.agregar(make_cita(estado=EstadoCita.CANCELADA))

    assert guardada.estado == EstadoCita.AGENDADA
    assert guardada.id.startswith("a")


def test_cita_admite_cualquier_transicion_de_estado(container: AppContainer, make_cita) -> None:
    cita = container.citas.agregar(make_cita())

    for estado in (EstadoCita.REALIZADA, EstadoCita.CANCELADA, EstadoCita.AGENDADA):
        cita.estado = estado
        assert container.citas.actualizar(cita) is True
        assert container.almacen.citas[0].estado == estado


def test_cita_guarda_la_fecha_en_utc(container: AppContainer, make_cita) -> None:
    local = datetime(2024, 6, 11, 9, 30, tzinfo=timezone(timedelta(hours=-3)))

    guardada = container.citas.agregar(make_cita(fecha_hora=local))

    assert guardada.fecha_hora == datetime(2024, 6, 11, 12, 30, tzinfo=timezone.utc)
    assert guardada.fecha_hora.tzinfo == timezone.utc


def test_cita_sin_referencias_es_invalida(container: AppContainer, make_cita) -> None:
    with pytest.raises(ValidationError):
        container.citas.agregar(make_cita(paciente_id=""))
    with pytest.raises(ValidationError):
        container.citas.agregar(make_cita(medico_id="  "))
    with pytest.raises(ValidationError):
        container.citas.agregar(make_cita(fecha_hora=None))

    assert container.almacen.citas == ()


def test_cita_admite_referencias_colgantes(container: AppContainer, make_cita) -> None:
    guardada = container.citas.agregar(make_cita(paciente_id="p-borrado", medico_id="d-borrado"))

    assert guardada.paciente_id == "p-borrado"


def test_borrar_paciente_no_borra_sus_citas(container: AppContainer, make_paciente, make_cita) -> None:
    paciente = container.pacientes.agregar(make_paciente())
    container.citas.agregar(make_cita(paciente_id=paciente.id))

    container.pacientes.eliminar(paciente.id)

    assert len(container.almacen.citas) == 1
    assert container.almacen.citas[0].paciente_id == paciente.id
