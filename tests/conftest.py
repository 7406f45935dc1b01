from __future__ import annotations

import difflib
import pprint
from datetime import date, datetime, timezone
from typing import Any

import pytest

from clinicsys.app.application.almacen import AlmacenEntidades
from clinicsys.app.application.identificadores import GeneradorIds
from clinicsys.app.container import AppContainer, build_container
from clinicsys.app.domain import Cita, Clinica, Direccion, Medico, Paciente


AHORA = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


class RelojNs:
    """Reloj de nanosegundos controlable: devuelve siempre el mismo valor salvo que se avance."""

    def __init__(self, inicio: int = 1_700_000_000_000_000_000) -> None:
        self.valor = inicio

    def __call__(self) -> int:
        return self.valor


@pytest.fixture()
def ahora() -> datetime:
    return AHORA


@pytest.fixture()
def reloj_ns() -> RelojNs:
    return RelojNs()


@pytest.fixture()
def almacen() -> AlmacenEntidades:
    return AlmacenEntidades()


@pytest.fixture()
def container(reloj_ns: RelojNs) -> AppContainer:
    return build_container(cargar_demo=False, reloj=lambda: AHORA, ids=GeneradorIds(reloj_ns))


@pytest.fixture()
def container_demo() -> AppContainer:
    return build_container(cargar_demo=True, reloj=lambda: AHORA)


@pytest.fixture()
def assert_expected_actual():
    def _assert(expected: Any, actual: Any, *, message: str) -> None:
        expected_str = pprint.pformat(expected, width=120)
        actual_str = pprint.pformat(actual, width=120)
        diff = "\n".join(
            difflib.unified_diff(
                expected_str.splitlines(),
                actual_str.splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        assert expected == actual, (
            f"{message}\nExpected:\n{expected_str}\nActual:\n{actual_str}\nDiff:\n{diff}"
        )

    return _assert


def _make_paciente(nombre: str = "Ana Silva", cpf: str = "111.222.333-44", **kwargs: Any) -> Paciente:
    datos: dict[str, Any] = {
        "nombre_completo": nombre,
        "cpf": cpf,
        "telefono": "(11) 98765-4321",
        "email": "ana@example.com",
        "fecha_nacimiento": date(1985, 5, 20),
        "direccion": Direccion("01000-000", "Rua A", "123", None, "Centro", "São Paulo", "SP"),
    }
    datos.update(kwargs)
    return Paciente(**datos)


def _make_medico(nombre: str = "Dr. Carlos Ferreira", especialidad: str = "Cardiologia", **kwargs: Any) -> Medico:
    datos: dict[str, Any] = {
        "nombre_completo": nombre,
        "crm": "12345-SP",
        "especialidad": especialidad,
        "telefono": "(11) 99999-8888",
        "email": "carlos@clinic.com",
    }
    datos.update(kwargs)
    return Medico(**datos)


def _make_clinica(nombre: str = "Clínica Saúde Plena", cnpj: str = "12.345.678/0001-99", **kwargs: Any) -> Clinica:
    return Clinica(nombre=nombre, cnpj=cnpj, **kwargs)


def _make_cita(paciente_id: str = "p1", medico_id: str = "d1", fecha_hora: datetime = AHORA, **kwargs: Any) -> Cita:
    return Cita(paciente_id=paciente_id, medico_id=medico_id, fecha_hora=fecha_hora, **kwargs)


@pytest.fixture()
def make_paciente():
    return _make_paciente


@pytest.fixture()
def make_medico():
    return _make_medico


@pytest.fixture()
def make_clinica():
    return _make_clinica


@pytest.fixture()
def make_cita():
    return _make_cita
