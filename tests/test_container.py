from __future__ import annotations

from datetime import datetime

from clinicsys.app.container import AppContainer, build_container
from clinicsys.app.domain.enums import EstadoCita, TipoEntidad


def test_container_sin_demo_arranca_vacio(container: AppContainer) -> None:
    for tipo in TipoEntidad:
        assert container.almacen.coleccion(tipo) == ()
    assert not container.auth.hay_usuarios()


def test_container_usa_el_reloj_inyectado(container: AppContainer, ahora: datetime) -> None:
    assert container.ahora() == ahora


def test_controladores_comparten_el_almacen(container: AppContainer, make_medico, make_cita) -> None:
    medico = container.medicos.agregar(make_medico())
    cita = container.citas.agregar(make_cita(medico_id=medico.id))

    assert container.almacen.medicos == (medico,)
    assert container.almacen.citas[0].id == cita.id
    assert container.almacen.citas[0].estado == EstadoCita.AGENDADA


def test_build_container_con_demo_carga_los_cuatro_tipos() -> None:
    container = build_container()

    assert len(container.almacen.pacientes) == 2
    assert len(container.almacen.medicos) == 2
    assert len(container.almacen.clinicas) == 2
    assert len(container.almacen.citas) == 3
