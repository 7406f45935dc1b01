from __future__ import annotations

from datetime import datetime, timedelta

from clinicsys.app.application.dashboard import LIMITE_PROXIMAS_CITAS, proximas_citas, resumen_dashboard
from clinicsys.app.container import AppContainer
from clinicsys.app.domain.enums import EstadoCita


def test_proximas_citas_solo_agendadas_y_futuras(ahora: datetime, make_cita) -> None:
    citas = [
        make_cita(id="pasada", fecha_hora=ahora - timedelta(hours=1)),
        make_cita(id="justo_ahora", fecha_hora=ahora),
        make_cita(id="cancelada", fecha_hora=ahora + timedelta(days=1), estado=EstadoCita.CANCELADA),
        make_cita(id="realizada", fecha_hora=ahora + timedelta(days=1), estado=EstadoCita.REALIZADA),
        make_cita(id="manana", fecha_hora=ahora + timedelta(days=1)),
        make_cita(id="hoy", fecha_hora=ahora + timedelta(minutes=30)),
    ]

    assert [c.id for c in proximas_citas(citas, ahora)] == ["hoy", "manana"]


def test_proximas_citas_se_truncan_al_limite(ahora: datetime, make_cita) -> None:
    citas = [make_cita(id=f"a{n}", fecha_hora=ahora + timedelta(days=n)) for n in range(8, 0, -1)]

    proximas = proximas_citas(citas, ahora)

    assert len(proximas) == LIMITE_PROXIMAS_CITAS
    assert [c.id for c in proximas] == ["a1", "a2", "a3", "a4", "a5"]


def test_resumen_cuenta_la_lista_truncada(container: AppContainer, ahora: datetime, make_paciente, make_cita) -> None:
    container.pacientes.agregar(make_paciente())
    for n in range(1, 8):
        container.citas.agregar(make_cita(fecha_hora=ahora + timedelta(hours=n)))

    resumen = resumen_dashboard(container.almacen, ahora)

    assert resumen.total_pacientes == 1
    assert resumen.total_medicos == 0
    assert resumen.total_citas_proximas == 5


def test_resumen_con_datos_demo(container_demo: AppContainer) -> None:
    resumen = resumen_dashboard(container_demo.almacen, container_demo.ahora())

    assert (resumen.total_pacientes, resumen.total_medicos) == (2, 2)
    assert [c.id for c in resumen.citas_proximas] == ["a1", "a2"]


def test_resumen_con_almacen_vacio(container: AppContainer, ahora: datetime) -> None:
    resumen = resumen_dashboard(container.almacen, ahora)

    assert resumen.citas_proximas == ()
    assert resumen.total_citas_proximas == 0
