from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from clinicsys.app.application.almacen import AlmacenEntidades
from clinicsys.app.application.crud import ControladorCitas, ControladorEntidad
from clinicsys.app.application.demo_data import cargar_datos_demo
from clinicsys.app.application.identificadores import GeneradorIds
from clinicsys.app.application.sesion import ServicioAjustes, ServicioAutenticacion
from clinicsys.app.domain import Clinica, Medico, Paciente
from clinicsys.app.domain.enums import TipoEntidad


def _ahora_utc() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class AppContainer:
    """Estado explícito de la sesión: se construye uno por arranque (o por test)."""

    almacen: AlmacenEntidades
    pacientes: ControladorEntidad[Paciente]
    medicos: ControladorEntidad[Medico]
    clinicas: ControladorEntidad[Clinica]
    citas: ControladorCitas
    auth: ServicioAutenticacion
    ajustes: ServicioAjustes
    reloj: Callable[[], datetime] = _ahora_utc

    def ahora(self) -> datetime:
        return self.reloj()


def build_container(
    *,
    cargar_demo: bool = True,
    reloj: Optional[Callable[[], datetime]] = None,
    ids: Optional[GeneradorIds] = None,
) -> AppContainer:
    reloj = reloj or _ahora_utc
    ids = ids or GeneradorIds()
    almacen = AlmacenEntidades()
    if cargar_demo:
        cargar_datos_demo(almacen, reloj())
    return AppContainer(
        almacen=almacen,
        pacientes=ControladorEntidad(almacen, TipoEntidad.PACIENTE, ids),
        medicos=ControladorEntidad(almacen, TipoEntidad.MEDICO, ids),
        clinicas=ControladorEntidad(almacen, TipoEntidad.CLINICA, ids),
        citas=ControladorCitas(almacen, ids),
        auth=ServicioAutenticacion(),
        ajustes=ServicioAjustes(),
        reloj=reloj,
    )
