from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence, Tuple

from clinicsys.app.application.almacen import AlmacenEntidades
from clinicsys.app.domain import Cita
from clinicsys.app.domain.value_objects import normalizar_fecha_hora

LIMITE_PROXIMAS_CITAS = 5


def proximas_citas(citas: Sequence[Cita], ahora: datetime, limite: int = LIMITE_PROXIMAS_CITAS) -> Tuple[Cita, ...]:
    """Citas agendadas posteriores a `ahora`, de la más cercana a la más lejana, como máximo `limite`."""
    referencia = normalizar_fecha_hora(ahora)
    futuras = [
        cita
        for cita in citas
        if cita.esta_agendada() and cita.fecha_hora is not None and cita.fecha_hora > referencia
    ]
    futuras.sort(key=lambda cita: cita.fecha_hora)
    return tuple(futuras[: max(limite, 0)])


@dataclass(frozen=True, slots=True)
class ResumenDashboard:
    total_pacientes: int
    total_medicos: int
    citas_proximas: Tuple[Cita, ...]

    @property
    def total_citas_proximas(self) -> int:
        # Cuenta la lista ya truncada, no todas las futuras.
        return len(self.citas_proximas)


def resumen_dashboard(almacen: AlmacenEntidades, ahora: datetime) -> ResumenDashboard:
    return ResumenDashboard(
        total_pacientes=len(almacen.pacientes),
        total_medicos=len(almacen.medicos),
        citas_proximas=proximas_citas(almacen.citas, ahora),
    )
