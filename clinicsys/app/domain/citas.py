"""Entidad Cita (agendamiento de paciente con médico)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from clinicsys.app.domain.enums import EstadoCita
from clinicsys.app.domain.exceptions import ValidationError
from clinicsys.app.domain.value_objects import (
    _require_non_empty,
    _strip_or_none,
    formatear_fecha_hora_iso,
    normalizar_fecha_hora,
)


@dataclass(slots=True)
class Cita:
    """
    Cita clínica.

    Reglas:
    - paciente_id y medico_id obligatorios; pueden quedar colgando si se borra la referencia
    - fecha_hora es un instante absoluto (se guarda en UTC)
    - cualquier estado puede pasar a cualquier otro
    """

    id: Optional[str] = None
    paciente_id: str = ""
    medico_id: str = ""
    fecha_hora: Optional[datetime] = None
    estado: EstadoCita = EstadoCita.AGENDADA
    notas: Optional[str] = None

    def validar(self) -> None:
        self.paciente_id = _require_non_empty(self.paciente_id, "paciente_id")
        self.medico_id = _require_non_empty(self.medico_id, "medico_id")
        if self.fecha_hora is None:
            raise ValidationError("Campo obligatorio: fecha_hora.")
        self.fecha_hora = normalizar_fecha_hora(self.fecha_hora)
        self.estado = EstadoCita(self.estado)
        self.notas = _strip_or_none(self.notas)

    def esta_agendada(self) -> bool:
        return self.estado == EstadoCita.AGENDADA

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["estado"] = self.estado.value
        if self.fecha_hora is not None:
            data["fecha_hora"] = formatear_fecha_hora_iso(self.fecha_hora)
        return data
