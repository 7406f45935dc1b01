"""Entidades de dominio relacionadas con personas (pacientes y médicos)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from clinicsys.app.domain.enums import DiaSemana
from clinicsys.app.domain.value_objects import (
    Direccion,
    _require_date,
    _require_non_empty,
    _strip,
    _validate_email_basic,
    _validate_hora,
)


@dataclass(slots=True)
class Persona:
    """Clase base para personas del dominio."""

    id: Optional[str] = None
    nombre_completo: str = ""
    telefono: str = ""
    email: str = ""

    def validar(self) -> None:
        """Invariantes comunes para cualquier persona."""
        self.nombre_completo = _require_non_empty(self.nombre_completo, "nombre_completo")
        self.telefono = _strip(self.telefono)
        self.email = _strip(self.email)
        _validate_email_basic(self.email)

    def to_dict(self) -> Dict[str, Any]:
        """Serialización básica a dict (útil para JSON)."""
        return asdict(self)


@dataclass(slots=True)
class Paciente(Persona):
    cpf: str = ""
    fecha_nacimiento: Optional[date] = None
    direccion: Direccion = field(default_factory=Direccion)

    def validar(self) -> None:
        super(Paciente, self).validar()
        self.cpf = _require_non_empty(self.cpf, "cpf")
        self.fecha_nacimiento = _require_date(self.fecha_nacimiento, "fecha_nacimiento")
        self.direccion.normalizar()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.fecha_nacimiento is not None:
            data["fecha_nacimiento"] = self.fecha_nacimiento.isoformat()
        return data


@dataclass(slots=True)
class Disponibilidad:
    """Franja semanal de atención; horas como "HH:mm" sin zona horaria."""

    dia: DiaSemana = DiaSemana.LUNES
    hora_inicio: str = "08:00"
    hora_fin: str = "12:00"

    def validar(self) -> None:
        self.dia = DiaSemana(self.dia)
        self.hora_inicio = _validate_hora(self.hora_inicio, "hora_inicio")
        self.hora_fin = _validate_hora(self.hora_fin, "hora_fin")

    def to_dict(self) -> Dict[str, Any]:
        return {"dia": self.dia.value, "hora_inicio": self.hora_inicio, "hora_fin": self.hora_fin}


@dataclass(slots=True)
class Medico(Persona):
    crm: str = ""
    especialidad: str = ""
    disponibilidad: List[Disponibilidad] = field(default_factory=list)

    def validar(self) -> None:
        super(Medico, self).validar()
        self.crm = _require_non_empty(self.crm, "crm")
        self.especialidad = _require_non_empty(self.especialidad, "especialidad")
        for franja in self.disponibilidad:
            franja.validar()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["disponibilidad"] = [franja.to_dict() for franja in self.disponibilidad]
        return data
