"""Entidad Clínica (clínica u hospital de la red)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from clinicsys.app.domain.value_objects import (
    Direccion,
    _require_non_empty,
    _strip,
    _validate_email_basic,
)


@dataclass(slots=True)
class Clinica:
    id: Optional[str] = None
    nombre: str = ""
    cnpj: str = ""
    telefono: str = ""
    email: str = ""
    direccion: Direccion = field(default_factory=Direccion)

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "nombre")
        self.cnpj = _require_non_empty(self.cnpj, "cnpj")
        self.telefono = _strip(self.telefono)
        self.email = _strip(self.email)
        _validate_email_basic(self.email)
        self.direccion.normalizar()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
