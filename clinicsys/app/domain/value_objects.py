"""Utilidades internas de dominio y objetos valor compartidos."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from clinicsys.app.domain.exceptions import ValidationError

_HORA_RE = re.compile(r"^(\d{2}):(\d{2})$")


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    """Normaliza strings opcionales: devuelve None si queda vacío tras strip()."""
    if value is None:
        return None
    v = value.strip()
    return v if v else None


def _strip(value: Optional[str]) -> str:
    return (value or "").strip()


def _require_non_empty(value: Optional[str], field_name: str) -> str:
    """Exige string no vacío; lanza ValidationError si no cumple."""
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"Campo obligatorio: {field_name}.")
    return v


def _validate_email_basic(email: Optional[str]) -> None:
    """Validación básica de email (no pretende ser RFC completa)."""
    if email is None:
        return
    e = email.strip()
    if not e:
        return
    if "@" not in e or "." not in e:
        raise ValidationError("Email no parece válido.")


def _validate_hora(value: str, field_name: str) -> str:
    """Exige hora en formato HH:mm (sin zona horaria)."""
    v = _require_non_empty(value, field_name)
    match = _HORA_RE.match(v)
    if match is None:
        raise ValidationError(f"{field_name} debe tener formato HH:mm.")
    horas, minutos = int(match.group(1)), int(match.group(2))
    if horas > 23 or minutos > 59:
        raise ValidationError(f"{field_name} fuera de rango.")
    return v


def _require_date(value: Optional[date], field_name: str) -> date:
    if value is None:
        raise ValidationError(f"Campo obligatorio: {field_name}.")
    if isinstance(value, datetime):
        return value.date()
    return value


def normalizar_fecha_hora(value: datetime) -> datetime:
    """Convierte a UTC; un datetime sin zona se interpreta como hora local."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(timezone.utc)


def parsear_fecha_hora_iso(texto: str) -> datetime:
    """Parsea un instante ISO-8601 (admite sufijo 'Z') y lo devuelve en UTC."""
    v = (texto or "").strip()
    if not v:
        raise ValidationError("Campo obligatorio: fecha_hora.")
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        return normalizar_fecha_hora(datetime.fromisoformat(v))
    except ValueError as exc:
        raise ValidationError("Fecha y hora: formato ISO-8601 inválido.") from exc


def parsear_fecha_iso(texto: str) -> date:
    v = (texto or "").strip()
    if not v:
        raise ValidationError("Campo obligatorio: fecha_nacimiento.")
    try:
        return date.fromisoformat(v)
    except ValueError as exc:
        raise ValidationError("Fecha de nacimiento: formato inválido. Usa AAAA-MM-DD.") from exc


def formatear_fecha_hora_iso(value: datetime) -> str:
    """Formato de frontera: ISO-8601 en UTC con sufijo Z y milisegundos."""
    utc = normalizar_fecha_hora(value)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class Direccion:
    """Dirección postal. Solo `complemento` es opcional."""

    cep: str = ""
    calle: str = ""
    numero: str = ""
    complemento: Optional[str] = None
    barrio: str = ""
    ciudad: str = ""
    estado: str = ""

    def normalizar(self) -> None:
        self.cep = _strip(self.cep)
        self.calle = _strip(self.calle)
        self.numero = _strip(self.numero)
        self.complemento = _strip_or_none(self.complemento)
        self.barrio = _strip(self.barrio)
        self.ciudad = _strip(self.ciudad)
        self.estado = _strip(self.estado)

    def resumen(self) -> str:
        partes = [f"{self.calle}, {self.numero}".strip(", "), self.barrio, f"{self.ciudad}/{self.estado}".strip("/")]
        return " - ".join(p for p in partes if p)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
