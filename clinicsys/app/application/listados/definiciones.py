from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from clinicsys.app.application.listados.proyeccion import DefinicionColumna, DefinicionListado
from clinicsys.app.domain import Cita, Medico, Paciente

NOMBRE_NO_DISPONIBLE = "N/A"
FORMATO_FECHA_HORA = "%d/%m/%Y %H:%M"


def formatear_fecha_hora(value: Optional[datetime]) -> str:
    """dd/MM/yyyy HH:mm en hora local."""
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(FORMATO_FECHA_HORA)


def _sin_valor(_registro: object) -> str:
    return ""


@dataclass(frozen=True)
class ResolutorNombres:
    """Resuelve nombres de paciente/médico de una cita; las referencias colgantes dan "N/A"."""

    pacientes: Sequence[Paciente]
    medicos: Sequence[Medico]

    def paciente(self, paciente_id: Optional[str]) -> str:
        return _nombre_por_id(self.pacientes, paciente_id)

    def medico(self, medico_id: Optional[str]) -> str:
        return _nombre_por_id(self.medicos, medico_id)


def _nombre_por_id(personas: Sequence[Paciente | Medico], persona_id: Optional[str]) -> str:
    for persona in personas:
        if persona.id == persona_id:
            return persona.nombre_completo
    return NOMBRE_NO_DISPONIBLE


LISTADO_PACIENTES = DefinicionListado(
    nombre="pacientes",
    columnas=(
        DefinicionColumna("nombre", "Nome", lambda p: p.nombre_completo, "col.nombre"),
        DefinicionColumna("cpf", "CPF", lambda p: p.cpf, "col.cpf"),
        DefinicionColumna("telefono", "Telefone", lambda p: p.telefono, "col.telefono"),
        DefinicionColumna("email", "Email", lambda p: p.email, "col.email"),
        DefinicionColumna("acciones", "Ações", _sin_valor, "col.acciones"),
    ),
    campos_busqueda=lambda p: (p.nombre_completo, p.cpf),
    mensaje_vacio="Nenhum paciente encontrado.",
)

LISTADO_MEDICOS = DefinicionListado(
    nombre="medicos",
    columnas=(
        DefinicionColumna("nombre", "Nome", lambda m: m.nombre_completo, "col.nombre"),
        DefinicionColumna("especialidad", "Especialidade", lambda m: m.especialidad, "col.especialidad"),
        DefinicionColumna("crm", "CRM", lambda m: m.crm, "col.crm"),
        DefinicionColumna("telefono", "Telefone", lambda m: m.telefono, "col.telefono"),
        DefinicionColumna("acciones", "Ações", _sin_valor, "col.acciones"),
    ),
    campos_busqueda=lambda m: (m.nombre_completo, m.especialidad),
    mensaje_vacio="Nenhum médico encontrado.",
)

LISTADO_CLINICAS = DefinicionListado(
    nombre="clinicas",
    columnas=(
        DefinicionColumna("nombre", "Nome", lambda c: c.nombre, "col.nombre"),
        DefinicionColumna("cnpj", "CNPJ", lambda c: c.cnpj, "col.cnpj"),
        DefinicionColumna("telefono", "Telefone", lambda c: c.telefono, "col.telefono"),
        DefinicionColumna("email", "Email", lambda c: c.email, "col.email"),
        DefinicionColumna("acciones", "Ações", _sin_valor, "col.acciones"),
    ),
    campos_busqueda=lambda c: (c.nombre, c.cnpj),
    mensaje_vacio="Nenhuma clínica encontrada.",
)


def _columnas_cita(resolutor: ResolutorNombres) -> tuple[DefinicionColumna, ...]:
    return (
        DefinicionColumna("fecha_hora", "Data e Hora", lambda a: formatear_fecha_hora(a.fecha_hora), "col.fecha_hora"),
        DefinicionColumna("paciente", "Paciente", lambda a: resolutor.paciente(a.paciente_id), "col.paciente"),
        DefinicionColumna("medico", "Médico", lambda a: resolutor.medico(a.medico_id), "col.medico"),
        DefinicionColumna("estado", "Status", lambda a: a.estado.value, "col.estado"),
    )


def _clave_fecha(cita: Cita) -> datetime:
    return cita.fecha_hora or datetime.min.replace(tzinfo=timezone.utc)


def listado_citas(resolutor: ResolutorNombres) -> DefinicionListado:
    """Citas: más recientes primero (incluye pasadas); búsqueda por nombres resueltos."""
    return DefinicionListado(
        nombre="citas",
        columnas=_columnas_cita(resolutor) + (DefinicionColumna("acciones", "Ações", _sin_valor, "col.acciones"),),
        campos_busqueda=lambda a: (resolutor.paciente(a.paciente_id), resolutor.medico(a.medico_id)),
        mensaje_vacio="Nenhum agendamento encontrado.",
        orden=_clave_fecha,
        descendente=True,
    )


def listado_proximas_citas(resolutor: ResolutorNombres) -> DefinicionListado:
    """Tabla del panel: ya recibe las próximas citas ordenadas, no reordena."""
    return DefinicionListado(
        nombre="proximas_citas",
        columnas=_columnas_cita(resolutor),
        campos_busqueda=lambda a: (resolutor.paciente(a.paciente_id), resolutor.medico(a.medico_id)),
        mensaje_vacio="Nenhum agendamento próximo.",
    )


def resolutor_para(pacientes: Sequence[Paciente], medicos: Sequence[Medico]) -> ResolutorNombres:
    return ResolutorNombres(pacientes=tuple(pacientes), medicos=tuple(medicos))
