from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from clinicsys.app.application.almacen import AlmacenEntidades
from clinicsys.app.bootstrap_logging import get_logger
from clinicsys.app.domain import Cita, Clinica, Direccion, Disponibilidad, Medico, Paciente
from clinicsys.app.domain.enums import DiaSemana, EstadoCita, TipoEntidad

LOGGER = get_logger(__name__)


def pacientes_demo() -> list[Paciente]:
    return [
        Paciente(
            id="p1",
            nombre_completo="Ana Silva",
            telefono="(11) 98765-4321",
            email="ana.silva@example.com",
            cpf="111.222.333-44",
            fecha_nacimiento=date(1985, 5, 20),
            direccion=Direccion("01000-000", "Rua A", "123", None, "Centro", "São Paulo", "SP"),
        ),
        Paciente(
            id="p2",
            nombre_completo="Bruno Costa",
            telefono="(21) 91234-5678",
            email="bruno.costa@example.com",
            cpf="222.333.444-55",
            fecha_nacimiento=date(1990, 11, 15),
            direccion=Direccion("20000-000", "Av. B", "456", None, "Copacabana", "Rio de Janeiro", "RJ"),
        ),
    ]


def medicos_demo() -> list[Medico]:
    return [
        Medico(
            id="d1",
            nombre_completo="Dr. Carlos Ferreira",
            telefono="(11) 99999-8888",
            email="carlos.ferreira@clinic.com",
            crm="12345-SP",
            especialidad="Cardiologia",
            disponibilidad=[
                Disponibilidad(DiaSemana.LUNES, "08:00", "12:00"),
                Disponibilidad(DiaSemana.MIERCOLES, "14:00", "18:00"),
            ],
        ),
        Medico(
            id="d2",
            nombre_completo="Dra. Fernanda Lima",
            telefono="(21) 98888-7777",
            email="fernanda.lima@clinic.com",
            crm="54321-RJ",
            especialidad="Dermatologia",
            disponibilidad=[
                Disponibilidad(DiaSemana.MARTES, "09:00", "17:00"),
                Disponibilidad(DiaSemana.JUEVES, "09:00", "17:00"),
            ],
        ),
    ]


def clinicas_demo() -> list[Clinica]:
    return [
        Clinica(
            id="c1",
            nombre="Clínica Saúde Plena",
            cnpj="12.345.678/0001-99",
            telefono="(11) 5555-1111",
            email="contato@saudeplena.com",
            direccion=Direccion("01234-567", "Avenida Brasil", "1000", None, "Jardins", "São Paulo", "SP"),
        ),
        Clinica(
            id="c2",
            nombre="Hospital Bem Estar",
            cnpj="98.765.432/0001-11",
            telefono="(21) 5555-2222",
            email="contato@hospitalbemestar.com",
            direccion=Direccion("22345-890", "Rua da Praia", "500", None, "Botafogo", "Rio de Janeiro", "RJ"),
        ),
    ]


def citas_demo(ahora: datetime) -> list[Cita]:
    """Dos citas futuras agendadas y una pasada ya realizada, relativas a `ahora`."""
    base = ahora if ahora.tzinfo else ahora.astimezone()
    base = base.astimezone(timezone.utc)
    return [
        Cita(id="a1", paciente_id="p1", medico_id="d1", fecha_hora=base + timedelta(days=1)),
        Cita(id="a2", paciente_id="p2", medico_id="d2", fecha_hora=base + timedelta(days=2)),
        Cita(
            id="a3",
            paciente_id="p1",
            medico_id="d2",
            fecha_hora=base - timedelta(days=5),
            estado=EstadoCita.REALIZADA,
        ),
    ]


def cargar_datos_demo(almacen: AlmacenEntidades, ahora: datetime) -> None:
    """Carga los registros de ejemplo con sus ids fijos, sin pasar por los controladores."""
    lotes = (
        (TipoEntidad.PACIENTE, pacientes_demo()),
        (TipoEntidad.MEDICO, medicos_demo()),
        (TipoEntidad.CLINICA, clinicas_demo()),
        (TipoEntidad.CITA, citas_demo(ahora)),
    )
    for tipo, registros in lotes:
        for registro in registros:
            registro.validar()
        almacen.reemplazar(tipo, tuple(registros))
    LOGGER.info(
        "demo_data_loaded",
        extra={"pacientes": len(almacen.pacientes), "medicos": len(almacen.medicos), "citas": len(almacen.citas)},
    )
