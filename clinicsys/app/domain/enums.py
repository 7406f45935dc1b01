from __future__ import annotations
from enum import Enum


class TipoEntidad(str, Enum):
    """Tipos de entidad gestionados por la consola. El valor es el prefijo de id."""

    PACIENTE = "p"
    MEDICO = "d"
    CLINICA = "c"
    CITA = "a"


class EstadoCita(str, Enum):
    AGENDADA = "Agendada"
    CANCELADA = "Cancelada"
    REALIZADA = "Realizada"


class DiaSemana(str, Enum):
    LUNES = "Segunda-feira"
    MARTES = "Terça-feira"
    MIERCOLES = "Quarta-feira"
    JUEVES = "Quinta-feira"
    VIERNES = "Sexta-feira"
    SABADO = "Sábado"
    DOMINGO = "Domingo"


# -------------------------
# Sesión / apariencia
# -------------------------

class Tema(str, Enum):
    CLARO = "light"
    OSCURO = "dark"
