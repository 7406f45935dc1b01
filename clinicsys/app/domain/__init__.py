from clinicsys.app.domain.citas import Cita
from clinicsys.app.domain.clinicas import Clinica
from clinicsys.app.domain.personas import Disponibilidad, Medico, Paciente, Persona
from clinicsys.app.domain.value_objects import Direccion
from clinicsys.app.domain.enums import *  # noqa: F401,F403
from clinicsys.app.domain.exceptions import *  # noqa: F401,F403

__all__ = [
    "Persona",
    "Paciente",
    "Medico",
    "Disponibilidad",
    "Clinica",
    "Cita",
    "Direccion",
]
