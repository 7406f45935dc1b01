from clinicsys.app.application.demo_data.registros import (
    cargar_datos_demo,
    citas_demo,
    clinicas_demo,
    medicos_demo,
    pacientes_demo,
)

__all__ = [
    "cargar_datos_demo",
    "citas_demo",
    "clinicas_demo",
    "medicos_demo",
    "pacientes_demo",
]
