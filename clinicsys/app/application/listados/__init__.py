from clinicsys.app.application.listados.columnas import EstadoColumna, VisibilidadColumnas
from clinicsys.app.application.listados.definiciones import (
    LISTADO_CLINICAS,
    LISTADO_MEDICOS,
    LISTADO_PACIENTES,
    NOMBRE_NO_DISPONIBLE,
    ResolutorNombres,
    formatear_fecha_hora,
    listado_citas,
    listado_proximas_citas,
    resolutor_para,
)
from clinicsys.app.application.listados.proyeccion import (
    DefinicionColumna,
    DefinicionListado,
    FilaProyectada,
    ListadoProyectado,
    filtrar,
    proyectar,
)

__all__ = [
    "DefinicionColumna",
    "DefinicionListado",
    "EstadoColumna",
    "FilaProyectada",
    "LISTADO_CLINICAS",
    "LISTADO_MEDICOS",
    "LISTADO_PACIENTES",
    "ListadoProyectado",
    "NOMBRE_NO_DISPONIBLE",
    "ResolutorNombres",
    "VisibilidadColumnas",
    "filtrar",
    "formatear_fecha_hora",
    "listado_citas",
    "listado_proximas_citas",
    "proyectar",
    "resolutor_para",
]
