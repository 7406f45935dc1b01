from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, Union

from clinicsys.app.domain import Cita, Clinica, Medico, Paciente
from clinicsys.app.domain.enums import TipoEntidad

Entidad = Union[Paciente, Medico, Clinica, Cita]
Suscriptor = Callable[[TipoEntidad], None]


class AlmacenEntidades:
    """
    Estado en memoria de la sesión: una tupla inmutable por tipo de entidad.

    No valida nada. Cada mutación sustituye la tupla completa para que quien
    compare por identidad detecte el cambio. Solo los controladores CRUD
    deberían llamar a `reemplazar`.
    """

    def __init__(self) -> None:
        self._colecciones: Dict[TipoEntidad, Tuple[Entidad, ...]] = {tipo: () for tipo in TipoEntidad}
        self._suscriptores: list[Suscriptor] = []

    @property
    def pacientes(self) -> Tuple[Paciente, ...]:
        return self._colecciones[TipoEntidad.PACIENTE]  # type: ignore[return-value]

    @property
    def medicos(self) -> Tuple[Medico, ...]:
        return self._colecciones[TipoEntidad.MEDICO]  # type: ignore[return-value]

    @property
    def clinicas(self) -> Tuple[Clinica, ...]:
        return self._colecciones[TipoEntidad.CLINICA]  # type: ignore[return-value]

    @property
    def citas(self) -> Tuple[Cita, ...]:
        return self._colecciones[TipoEntidad.CITA]  # type: ignore[return-value]

    def coleccion(self, tipo: TipoEntidad) -> Tuple[Entidad, ...]:
        return self._colecciones[tipo]

    def buscar_por_id(self, tipo: TipoEntidad, entidad_id: str) -> Optional[Entidad]:
        for entidad in self._colecciones[tipo]:
            if entidad.id == entidad_id:
                return entidad
        return None

    def reemplazar(self, tipo: TipoEntidad, nueva: Tuple[Entidad, ...]) -> None:
        self._colecciones[tipo] = tuple(nueva)
        for callback in list(self._suscriptores):
            callback(tipo)

    def suscribir(self, callback: Suscriptor) -> None:
        self._suscriptores.append(callback)

    def desuscribir(self, callback: Suscriptor) -> None:
        if callback in self._suscriptores:
            self._suscriptores.remove(callback)
