from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Generic, Tuple, TypeVar

from clinicsys.app.application.almacen import AlmacenEntidades, Entidad
from clinicsys.app.application.identificadores import GeneradorIds
from clinicsys.app.bootstrap_logging import get_logger
from clinicsys.app.domain import Cita
from clinicsys.app.domain.enums import EstadoCita, TipoEntidad

LOGGER = get_logger(__name__)

E = TypeVar("E", bound=Entidad)


@dataclass
class ControladorEntidad(Generic[E]):
    """
    Alta/edición/baja de un tipo de entidad sobre el almacén en memoria.

    - agregar: asigna id nuevo (se ignora el que traiga la entidad) y devuelve el registro guardado
    - actualizar / eliminar: False si el id no existe; la colección no cambia
    - ValidationError de validar() se propaga antes de tocar el almacén
    """

    almacen: AlmacenEntidades
    tipo: TipoEntidad
    ids: GeneradorIds = field(default_factory=GeneradorIds)

    def listar(self) -> Tuple[E, ...]:
        return self.almacen.coleccion(self.tipo)  # type: ignore[return-value]

    def agregar(self, entidad: E) -> E:
        nueva = self._preparar_alta(copy.deepcopy(entidad))
        nueva.validar()
        actual = self.almacen.coleccion(self.tipo)
        nueva.id = self.ids.nuevo(self.tipo, {e.id for e in actual if e.id})
        self.almacen.reemplazar(self.tipo, actual + (nueva,))
        LOGGER.info("crud_agregar", extra={"tipo": self.tipo.name, "entidad_id": nueva.id})
        return copy.deepcopy(nueva)

    def actualizar(self, entidad: E) -> bool:
        editada = copy.deepcopy(entidad)
        editada.validar()
        actual = self.almacen.coleccion(self.tipo)
        posicion = _posicion(actual, editada.id)
        if posicion is None:
            LOGGER.warning("crud_actualizar_no_encontrado", extra={"tipo": self.tipo.name, "entidad_id": editada.id})
            return False
        nueva = actual[:posicion] + (editada,) + actual[posicion + 1 :]
        self.almacen.reemplazar(self.tipo, nueva)
        LOGGER.info("crud_actualizar", extra={"tipo": self.tipo.name, "entidad_id": editada.id})
        return True

    def eliminar(self, entidad_id: str) -> bool:
        actual = self.almacen.coleccion(self.tipo)
        if _posicion(actual, entidad_id) is None:
            LOGGER.warning("crud_eliminar_no_encontrado", extra={"tipo": self.tipo.name, "entidad_id": entidad_id})
            return False
        self.almacen.reemplazar(self.tipo, tuple(e for e in actual if e.id != entidad_id))
        LOGGER.info("crud_eliminar", extra={"tipo": self.tipo.name, "entidad_id": entidad_id})
        return True

    def _preparar_alta(self, entidad: E) -> E:
        return entidad


class ControladorCitas(ControladorEntidad[Cita]):
    """Las citas nuevas nacen siempre en estado Agendada."""

    def __init__(self, almacen: AlmacenEntidades, ids: GeneradorIds | None = None) -> None:
        super().__init__(almacen=almacen, tipo=TipoEntidad.CITA, ids=ids or GeneradorIds())

    def _preparar_alta(self, entidad: Cita) -> Cita:
        entidad.estado = EstadoCita.AGENDADA
        return entidad


def _posicion(coleccion: Tuple[Entidad, ...], entidad_id: str | None) -> int | None:
    if not entidad_id:
        return None
    for indice, entidad in enumerate(coleccion):
        if entidad.id == entidad_id:
            return indice
    return None
