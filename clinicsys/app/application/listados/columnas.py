from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class EstadoColumna:
    clave: str
    etiqueta: str
    visible: bool = True


@dataclass(frozen=True, slots=True)
class VisibilidadColumnas:
    """
    Selección de columnas visibles de un listado.

    Conjunto cerrado de claves fijado al crearla; pedir una clave desconocida
    lanza KeyError. Las operaciones devuelven una instancia nueva.
    """

    columnas: Tuple[EstadoColumna, ...]

    @classmethod
    def desde_etiquetas(cls, etiquetas: Mapping[str, str]) -> "VisibilidadColumnas":
        return cls(tuple(EstadoColumna(clave, etiqueta) for clave, etiqueta in etiquetas.items()))

    def claves(self) -> Tuple[str, ...]:
        return tuple(columna.clave for columna in self.columnas)

    def visibles(self) -> Tuple[str, ...]:
        return tuple(columna.clave for columna in self.columnas if columna.visible)

    def etiqueta(self, clave: str) -> str:
        return self._columna(clave).etiqueta

    def es_visible(self, clave: str) -> bool:
        return self._columna(clave).visible

    def alternar(self, clave: str) -> "VisibilidadColumnas":
        return self.con_visible(clave, not self.es_visible(clave))

    def con_visible(self, clave: str, visible: bool) -> "VisibilidadColumnas":
        self._columna(clave)
        return VisibilidadColumnas(
            tuple(
                EstadoColumna(c.clave, c.etiqueta, visible) if c.clave == clave else c
                for c in self.columnas
            )
        )

    def con_visibles(self, claves: Iterable[str]) -> "VisibilidadColumnas":
        seleccion = set(claves)
        desconocidas = seleccion - set(self.claves())
        if desconocidas:
            raise KeyError(sorted(desconocidas)[0])
        return VisibilidadColumnas(
            tuple(EstadoColumna(c.clave, c.etiqueta, c.clave in seleccion) for c in self.columnas)
        )

    def _columna(self, clave: str) -> EstadoColumna:
        for columna in self.columnas:
            if columna.clave == clave:
                return columna
        raise KeyError(clave)
