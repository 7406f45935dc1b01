"""Proyección de colecciones a filas listas para pintar en una tabla."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from clinicsys.app.application.listados.columnas import VisibilidadColumnas
from clinicsys.app.common.search_utils import contains_text, normalize_search_text


@dataclass(frozen=True, slots=True)
class DefinicionColumna:
    clave: str
    etiqueta: str
    valor: Callable[[Any], str]
    clave_i18n: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DefinicionListado:
    nombre: str
    columnas: Tuple[DefinicionColumna, ...]
    campos_busqueda: Callable[[Any], Iterable[Optional[str]]]
    mensaje_vacio: str
    orden: Optional[Callable[[Any], Any]] = None
    descendente: bool = False

    def etiquetas(self, traducir: Optional[Callable[[str], str]] = None) -> Dict[str, str]:
        etiquetas: Dict[str, str] = {}
        for columna in self.columnas:
            etiqueta = columna.etiqueta
            if traducir is not None and columna.clave_i18n:
                traducida = traducir(columna.clave_i18n)
                etiqueta = traducida if traducida != columna.clave_i18n else etiqueta
            etiquetas[columna.clave] = etiqueta
        return etiquetas

    def visibilidad_inicial(self, traducir: Optional[Callable[[str], str]] = None) -> VisibilidadColumnas:
        return VisibilidadColumnas.desde_etiquetas(self.etiquetas(traducir))


@dataclass(frozen=True, slots=True)
class FilaProyectada:
    id: Optional[str]
    valores: Tuple[str, ...]
    registro: Any = None


@dataclass(frozen=True, slots=True)
class ListadoProyectado:
    columnas: Tuple[Tuple[str, str], ...]
    filas: Tuple[FilaProyectada, ...]
    mensaje_vacio: str

    @property
    def vacio(self) -> bool:
        return not self.filas

    def claves(self) -> Tuple[str, ...]:
        return tuple(clave for clave, _ in self.columnas)

    def valor(self, fila: int, clave: str) -> str:
        return self.filas[fila].valores[self.claves().index(clave)]


def filtrar(definicion: DefinicionListado, registros: Sequence[Any], texto: Optional[str]) -> Tuple[Any, ...]:
    """Filtra por subcadena sin distinguir mayúsculas y aplica el orden del listado."""
    needle = normalize_search_text(texto)
    filtrados = [r for r in registros if contains_text(needle, definicion.campos_busqueda(r))]
    if definicion.orden is not None:
        filtrados = sorted(filtrados, key=definicion.orden, reverse=definicion.descendente)
    return tuple(filtrados)


def proyectar(
    definicion: DefinicionListado,
    registros: Sequence[Any],
    texto: Optional[str],
    visibilidad: VisibilidadColumnas,
) -> ListadoProyectado:
    """
    Filtra, ordena y recorta columnas. Función pura: mismas entradas, misma salida.

    La visibilidad solo decide qué columnas salen; nunca cambia qué registros
    ni en qué orden.
    """
    por_clave = {columna.clave: columna for columna in definicion.columnas}
    visibles = tuple(clave for clave in visibilidad.visibles() if clave in por_clave)
    filas = tuple(
        FilaProyectada(
            id=registro.id,
            valores=tuple(por_clave[clave].valor(registro) for clave in visibles),
            registro=registro,
        )
        for registro in filtrar(definicion, registros, texto)
    )
    return ListadoProyectado(
        columnas=tuple((clave, visibilidad.etiqueta(clave)) for clave in visibles),
        filas=filas,
        mensaje_vacio=definicion.mensaje_vacio,
    )
