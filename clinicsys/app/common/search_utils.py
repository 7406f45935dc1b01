from __future__ import annotations

from typing import Iterable, Optional


def normalize_search_text(value: Optional[str]) -> Optional[str]:
    """Texto tal cual lo escribió el usuario; solo la cadena vacía cuenta como "sin filtro"."""
    if not value:
        return None
    return value


def contains_text(texto: Optional[str], campos: Iterable[Optional[str]]) -> bool:
    """Coincidencia por subcadena sin distinguir mayúsculas; texto vacío coincide siempre."""
    if not texto:
        return True
    needle = texto.casefold()
    return any(needle in (campo or "").casefold() for campo in campos)
