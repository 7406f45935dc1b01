from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from PySide6.QtWidgets import QWidget


@dataclass(frozen=True)
class PageDef:
    """
    Descriptor de página:
    - key: identificador interno (también la vista por defecto tras login: "dashboard")
    - title_key: clave i18n del texto del menú lateral
    - factory: crea la página bajo demanda (lazy)
    """

    key: str
    title_key: str
    factory: Callable[[], QWidget]
