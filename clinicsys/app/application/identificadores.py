from __future__ import annotations

import time
from typing import Callable, Collection

from clinicsys.app.domain.enums import TipoEntidad


class GeneradorIds:
    """
    Genera ids "<prefijo><marca temporal>" (p. ej. "p1718000000000000000").

    La marca es estrictamente creciente dentro del proceso aunque el reloj
    devuelva el mismo valor dos veces seguidas.
    """

    def __init__(self, reloj_ns: Callable[[], int] = time.time_ns) -> None:
        self._reloj_ns = reloj_ns
        self._ultimo = 0

    def nuevo(self, tipo: TipoEntidad, existentes: Collection[str] = ()) -> str:
        while True:
            marca = max(self._reloj_ns(), self._ultimo + 1)
            self._ultimo = marca
            candidato = f"{tipo.value}{marca}"
            if candidato not in existentes:
                return candidato
