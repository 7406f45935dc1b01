from __future__ import annotations

from pathlib import Path

from clinicsys.app.bootstrap_logging import get_logger
from clinicsys.app.domain.enums import Tema

LOGGER = get_logger(__name__)


def qss_path(tema: Tema) -> Path:
    return Path(__file__).parent / "styles" / f"{Tema(tema).value}.qss"


def load_qss(tema: Tema = Tema.CLARO) -> str:
    """Carga app/ui/styles/<light|dark>.qss.

    Devuelve cadena vacía si el archivo no existe o falla la lectura.
    """
    path = qss_path(tema)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        LOGGER.warning("theme_qss_unavailable", extra={"path": str(path), "error": str(exc)})
        return ""
