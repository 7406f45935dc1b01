# bootstrap.py
"""
Bootstrap de la aplicación ClinicSys.

Responsabilidades:
- Leer la configuración del entorno (una sola vez)
- Resolver rutas (logs)

No hay base de datos: todo el estado vive en memoria durante la sesión.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import getenv
from pathlib import Path
from typing import Mapping, Optional, Tuple

from clinicsys.app.bootstrap_logging import get_logger

LOGGER = get_logger(__name__)

IDIOMAS_SOPORTADOS = ("pt", "es")
_NIVELES_LOG = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VERDADEROS = {"1", "true", "yes", "on"}
_FALSOS = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class ConfiguracionApp:
    log_dir: Path = Path("./logs")
    log_level: str = "INFO"
    log_json: bool = True
    idioma: str = "pt"
    cargar_demo: bool = True
    avisos: Tuple[Tuple[str, str], ...] = ()


def cargar_configuracion(entorno: Optional[Mapping[str, str]] = None) -> ConfiguracionApp:
    """
    Lee CLINICSYS_* del entorno. Los valores inválidos caen al valor por
    defecto y quedan en `avisos` para registrarlos cuando el logging esté listo.
    """
    env = entorno if entorno is not None else _entorno_actual()
    defaults = ConfiguracionApp()
    avisos: list[tuple[str, str]] = []

    log_dir_raw = (env.get("CLINICSYS_LOG_DIR") or "").strip()
    log_dir = Path(log_dir_raw).expanduser() if log_dir_raw else defaults.log_dir

    level_raw = (env.get("CLINICSYS_LOG_LEVEL") or "").strip().upper()
    log_level = defaults.log_level
    if level_raw:
        if level_raw in _NIVELES_LOG:
            log_level = level_raw
        else:
            avisos.append(("CLINICSYS_LOG_LEVEL", level_raw))

    idioma_raw = (env.get("CLINICSYS_LANG") or "").strip().lower()
    idioma = defaults.idioma
    if idioma_raw:
        if idioma_raw in IDIOMAS_SOPORTADOS:
            idioma = idioma_raw
        else:
            avisos.append(("CLINICSYS_LANG", idioma_raw))

    log_json = _flag(env, "CLINICSYS_LOG_JSON", defaults.log_json, avisos)
    cargar_demo = _flag(env, "CLINICSYS_SEED_DEMO", defaults.cargar_demo, avisos)
    return ConfiguracionApp(
        log_dir=log_dir,
        log_level=log_level,
        log_json=log_json,
        idioma=idioma,
        cargar_demo=cargar_demo,
        avisos=tuple(avisos),
    )


def registrar_avisos(config: ConfiguracionApp, logger: logging.LoggerAdapter = LOGGER) -> None:
    for variable, valor in config.avisos:
        logger.warning("config_invalid_value", extra={"variable": variable, "valor": valor})


def _flag(env: Mapping[str, str], nombre: str, default: bool, avisos: list[tuple[str, str]]) -> bool:
    raw = (env.get(nombre) or "").strip().lower()
    if not raw:
        return default
    if raw in _VERDADEROS:
        return True
    if raw in _FALSOS:
        return False
    avisos.append((nombre, raw))
    return default


def _entorno_actual() -> Mapping[str, str]:
    nombres = (
        "CLINICSYS_LOG_DIR",
        "CLINICSYS_LOG_LEVEL",
        "CLINICSYS_LOG_JSON",
        "CLINICSYS_LANG",
        "CLINICSYS_SEED_DEMO",
    )
    return {nombre: valor for nombre in nombres if (valor := getenv(nombre)) is not None}
