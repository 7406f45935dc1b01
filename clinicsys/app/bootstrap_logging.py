from __future__ import annotations

import contextvars
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from clinicsys.app.common.log_redaction import redact_text, redact_value

_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")
_USER: contextvars.ContextVar[str | None] = contextvars.ContextVar("user", default=None)
_SOFT_KEY = "is_soft_crash"
_FATAL_KEY = "is_fatal_crash"
_RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "run_id", "user"}


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID.get()
        record.user = _USER.get() or "-"
        return True


class _SoftCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, _SOFT_KEY, False))


class _FatalCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, _FATAL_KEY, False) or record.levelno >= logging.CRITICAL)


class _ExcludeCrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return not bool(getattr(record, _SOFT_KEY, False) or getattr(record, _FATAL_KEY, False))


class _StructuredFormatter(logging.Formatter):
    """Una línea por evento: JSON o pares clave=valor, con PII enmascarada."""

    def __init__(self, *, json_mode: bool) -> None:
        super().__init__()
        self._json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_text(record.getMessage()),
            "run_id": getattr(record, "run_id", "-"),
            "user": getattr(record, "user", "-"),
            "module": record.module,
            "line": record.lineno,
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["traceback"] = redact_text(self.formatException(record.exc_info))
        if self._json_mode:
            return json.dumps(payload, ensure_ascii=False, default=str)
        return " ".join(f"{key}={value}" for key, value in payload.items())


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    extra = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED and key not in (_SOFT_KEY, _FATAL_KEY)
    }
    return redact_value(extra)


class ContextLoggerAdapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        kwargs["extra"] = redact_value(kwargs.get("extra", {}))
        return redact_value(msg), kwargs


def configure_logging(app_name: str, log_dir: Path, level: str = "INFO", json: bool = True) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = _StructuredFormatter(json_mode=json)
    context_filter = _ContextFilter()

    console = logging.StreamHandler(stream=sys.__stderr__)
    app_file = RotatingFileHandler(log_dir / "app.log", maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    soft_file = RotatingFileHandler(log_dir / "crash_soft.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fatal_file = RotatingFileHandler(log_dir / "crash_fatal.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")

    routing = (
        (console, _ExcludeCrashFilter()),
        (app_file, _ExcludeCrashFilter()),
        (soft_file, _SoftCrashFilter()),
        (fatal_file, _FatalCrashFilter()),
    )
    for handler, route_filter in routing:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        handler.addFilter(route_filter)
        root_logger.addHandler(handler)

    logging.captureWarnings(True)
    get_logger(__name__).info("logging_configured", extra={"app_name": app_name, "log_dir": str(log_dir)})


def get_logger(name: str) -> logging.LoggerAdapter:
    return ContextLoggerAdapter(logging.getLogger(name), {})


def set_run_context(run_id: str, user: str | None = None) -> None:
    _RUN_ID.set(run_id)
    _USER.set(user)


def set_user_context(user: str | None) -> None:
    """Actualiza el usuario de los logs tras login/logout sin cambiar el run_id."""
    _USER.set(user)


def log_soft_exception(logger: logging.LoggerAdapter, exc: Exception, context: dict[str, Any]) -> None:
    logger.error(
        "soft_exception",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={_SOFT_KEY: True, "context": context},
    )
    logger.error(
        "soft_exception_operational",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"context": context},
    )
