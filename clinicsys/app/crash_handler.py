from __future__ import annotations

import logging
import sys
import threading
from types import TracebackType
from typing import Callable, Optional

_FATAL_KEY = "is_fatal_crash"

ExcepthookFn = Callable[[type[BaseException], BaseException, Optional[TracebackType]], None]


def fatal_exception_handler(logger: logging.LoggerAdapter) -> ExcepthookFn:
    """Handler tipo sys.excepthook que deja la traza en crash_fatal.log."""

    def _handler(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Optional[TracebackType]) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical(
            "unhandled_exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            extra={_FATAL_KEY: True},
        )

    return _handler


def install_global_exception_hook(logger: logging.LoggerAdapter) -> None:
    handler = fatal_exception_handler(logger)
    sys.excepthook = handler

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        handler(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
