from __future__ import annotations

import logging
import sys
import threading
import traceback
from collections.abc import Callable
from types import TracebackType

from mlgui.core.errors import AppError

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def describe_error(exc: BaseException) -> str:
    """User-facing one-liner for an unhandled exception."""
    if isinstance(exc, AppError):
        return str(exc)
    return "Unexpected error. See the application log for details."


def install_error_boundary(notify: Notifier | None = None) -> None:
    """Install global exception hooks.

    Unhandled exceptions on the main thread and in background threads are
    logged with their traceback and, when ``notify`` is given, reported to
    the user.
    """

    def _handle(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            logger.error("Unhandled exception\n%s", msg)
            if notify is not None:
                notify(describe_error(exc))
        finally:
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if args.exc_value is None:
            return
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
