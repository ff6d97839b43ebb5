"""Qt front end: application bootstrap, settings, signals bridge, main window.

Keep this package import lightweight: do not import Qt GUI modules at import
time. Headless CI machines may have PySide6 installed but miss runtime GUI
libs (e.g. ``libGL.so.1``); the lazy exports below let
``mlgui.ui.error_boundary`` be imported there.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AppSettings",
    "MainWindow",
    "SubsystemSignals",
    "create_application",
    "install_error_boundary",
    "run_application",
]

_EXPORTS = {
    "AppSettings": "mlgui.ui.settings",
    "MainWindow": "mlgui.ui.main_window",
    "SubsystemSignals": "mlgui.ui.signals",
    "create_application": "mlgui.ui.application",
    "install_error_boundary": "mlgui.ui.error_boundary",
    "run_application": "mlgui.ui.application",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
