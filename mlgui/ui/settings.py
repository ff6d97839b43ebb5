"""
QSettings wrapper: main window geometry and state.
"""
from __future__ import annotations

from typing import cast

from PySide6.QtCore import QByteArray, QSettings

from mlgui.config import APP_NAME, ORGANIZATION_NAME


class AppSettings:
    """Window persistence via QSettings (platform-specific path)."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._q = settings if settings is not None else QSettings(ORGANIZATION_NAME, APP_NAME)

    def get_main_window_geometry(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/geometry", None, QByteArray))

    def set_main_window_geometry(self, geometry: QByteArray) -> None:
        self._q.setValue("mainWindow/geometry", geometry)

    def get_main_window_state(self) -> QByteArray | None:
        return cast(QByteArray | None, self._q.value("mainWindow/state", None, QByteArray))

    def set_main_window_state(self, state: QByteArray) -> None:
        self._q.setValue("mainWindow/state", state)

    def get_last_subsystem(self) -> str:
        return str(self._q.value("mainWindow/lastSubsystem", "", str))

    def set_last_subsystem(self, name: str) -> None:
        self._q.setValue("mainWindow/lastSubsystem", name)

    def sync(self) -> None:
        self._q.sync()
