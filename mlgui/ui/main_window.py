"""
Main window: one row per toolkit controller, last change in the status bar.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QByteArray, Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QMainWindow, QStatusBar

from mlgui.config import APP_NAME
from mlgui.core.version import get_version_string
from mlgui.ui.signals import SubsystemSignals

if TYPE_CHECKING:
    from mlgui.gui import GUI
    from mlgui.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Shows the controllers of a :class:`GUI`; geometry persisted in settings."""

    def __init__(self, gui: GUI, settings: AppSettings) -> None:
        super().__init__()
        self._gui = gui
        self._settings = settings
        self.setWindowTitle(f"{APP_NAME} {get_version_string()}")
        self.setMinimumSize(480, 320)

        self._list = QListWidget(self)
        self._items: dict[str, QListWidgetItem] = {}
        for name in gui.controllers():
            item = QListWidgetItem(name)
            item.setData(Qt.ItemDataRole.UserRole, name)
            self._list.addItem(item)
            self._items[name] = item
        self.setCentralWidget(self._list)

        self._status = QStatusBar(self)
        self.setStatusBar(self._status)
        self._status.showMessage(f"{gui.argc} argument(s)")

        self._signals = SubsystemSignals(gui.event_bus)
        self._signals.subsystem_changed.connect(self._on_subsystem_changed)
        self._restore_geometry()

    def show_message(self, message: str) -> None:
        self._status.showMessage(message)

    def _on_subsystem_changed(self, subsystem: str, action: str, target: object) -> None:
        item = self._items.get(subsystem)
        if item is None:
            return
        suffix = f" {target}" if target else ""
        item.setText(f"{subsystem}: {action}{suffix}")
        self._list.setCurrentItem(item)
        self._status.showMessage(f"{subsystem} {action}{suffix}")

    def _restore_geometry(self) -> None:
        geom = self._settings.get_main_window_geometry()
        if isinstance(geom, QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)
        state = self._settings.get_main_window_state()
        if isinstance(state, QByteArray) and not state.isEmpty():
            self.restoreState(state)
        last = self._settings.get_last_subsystem()
        if last in self._items:
            self._list.setCurrentItem(self._items[last])

    def _save_geometry(self) -> None:
        self._settings.set_main_window_geometry(self.saveGeometry())
        self._settings.set_main_window_state(self.saveState())
        current = self._list.currentItem()
        if current is not None:
            self._settings.set_last_subsystem(str(current.data(Qt.ItemDataRole.UserRole)))
        self._settings.sync()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._save_geometry()
        self._signals.detach()
        self._gui.close()
        super().closeEvent(event)
