"""Common plumbing for the controllers owned by :class:`mlgui.gui.GUI`.

A controller never owns its siblings. It keeps a weak handle to the
aggregator and reaches other controllers through it (``self.gui.features``).
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, ClassVar

from mlgui.config import TARGETS
from mlgui.core.errors import InfrastructureError, ValidationError
from mlgui.core.events import SubsystemChanged

if TYPE_CHECKING:
    from mlgui.gui.context import GUI


def normalize_target(target: str) -> str:
    """Return the canonical target name (``TRAIN``/``TEST``)."""
    key = str(target).strip().upper()
    if key not in TARGETS:
        raise ValidationError(f"Unknown target {target!r}; expected one of {', '.join(TARGETS)}")
    return key


class GUIController:
    name: ClassVar[str] = ""

    def __init__(self, gui: GUI) -> None:
        self._gui_ref = weakref.ref(gui)
        self._closed = False

    @property
    def gui(self) -> GUI:
        gui = self._gui_ref()
        if gui is None:
            raise InfrastructureError(f"{self.name} controller outlived its GUI")
        return gui

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, action: str, target: str | None = None) -> None:
        self.gui.event_bus.publish(SubsystemChanged(self.name, action, target))

    def close(self) -> None:
        """Drop held state. Safe to call more than once."""
        if self._closed:
            return
        self._reset()
        self._closed = True

    def _reset(self) -> None:
        """Release controller state; overridden by subclasses."""

    def _ensure_open(self) -> None:
        if self._closed:
            raise InfrastructureError(f"{self.name} controller is closed")

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} {state}>"
