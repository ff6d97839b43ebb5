"""
Thread-safe signal bridge: EventBus handlers run in the publisher's thread,
these QObject signals deliver the change to slots on the main thread.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from mlgui.core.events import EventBus, Subscription, SubsystemChanged


class SubsystemSignals(QObject):
    """Re-emits :class:`SubsystemChanged` events as a Qt signal."""

    subsystem_changed = Signal(str, str, object)  # (subsystem, action, target or None)

    def __init__(self, event_bus: EventBus) -> None:
        super().__init__()
        self._bus = event_bus
        self._subscription: Subscription | None = event_bus.subscribe_weak(
            SubsystemChanged, self._on_event
        )

    def _on_event(self, event: SubsystemChanged) -> None:
        self.subsystem_changed.emit(event.subsystem, event.action, event.target)

    def detach(self) -> None:
        if self._subscription is not None:
            self._bus.unsubscribe(self._subscription)
            self._subscription = None
