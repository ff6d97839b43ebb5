"""Lightweight in-process event bus.

Controllers publish change events; the UI subscribes.
"""

from .event_bus import EventBus, Subscription
from .events import GUIClosed, SubsystemChanged

__all__ = ["EventBus", "Subscription", "GUIClosed", "SubsystemChanged"]
