from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock
from typing import Any, TypeVar, cast
from weakref import WeakMethod

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent")

Handler = Callable[[object], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    event_type: type[object]
    handler: Handler


class EventBus:
    """Synchronous, in-process event bus.

    Subscribe/unsubscribe/publish are thread-safe. Handlers run in the
    publisher's thread; a failing handler is logged and does not stop the others.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: defaultdict[type[object], list[Handler]] = defaultdict(list)

    def _add(self, event_type: type[object], handler: Handler) -> Subscription:
        with self._lock:
            self._subs[event_type].append(handler)
        return Subscription(event_type=event_type, handler=handler)

    def subscribe(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        def _wrapped(event: object) -> None:
            handler(cast(TEvent, event))

        return self._add(event_type, _wrapped)

    def subscribe_weak(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        """Subscribe a bound method without keeping its owner alive.

        Once the owner (e.g. a Qt window) is garbage-collected the subscription
        removes itself on the next publish. Plain functions fall back to
        :meth:`subscribe`.
        """

        try:
            ref: WeakMethod | None = WeakMethod(cast(Any, handler))
        except TypeError:
            ref = None
        if ref is None:
            return self.subscribe(event_type, handler)

        sub: Subscription

        def _wrapped(event: object) -> None:
            method = ref()
            if method is None:
                self.unsubscribe(sub)
                return
            method(cast(TEvent, event))

        sub = self._add(event_type, _wrapped)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            handlers = self._subs.get(subscription.event_type)
            if handlers and subscription.handler in handlers:
                handlers.remove(subscription.handler)

    def subscriber_count(self, event_type: type[object]) -> int:
        with self._lock:
            return len(self._subs.get(event_type, ()))

    def publish(self, event: object) -> None:
        # Snapshot under lock, call outside it.
        with self._lock:
            handlers = list(self._subs.get(type(event), ()))
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    extra={"event_type": type(event).__name__, "handler": repr(handler)},
                )

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
