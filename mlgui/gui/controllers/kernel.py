from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

from mlgui.config import TARGET_TRAIN
from mlgui.core.errors import AppError, DomainError, ValidationError
from mlgui.core.events import SubsystemChanged, Subscription

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)

Kernel = Callable[[np.ndarray, np.ndarray], Any]


class GUIKernel(GUIController):
    """Current kernel and the matrices it produced.

    ``init_kernel(target)`` evaluates the kernel between the TRAIN features
    (rows) and the ``target`` features (columns). Cached matrices are dropped
    whenever the kernel or the underlying features change.
    """

    name = "kernel"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._kernel: Kernel | None = None
        self._kernel_name: str | None = None
        self._matrices: dict[str, np.ndarray] = {}
        self._subscription: Subscription | None = gui.event_bus.subscribe_weak(
            SubsystemChanged, self._on_subsystem_changed
        )

    @property
    def kernel_name(self) -> str | None:
        return self._kernel_name

    def set_kernel(self, kernel: Kernel, name: str | None = None) -> None:
        self._ensure_open()
        if not callable(kernel):
            raise ValidationError("Kernel must be callable as kernel(lhs, rhs)")
        self._kernel = kernel
        self._kernel_name = name or getattr(kernel, "__name__", type(kernel).__name__)
        self._matrices.clear()
        logger.info(
            "Kernel set: %s", self._kernel_name, extra={"subsystem": self.name, "action": "set"}
        )
        self.publish("set")

    def get_kernel(self) -> Kernel:
        if self._kernel is None:
            raise DomainError("No kernel set")
        return self._kernel

    def has_kernel(self) -> bool:
        return self._kernel is not None

    def init_kernel(self, target: str) -> np.ndarray:
        self._ensure_open()
        key = normalize_target(target)
        kernel = self.get_kernel()
        features = self.gui.features
        lhs = features.get_features(TARGET_TRAIN)
        rhs = features.get_features(key)
        if lhs.shape[1] != rhs.shape[1]:
            raise ValidationError(
                f"Feature dimensions differ: {lhs.shape[1]} ({TARGET_TRAIN}) vs {rhs.shape[1]} ({key})"
            )
        try:
            matrix = np.asarray(kernel(lhs, rhs), dtype=np.float64)
        except AppError:
            raise
        except Exception as e:  # noqa: BLE001
            raise DomainError(f"Kernel {self._kernel_name!r} failed on {key} features", cause=e) from e
        expected = (lhs.shape[0], rhs.shape[0])
        if matrix.shape != expected:
            raise DomainError(f"Kernel returned shape {matrix.shape}, expected {expected}")
        self._matrices[key] = matrix
        logger.info(
            "Kernel matrix %dx%d computed",
            *expected,
            extra={"subsystem": self.name, "action": "init", "target": key},
        )
        self.publish("init", key)
        return matrix

    def kernel_matrix(self, target: str) -> np.ndarray:
        key = normalize_target(target)
        try:
            return self._matrices[key]
        except KeyError:
            raise DomainError(f"Kernel not initialised for {key}") from None

    def is_initialized(self, target: str) -> bool:
        return normalize_target(target) in self._matrices

    def _on_subsystem_changed(self, event: SubsystemChanged) -> None:
        if event.subsystem != "features" or not self._matrices:
            return
        # TRAIN features are the rows of every matrix.
        if event.target == TARGET_TRAIN:
            self._matrices.clear()
        elif event.target is not None:
            self._matrices.pop(event.target, None)
        logger.debug("Kernel cache invalidated by %s %s", event.action, event.target)

    def _reset(self) -> None:
        gui = self._gui_ref()
        if self._subscription is not None and gui is not None:
            gui.event_bus.unsubscribe(self._subscription)
            self._subscription = None
        self._kernel = None
        self._kernel_name = None
        self._matrices.clear()
