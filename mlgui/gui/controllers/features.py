from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from mlgui.config import TARGETS
from mlgui.core.errors import DomainError, ValidationError

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)


class GUIFeatures(GUIController):
    """Feature matrices, one per target (rows are vectors)."""

    name = "features"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._features: dict[str, np.ndarray] = {}

    def set_features(self, target: str, matrix: Any) -> np.ndarray:
        self._ensure_open()
        key = normalize_target(target)
        try:
            arr = np.array(matrix, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValidationError("Features must be numeric", cause=e) from e
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValidationError(f"Features must be a non-empty 2-D matrix, got shape {arr.shape}")
        # Stored copy is read-only: edits must go through set_features so listeners see them.
        arr.setflags(write=False)
        self._features[key] = arr
        logger.info(
            "Features set: %d vectors x %d dims",
            arr.shape[0],
            arr.shape[1],
            extra={"subsystem": self.name, "action": "set", "target": key},
        )
        self.publish("set", key)
        return arr

    def get_features(self, target: str) -> np.ndarray:
        key = normalize_target(target)
        try:
            return self._features[key]
        except KeyError:
            raise DomainError(f"No {key} features loaded") from None

    def has_features(self, target: str) -> bool:
        return normalize_target(target) in self._features

    def num_vectors(self, target: str) -> int:
        return int(self.get_features(target).shape[0])

    def num_features(self, target: str) -> int:
        return int(self.get_features(target).shape[1])

    def clear(self, target: str | None = None) -> None:
        self._ensure_open()
        keys = TARGETS if target is None else (normalize_target(target),)
        for key in keys:
            if self._features.pop(key, None) is not None:
                logger.info("Features cleared", extra={"subsystem": self.name, "target": key})
                self.publish("clear", key)

    def _reset(self) -> None:
        self._features.clear()
