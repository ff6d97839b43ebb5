from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

from mlgui.core.errors import DomainError, ValidationError

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)

Preprocessor = Callable[[np.ndarray], Any]


class GUIPreProc(GUIController):
    """Ordered chain of named preprocessors applied to feature matrices.

    A preprocessor maps a 2-D matrix to a 2-D matrix with the same number of
    rows; the column count may change.
    """

    name = "preproc"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._chain: dict[str, Preprocessor] = {}

    def add_preproc(self, name: str, fn: Preprocessor) -> None:
        self._ensure_open()
        if not name:
            raise ValidationError("Preprocessor name must not be empty")
        if not callable(fn):
            raise ValidationError(f"Preprocessor {name!r} is not callable")
        if name in self._chain:
            raise ValidationError(f"Preprocessor {name!r} already registered")
        self._chain[name] = fn
        logger.info("Preprocessor added: %s", name, extra={"subsystem": self.name, "action": "add"})
        self.publish("add")

    def del_preproc(self, name: str) -> None:
        self._ensure_open()
        if self._chain.pop(name, None) is None:
            raise DomainError(f"Unknown preprocessor {name!r}")
        self.publish("delete")

    def clean(self) -> None:
        self._ensure_open()
        if self._chain:
            self._chain.clear()
            self.publish("clean")

    def names(self) -> list[str]:
        return list(self._chain)

    def attach_preproc(self, target: str) -> np.ndarray:
        """Run the chain over the ``target`` features and store the result back.

        Stored features are only replaced once every step succeeded.
        """
        self._ensure_open()
        key = normalize_target(target)
        if not self._chain:
            raise DomainError("No preprocessors registered")
        features = self.gui.features
        current = features.get_features(key).copy()
        rows = current.shape[0]
        for step, fn in self._chain.items():
            try:
                out = np.asarray(fn(current), dtype=np.float64)
            except Exception as e:  # noqa: BLE001
                raise DomainError(f"Preprocessor {step!r} failed on {key} features", cause=e) from e
            if out.ndim != 2 or out.shape[0] != rows:
                raise DomainError(
                    f"Preprocessor {step!r} returned shape {out.shape}, expected ({rows}, n)"
                )
            current = out
        logger.info(
            "Applied %d preprocessors", len(self._chain),
            extra={"subsystem": self.name, "action": "attach", "target": key},
        )
        result = features.set_features(key, current)
        self.publish("attach", key)
        return result

    def _reset(self) -> None:
        self._chain.clear()
