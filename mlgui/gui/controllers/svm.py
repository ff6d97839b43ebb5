from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from mlgui.config import TARGET_TEST, TARGET_TRAIN
from mlgui.core.errors import DomainError, ValidationError
from mlgui.core.events import SubsystemChanged, Subscription

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsSVM(Protocol):
    """A classifier trained on a precomputed kernel matrix."""

    def fit(self, kernel_matrix: np.ndarray, labels: np.ndarray) -> Any: ...

    def predict(self, kernel_matrix: np.ndarray) -> Any: ...


class GUISVM(GUIController):
    """Two-class SVM handle.

    Training uses the TRAIN kernel matrix held by the kernel controller;
    classification passes the ``(n_target, n_train)`` matrix to ``predict``.
    A new kernel, a re-initialised TRAIN kernel or new TRAIN features mark
    the machine untrained.
    """

    name = "svm"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._svm: SupportsSVM | None = None
        self._labels: np.ndarray | None = None
        self._trained = False
        self._train_rows: int | None = None
        self._subscription: Subscription | None = gui.event_bus.subscribe_weak(
            SubsystemChanged, self._on_subsystem_changed
        )

    @property
    def trained(self) -> bool:
        return self._trained

    def set_svm(self, svm: SupportsSVM) -> None:
        self._ensure_open()
        if not isinstance(svm, SupportsSVM):
            raise ValidationError(f"{type(svm).__name__} does not provide fit()/predict()")
        self._svm = svm
        self._trained = False
        logger.info(
            "SVM set: %s", type(svm).__name__, extra={"subsystem": self.name, "action": "set"}
        )
        self.publish("set")

    def get_svm(self) -> SupportsSVM:
        if self._svm is None:
            raise DomainError("No SVM set")
        return self._svm

    def set_labels(self, labels: Any) -> np.ndarray:
        self._ensure_open()
        arr = np.asarray(labels)
        if arr.ndim != 1 or arr.size == 0:
            raise ValidationError("Labels must be a non-empty 1-D sequence")
        if not np.isin(arr, (-1, 1)).all():
            raise ValidationError("Two-class labels must be -1 or +1")
        self._labels = arr.astype(np.int64)
        self._trained = False
        self.publish("labels", TARGET_TRAIN)
        return self._labels

    def get_labels(self) -> np.ndarray:
        if self._labels is None:
            raise DomainError("No labels set")
        return self._labels

    def train_svm(self) -> None:
        self._ensure_open()
        svm = self.get_svm()
        labels = self.get_labels()
        matrix = self.gui.kernel.kernel_matrix(TARGET_TRAIN)
        if labels.shape[0] != matrix.shape[0]:
            raise ValidationError(
                f"Got {labels.shape[0]} labels for {matrix.shape[0]} training vectors"
            )
        try:
            svm.fit(matrix, labels)
        except Exception as e:  # noqa: BLE001
            raise DomainError("SVM training failed", cause=e) from e
        self._trained = True
        self._train_rows = int(matrix.shape[0])
        logger.info(
            "SVM trained on %d vectors",
            matrix.shape[0],
            extra={"subsystem": self.name, "action": "train", "target": TARGET_TRAIN},
        )
        self.publish("train", TARGET_TRAIN)

    def classify(self, target: str = TARGET_TEST) -> np.ndarray:
        self._ensure_open()
        key = normalize_target(target)
        if not self._trained:
            raise DomainError("SVM is not trained")
        svm = self.get_svm()
        matrix = self.gui.kernel.kernel_matrix(key)
        if matrix.shape[0] != self._train_rows:
            raise DomainError(
                f"SVM was trained on {self._train_rows} vectors, kernel has {matrix.shape[0]}"
            )
        try:
            out = np.asarray(svm.predict(matrix.T)).ravel()
        except Exception as e:  # noqa: BLE001
            raise DomainError(f"SVM classification of {key} failed", cause=e) from e
        if out.shape[0] != matrix.shape[1]:
            raise DomainError(
                f"SVM returned {out.shape[0]} outputs for {matrix.shape[1]} {key} vectors"
            )
        self.publish("classify", key)
        return out

    def _on_subsystem_changed(self, event: SubsystemChanged) -> None:
        if not self._trained:
            return
        kernel_changed = event.subsystem == "kernel" and (
            event.action == "set" or (event.action == "init" and event.target == TARGET_TRAIN)
        )
        train_changed = event.subsystem == "features" and event.target == TARGET_TRAIN
        if kernel_changed or train_changed:
            self._trained = False
            self._train_rows = None
            logger.info(
                "SVM marked untrained after %s %s", event.subsystem, event.action,
                extra={"subsystem": self.name, "action": "untrain"},
            )

    def _reset(self) -> None:
        gui = self._gui_ref()
        if self._subscription is not None and gui is not None:
            gui.event_bus.unsubscribe(self._subscription)
            self._subscription = None
        self._svm = None
        self._labels = None
        self._trained = False
        self._train_rows = None
