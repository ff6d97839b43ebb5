from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np

from mlgui.config import TARGET_TEST, TARGET_TRAIN
from mlgui.core.errors import DomainError, ValidationError

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsHMM(Protocol):
    def fit(self, sequences: tuple[np.ndarray, ...]) -> Any: ...

    def decode(self, sequence: np.ndarray) -> tuple[float, Any]:
        """Return ``(log_probability, state_path)``."""
        ...


class GUIHMM(GUIController):
    name = "hmm"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._hmm: SupportsHMM | None = None
        self._trained = False

    @property
    def trained(self) -> bool:
        return self._trained

    def set_hmm(self, model: SupportsHMM) -> None:
        self._ensure_open()
        if not isinstance(model, SupportsHMM):
            raise ValidationError(f"{type(model).__name__} does not provide fit()/decode()")
        self._hmm = model
        self._trained = False
        logger.info(
            "HMM set: %s", type(model).__name__, extra={"subsystem": self.name, "action": "set"}
        )
        self.publish("set")

    def get_hmm(self) -> SupportsHMM:
        if self._hmm is None:
            raise DomainError("No HMM set")
        return self._hmm

    def train_hmm(self) -> None:
        self._ensure_open()
        model = self.get_hmm()
        sequences = self.gui.observation.get_observations(TARGET_TRAIN)
        try:
            model.fit(sequences)
        except Exception as e:  # noqa: BLE001
            raise DomainError("HMM training failed", cause=e) from e
        self._trained = True
        logger.info(
            "HMM trained on %d sequences",
            len(sequences),
            extra={"subsystem": self.name, "action": "train", "target": TARGET_TRAIN},
        )
        self.publish("train", TARGET_TRAIN)

    def best_path(self, index: int, target: str = TARGET_TEST) -> tuple[float, np.ndarray]:
        """Decode the ``index``-th sequence of ``target``; returns (log_prob, path)."""
        self._ensure_open()
        key = normalize_target(target)
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise ValidationError(f"Sequence index must be an integer, got {index!r}")
        if not self._trained:
            raise DomainError("HMM is not trained")
        model = self.get_hmm()
        sequences = self.gui.observation.get_observations(key)
        if not 0 <= index < len(sequences):
            raise ValidationError(
                f"Sequence index {index} out of range for {len(sequences)} {key} sequences"
            )
        seq = sequences[index]
        try:
            log_prob, raw_path = model.decode(seq)
        except Exception as e:  # noqa: BLE001
            raise DomainError(f"HMM decoding of {key}[{index}] failed", cause=e) from e
        path = np.asarray(raw_path, dtype=np.int64).ravel()
        if path.shape[0] != seq.shape[0]:
            raise DomainError(
                f"HMM returned a path of length {path.shape[0]} for a sequence of {seq.shape[0]}"
            )
        return float(log_prob), path

    def _reset(self) -> None:
        self._hmm = None
        self._trained = False
