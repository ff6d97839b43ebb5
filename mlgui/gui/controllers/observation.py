"""Discrete observation sequences for the HMM controller."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from mlgui.config import TARGETS
from mlgui.core.errors import DomainError, ValidationError

from .base import GUIController, normalize_target

if TYPE_CHECKING:
    from mlgui.gui.context import GUI

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ObservationSet:
    sequences: tuple[np.ndarray, ...]
    num_symbols: int

    @property
    def total_length(self) -> int:
        return sum(len(seq) for seq in self.sequences)


def _to_sequence(raw: Any, index: int, num_symbols: int) -> np.ndarray:
    try:
        arr = np.array(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Sequence {index} is not a list of symbols", cause=e) from e
    if arr.ndim != 1 or arr.size == 0:
        raise ValidationError(f"Sequence {index} must be a non-empty 1-D list of symbols")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(f"Sequence {index} must contain integer symbols, got {arr.dtype}")
    lo, hi = int(arr.min()), int(arr.max())
    if lo < 0 or hi >= num_symbols:
        raise ValidationError(
            f"Sequence {index} has symbols outside [0, {num_symbols}): min={lo}, max={hi}"
        )
    seq = arr.astype(np.int64)
    seq.setflags(write=False)
    return seq


class GUIObservation(GUIController):
    name = "observation"

    def __init__(self, gui: GUI) -> None:
        super().__init__(gui)
        self._sets: dict[str, ObservationSet] = {}

    def set_observations(
        self, target: str, sequences: Iterable[Any], num_symbols: int
    ) -> ObservationSet:
        """Store symbol sequences for ``target``.

        Every symbol must lie in ``[0, num_symbols)``. The whole set is rejected
        when any sequence is invalid; the previous set stays in place.
        """
        self._ensure_open()
        key = normalize_target(target)
        valid_int = isinstance(num_symbols, (int, np.integer)) and not isinstance(num_symbols, bool)
        if not valid_int or num_symbols < 1:
            raise ValidationError(f"num_symbols must be a positive integer, got {num_symbols!r}")
        if isinstance(sequences, (str, bytes)) or not isinstance(sequences, Iterable):
            raise ValidationError("Observations must be a sequence of symbol sequences")
        seqs = tuple(_to_sequence(raw, i, int(num_symbols)) for i, raw in enumerate(sequences))
        if not seqs:
            raise ValidationError("At least one observation sequence is required")
        obs = ObservationSet(sequences=seqs, num_symbols=int(num_symbols))
        self._sets[key] = obs
        logger.info(
            "Observations set: %d sequences, %d symbols total, alphabet %d",
            len(seqs),
            obs.total_length,
            obs.num_symbols,
            extra={"subsystem": self.name, "action": "set", "target": key},
        )
        self.publish("set", key)
        return obs

    def get_observation_set(self, target: str) -> ObservationSet:
        key = normalize_target(target)
        try:
            return self._sets[key]
        except KeyError:
            raise DomainError(f"No {key} observations loaded") from None

    def get_observations(self, target: str) -> tuple[np.ndarray, ...]:
        return self.get_observation_set(target).sequences

    def num_symbols(self, target: str) -> int:
        return self.get_observation_set(target).num_symbols

    def has_observations(self, target: str) -> bool:
        return normalize_target(target) in self._sets

    def clear(self, target: str | None = None) -> None:
        self._ensure_open()
        keys = TARGETS if target is None else (normalize_target(target),)
        for key in keys:
            if self._sets.pop(key, None) is not None:
                self.publish("clear", key)

    def _reset(self) -> None:
        self._sets.clear()
