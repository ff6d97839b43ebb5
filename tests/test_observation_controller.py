from __future__ import annotations

import numpy as np
import pytest

from mlgui.core.errors import DomainError, ValidationError
from mlgui.gui import GUI


def test_set_observations_stores_integer_sequences(gui: GUI) -> None:
    obs = gui.observation.set_observations("TRAIN", [[0, 1, 2], [2, 2]], num_symbols=3)

    assert obs.num_symbols == 3
    assert obs.total_length == 5
    seqs = gui.observation.get_observations("TRAIN")
    assert [s.tolist() for s in seqs] == [[0, 1, 2], [2, 2]]
    assert all(s.dtype == np.int64 for s in seqs)
    assert gui.observation.num_symbols("TRAIN") == 3


@pytest.mark.parametrize(
    ("sequences", "num_symbols"),
    [
        ([[0, 3]], 3),
        ([[-1, 0]], 3),
        ([[]], 3),
        ([[0.5, 1.0]], 3),
        ([[[0, 1]]], 3),
        ([], 3),
        ([[0]], 0),
        ([[0]], True),
        ([[0]], "4"),
    ],
)
def test_invalid_observations_are_rejected(gui: GUI, sequences: list, num_symbols: object) -> None:
    with pytest.raises(ValidationError):
        gui.observation.set_observations("TRAIN", sequences, num_symbols)  # type: ignore[arg-type]


def test_failed_set_keeps_previous_observations(gui: GUI) -> None:
    gui.observation.set_observations("TEST", [[1, 0]], num_symbols=2)

    with pytest.raises(ValidationError):
        gui.observation.set_observations("TEST", [[1, 0], [5]], num_symbols=2)

    assert [s.tolist() for s in gui.observation.get_observations("TEST")] == [[1, 0]]


def test_clear_single_target(gui: GUI) -> None:
    gui.observation.set_observations("TRAIN", [[0]], num_symbols=1)
    gui.observation.set_observations("TEST", [[0]], num_symbols=1)

    gui.observation.clear("TRAIN")

    assert not gui.observation.has_observations("TRAIN")
    assert gui.observation.has_observations("TEST")
    with pytest.raises(DomainError):
        gui.observation.get_observations("TRAIN")


@pytest.mark.parametrize("sequences", [None, 5, "0120", b"01"])
def test_non_sequence_input_is_rejected(gui: GUI, sequences: object) -> None:
    with pytest.raises(ValidationError):
        gui.observation.set_observations("TRAIN", sequences, num_symbols=3)  # type: ignore[arg-type]


def test_ragged_sequence_is_rejected(gui: GUI) -> None:
    with pytest.raises(ValidationError):
        gui.observation.set_observations("TRAIN", [[[0, 1], [2]]], num_symbols=3)


def test_stored_sequences_are_detached_and_read_only(gui: GUI) -> None:
    raw = np.array([0, 1, 2], dtype=np.int64)
    gui.observation.set_observations("TRAIN", [raw], num_symbols=3)

    raw[:] = 0
    stored = gui.observation.get_observations("TRAIN")[0]

    assert stored.tolist() == [0, 1, 2]
    with pytest.raises(ValueError):
        stored[0] = 2
