from __future__ import annotations

import numpy as np
import pytest

from mlgui.core.errors import DomainError, ValidationError
from mlgui.core.events import SubsystemChanged
from mlgui.gui import GUI


def test_set_and_get_features(gui: GUI) -> None:
    gui.features.set_features("train", [[1, 2, 3], [4, 5, 6]])

    feats = gui.features.get_features("TRAIN")
    assert feats.dtype == np.float64
    assert feats.shape == (2, 3)
    assert gui.features.num_vectors("TRAIN") == 2
    assert gui.features.num_features("TRAIN") == 3
    assert not gui.features.has_features("TEST")


@pytest.mark.parametrize("bad", [[1.0, 2.0], [], [[]], [["a", "b"]], np.zeros((2, 2, 2))])
def test_rejects_non_matrix_input(gui: GUI, bad: object) -> None:
    with pytest.raises(ValidationError):
        gui.features.set_features("TRAIN", bad)


def test_unknown_target_is_rejected(gui: GUI) -> None:
    with pytest.raises(ValidationError):
        gui.features.set_features("VALIDATION", [[1.0]])


def test_missing_features_raise_domain_error(gui: GUI) -> None:
    with pytest.raises(DomainError):
        gui.features.get_features("TEST")


def test_clear_publishes_only_for_loaded_targets(gui: GUI) -> None:
    events: list[SubsystemChanged] = []
    gui.event_bus.subscribe(SubsystemChanged, events.append)
    gui.features.set_features("TEST", [[1.0]])

    gui.features.clear()

    assert not gui.features.has_features("TEST")
    assert events == [
        SubsystemChanged("features", "set", "TEST"),
        SubsystemChanged("features", "clear", "TEST"),
    ]


def test_stored_features_do_not_follow_caller_array(gui: GUI) -> None:
    data = np.array([[1.0, 0.0], [0.0, 1.0]])
    gui.features.set_features("TRAIN", data)
    gui.kernel.set_kernel(lambda a, b: a @ b.T, name="linear")
    gui.kernel.init_kernel("TRAIN")

    data[:] = 5.0

    np.testing.assert_array_equal(gui.features.get_features("TRAIN"), [[1.0, 0.0], [0.0, 1.0]])
    np.testing.assert_array_equal(gui.kernel.kernel_matrix("TRAIN"), np.eye(2))


def test_returned_features_are_read_only(gui: GUI) -> None:
    gui.features.set_features("TEST", [[1.0, 2.0]])
    feats = gui.features.get_features("TEST")

    with pytest.raises(ValueError):
        feats[0, 0] = 9.0

    assert gui.features.get_features("TEST").tolist() == [[1.0, 2.0]]
