from __future__ import annotations

import numpy as np
import pytest

from fakes import FakeHMM
from mlgui.core.errors import DomainError, ValidationError
from mlgui.gui import GUI


@pytest.fixture
def ready(gui: GUI) -> GUI:
    gui.observation.set_observations("TRAIN", [[0, 1, 1], [1, 0]], num_symbols=2)
    gui.observation.set_observations("TEST", [[1, 1, 0, 1]], num_symbols=2)
    return gui


def test_train_and_best_path(ready: GUI) -> None:
    model = FakeHMM()
    ready.hmm.set_hmm(model)

    ready.hmm.train_hmm()
    log_prob, path = ready.hmm.best_path(0)

    assert ready.hmm.trained
    assert model.fitted is not None and len(model.fitted) == 2
    assert log_prob == -4.0
    assert path.dtype == np.int64
    assert path.tolist() == [1, 1, 0, 1]


def test_best_path_on_train_target(ready: GUI) -> None:
    ready.hmm.set_hmm(FakeHMM())
    ready.hmm.train_hmm()

    _, path = ready.hmm.best_path(1, target="TRAIN")

    assert path.tolist() == [1, 0]


def test_index_out_of_range(ready: GUI) -> None:
    ready.hmm.set_hmm(FakeHMM())
    ready.hmm.train_hmm()

    with pytest.raises(ValidationError):
        ready.hmm.best_path(1)
    with pytest.raises(ValidationError):
        ready.hmm.best_path(-1)


def test_untrained_or_missing_model(ready: GUI) -> None:
    with pytest.raises(DomainError):
        ready.hmm.train_hmm()
    ready.hmm.set_hmm(FakeHMM())
    with pytest.raises(DomainError):
        ready.hmm.best_path(0)


def test_train_requires_observations(gui: GUI) -> None:
    gui.hmm.set_hmm(FakeHMM())

    with pytest.raises(DomainError):
        gui.hmm.train_hmm()


def test_path_length_mismatch_is_domain_error(ready: GUI) -> None:
    class ShortPath(FakeHMM):
        def decode(self, sequence: np.ndarray) -> tuple[float, np.ndarray]:
            return 0.0, sequence[:1]

    ready.hmm.set_hmm(ShortPath())
    ready.hmm.train_hmm()

    with pytest.raises(DomainError):
        ready.hmm.best_path(0)


def test_objects_without_fit_decode_are_rejected(gui: GUI) -> None:
    with pytest.raises(ValidationError):
        gui.hmm.set_hmm(object())  # type: ignore[arg-type]


@pytest.mark.parametrize("index", [1.5, "0", True, None])
def test_non_integer_index_is_rejected(ready: GUI, index: object) -> None:
    ready.hmm.set_hmm(FakeHMM())
    ready.hmm.train_hmm()

    with pytest.raises(ValidationError):
        ready.hmm.best_path(index)  # type: ignore[arg-type]


def test_numpy_integer_index_is_accepted(ready: GUI) -> None:
    ready.hmm.set_hmm(FakeHMM())
    ready.hmm.train_hmm()

    _, path = ready.hmm.best_path(np.int64(0))

    assert path.tolist() == [1, 1, 0, 1]
