from __future__ import annotations

import gc
import weakref

import pytest

from mlgui.core.errors import InfrastructureError, ValidationError
from mlgui.core.events import EventBus, GUIClosed
from mlgui.gui import (
    GUI,
    GUIFeatures,
    GUIHMM,
    GUIKernel,
    GUIObservation,
    GUIPreProc,
    GUISVM,
)


@pytest.mark.parametrize("argv", [[], ["prog"], ["prog", "-style", "fusion", "data.txt"]])
def test_gui_keeps_argv_and_builds_all_controllers(argv: list[str]) -> None:
    gui = GUI(argv)

    assert gui.argc == len(argv)
    assert gui.argv == tuple(argv)
    assert isinstance(gui.svm, GUISVM)
    assert isinstance(gui.hmm, GUIHMM)
    assert isinstance(gui.kernel, GUIKernel)
    assert isinstance(gui.observation, GUIObservation)
    assert isinstance(gui.preproc, GUIPreProc)
    assert isinstance(gui.features, GUIFeatures)
    assert all(c.gui is gui for c in gui.controllers().values())


def test_argv_is_not_aliased() -> None:
    argv = ["prog", "a"]
    gui = GUI(argv)
    argv.append("b")

    assert gui.argv == ("prog", "a")
    assert gui.argc == 2


def test_single_string_argv_is_rejected() -> None:
    with pytest.raises(ValidationError):
        GUI("prog --flag")


def test_controllers_are_listed_in_fixed_order(gui: GUI) -> None:
    assert list(gui.controllers()) == ["svm", "hmm", "kernel", "observation", "preproc", "features"]


def test_close_is_idempotent_and_closes_controllers_together() -> None:
    bus = EventBus()
    closed: list[GUIClosed] = []
    bus.subscribe(GUIClosed, closed.append)
    gui = GUI(["prog"], event_bus=bus)

    gui.close()
    gui.close()

    assert gui.closed
    assert all(c.closed for c in gui.controllers().values())
    assert all(c is not None for c in gui.controllers().values())
    assert closed == [GUIClosed(argc=1)]


def test_context_manager_closes_gui() -> None:
    with GUI(["prog"]) as gui:
        assert not gui.closed
    assert gui.closed


def test_closed_controller_rejects_changes() -> None:
    gui = GUI(["prog"])
    gui.close()

    with pytest.raises(InfrastructureError):
        gui.features.set_features("TRAIN", [[1.0]])


def test_controllers_do_not_keep_gui_alive() -> None:
    gui = GUI(["prog"])
    features = gui.features
    ref = weakref.ref(gui)

    del gui
    gc.collect()

    assert ref() is None
    with pytest.raises(InfrastructureError):
        _ = features.gui
