from __future__ import annotations

from collections.abc import Iterator

import pytest

from mlgui.gui import GUI


@pytest.fixture
def gui() -> Iterator[GUI]:
    with GUI(["mlgui", "--verbose"]) as g:
        yield g
