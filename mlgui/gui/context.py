"""Composition root of the toolkit GUI.

``GUI`` owns one controller per toolkit subsystem and the argument vector the
process was started with. Controllers hold only a weak handle back to it and
talk to their siblings through that handle.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType

from mlgui.core.errors import ValidationError
from mlgui.core.events import EventBus, GUIClosed

from .controllers import (
    GUIController,
    GUIFeatures,
    GUIHMM,
    GUIKernel,
    GUIObservation,
    GUIPreProc,
    GUISVM,
)

logger = logging.getLogger(__name__)


class GUI:
    """Aggregator of the SVM, HMM, kernel, observation, preprocessing and feature controllers."""

    def __init__(self, argv: Sequence[str], *, event_bus: EventBus | None = None) -> None:
        if isinstance(argv, (str, bytes)):
            raise ValidationError("argv must be a sequence of arguments, not a single string")
        self._argv: tuple[str, ...] = tuple(argv)
        self._closed = False
        # Controllers subscribe to the bus while being constructed.
        self.event_bus = event_bus if event_bus is not None else EventBus()

        self.svm = GUISVM(self)
        self.hmm = GUIHMM(self)
        self.kernel = GUIKernel(self)
        self.observation = GUIObservation(self)
        self.preproc = GUIPreProc(self)
        self.features = GUIFeatures(self)
        logger.info("GUI initialised", extra={"argc": self.argc})

    @property
    def argc(self) -> int:
        return len(self._argv)

    @property
    def argv(self) -> tuple[str, ...]:
        return self._argv

    @property
    def closed(self) -> bool:
        return self._closed

    def controllers(self) -> dict[str, GUIController]:
        return {
            "svm": self.svm,
            "hmm": self.hmm,
            "kernel": self.kernel,
            "observation": self.observation,
            "preproc": self.preproc,
            "features": self.features,
        }

    def close(self) -> None:
        """Close every controller together. Idempotent."""
        if self._closed:
            return
        for controller in self.controllers().values():
            controller.close()
        self._closed = True
        logger.info("GUI closed")
        self.event_bus.publish(GUIClosed(argc=self.argc))

    def __enter__(self) -> GUI:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<GUI argc={self.argc} closed={self._closed}>"
