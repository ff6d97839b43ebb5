"""Aggregator and controllers of the toolkit GUI."""

from .context import GUI
from .controllers import (
    GUIController,
    GUIFeatures,
    GUIHMM,
    GUIKernel,
    GUIObservation,
    GUIPreProc,
    GUISVM,
)

__all__ = [
    "GUI",
    "GUIController",
    "GUIFeatures",
    "GUIHMM",
    "GUIKernel",
    "GUIObservation",
    "GUIPreProc",
    "GUISVM",
]
