from .base import GUIController, normalize_target
from .features import GUIFeatures
from .hmm import GUIHMM
from .kernel import GUIKernel
from .observation import GUIObservation
from .preproc import GUIPreProc
from .svm import GUISVM

__all__ = [
    "GUIController",
    "GUIFeatures",
    "GUIHMM",
    "GUIKernel",
    "GUIObservation",
    "GUIPreProc",
    "GUISVM",
    "normalize_target",
]
