from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SubsystemChanged:
    """State held by one controller changed.

    ``subsystem`` is the controller name (``svm``, ``kernel``, ...), ``action`` a
    short verb (``set``, ``clear``, ``train``, ...), ``target`` the data target
    when the change concerns one.
    """

    subsystem: str
    action: str
    target: str | None = None


@dataclass(frozen=True, slots=True)
class GUIClosed:
    argc: int
