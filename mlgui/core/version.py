"""Version shown in the main window title and reported by ``QApplication``.

mlgui runs from a source checkout or an installed wheel; neither carries git
metadata at runtime, so release scripts export ``MLGUI_*`` variables instead.
"""

from __future__ import annotations

import os

DEV_VERSION = "0.0.0-dev"


def get_build_info() -> dict[str, str]:
    """Return ``version``, ``git_sha`` and ``build_date``.

    Read from MLGUI_VERSION, MLGUI_GIT_SHA and MLGUI_BUILD_DATE; blank values
    fall back to the development defaults.
    """

    return {
        "version": os.getenv("MLGUI_VERSION", "").strip() or DEV_VERSION,
        "git_sha": os.getenv("MLGUI_GIT_SHA", "").strip() or "dev",
        "build_date": os.getenv("MLGUI_BUILD_DATE", "").strip(),
    }


def get_version_string() -> str:
    info = get_build_info()
    details = ", ".join(v for v in (info["git_sha"], info["build_date"]) if v)
    return f"v{info['version']} ({details})"
