"""
Entry point for the Qt-based toolkit GUI.

Run: python main.py [Qt options]
Requires: pip install -e .
"""
from __future__ import annotations

import sys

from mlgui.core.observability import setup_logging
from mlgui.gui import GUI
from mlgui.ui import (
    AppSettings,
    MainWindow,
    create_application,
    install_error_boundary,
    run_application,
)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = sys.argv if argv is None else argv
    gui = GUI(args)
    # QApplication consumes the same argv the aggregator captured.
    app = create_application(gui.argv)

    window = MainWindow(gui, AppSettings())
    install_error_boundary(window.show_message)
    window.show()

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
