"""Application entry point for the toxgui desktop client."""

from __future__ import annotations

import argparse
import logging
import sys


def run():
    """Launch the toxgui application.

    Supports ``--config-dir <path>`` to use another preference directory and
    ``--debug`` for verbose logging, e.g.::

        toxgui --config-dir /tmp/tox-profile --debug
    """
    parser = argparse.ArgumentParser(description="toxgui", add_help=False)
    parser.add_argument("--config-dir", default=None, help="Directory holding settings.ini")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args, remaining = parser.parse_known_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from PyQt6.QtWidgets import QApplication

    app = QApplication([sys.argv[0]] + remaining)
    app.setApplicationName("toxgui")

    from toxgui import __version__
    app.setApplicationVersion(__version__)

    # One store for the whole process, created after QApplication so the
    # default emoji font size follows the application font
    from toxgui.gui.settings import SettingsStore
    store = SettingsStore(config_dir=args.config_dir)
    store.load()
    app.aboutToQuit.connect(store.save)

    from toxgui.gui.main_window import MainWindow

    window = MainWindow(store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
