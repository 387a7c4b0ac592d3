from __future__ import annotations

import argparse
from pathlib import Path

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from notepad.appearance import JsonSettingsProvider
from notepad.logging_setup import install_global_exception_hooks, log, SESSION_ID
from notepad.preferences import Preferences
from notepad.settings import APP_DIR, APP_NAME, NotepadConfig
from notepad.ui.main_window import NotepadWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Plain-text notepad")
    p.add_argument(
        "--root",
        type=Path,
        default=APP_DIR,
        help="Notepad folder (holds Notes/, Fonts/ and NotepadSettings.json)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    install_global_exception_hooks()

    config = NotepadConfig(root=args.root.expanduser())
    config.ensure()

    app = QApplication([])
    provider = JsonSettingsProvider(config.settings_path)
    prefs = Preferences(
        QSettings(APP_NAME, APP_NAME),
        custom_font_default=provider.load_settings().use_custom_font,
    )

    win = NotepadWindow(config=config, prefs=prefs, settings_provider=provider)
    win.resize(720, 560)
    win.show()
    log.info("Notepad started, root=%s SID=%s", config.root, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
