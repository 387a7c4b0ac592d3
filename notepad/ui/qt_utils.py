from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path

from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import QApplication

from notepad.appearance import find_font_file
from notepad.logging_setup import log
from notepad.settings import FONT_LOAD_ERROR


@contextmanager
def blocked_signals(obj):
    """
    Temporarily block an object's Qt signals and always turn them back on.
    """
    if obj is None:
        yield
        return
    try:
        obj.blockSignals(True)
        yield
    finally:
        try:
            obj.blockSignals(False)
        except Exception:
            # the object may already be destroyed by Qt
            pass


_loaded_families: dict[Path, str] = {}


def load_custom_font(fonts_dir: Path, font_name: str, point_size: int) -> QFont:
    """
    Load ``<fonts_dir>/<font_name>.ttf|.otf`` into the app font database.

    Falls back to the system fixed-pitch font if the file is missing or Qt
    refuses it.
    """
    path = find_font_file(fonts_dir, font_name)
    family = _loaded_families.get(path) if path is not None else None

    if path is not None and family is None:
        font_id = QFontDatabase.addApplicationFont(str(path))
        families = QFontDatabase.applicationFontFamilies(font_id) if font_id != -1 else []
        if families:
            family = families[0]
            _loaded_families[path] = family
            log.info("Custom font loaded: %s (%s)", family, path)

    if family is None:
        log.error("%s: %s in %s", FONT_LOAD_ERROR, font_name, fonts_dir)
        return fixed_font(point_size)

    font = QFont(family)
    font.setPointSize(point_size)
    return font


def fixed_font(point_size: int) -> QFont:
    font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
    font.setPointSize(point_size)
    return font


def default_font(point_size: int) -> QFont:
    font = QFont(QApplication.font())
    font.setPointSize(point_size)
    return font
