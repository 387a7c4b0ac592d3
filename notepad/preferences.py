from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from notepad.logging_setup import log
from notepad.settings import FONT_SIZE_DEFAULT, FONT_SIZE_MAX, FONT_SIZE_MIN


class KeyValueStore(Protocol):
    """The subset of QSettings the preferences layer relies on."""

    def value(self, key: str, defaultValue: Any = None) -> Any: ...

    def setValue(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True)
class SettingsKeys:
    USE_CUSTOM_FONT: str = "notepad/use_custom_font"
    FONT_SIZE: str = "notepad/font_size"
    LAST_NOTE: str = "nav/last_note"
    UI_GEOMETRY: str = "ui/geometry"


def get_str(settings: KeyValueStore, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: KeyValueStore, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default


def get_bool(settings: KeyValueStore, key: str, default: bool) -> bool:
    # QSettings ini backends hand booleans back as "true"/"false" strings
    try:
        val = settings.value(key, default)
    except Exception:
        return default
    if isinstance(val, bool):
        return val
    if isinstance(val, (int, float)):
        return bool(val)
    if isinstance(val, str):
        v = val.strip().lower()
        if v in ("true", "1", "yes", "on"):
            return True
        if v in ("false", "0", "no", "off"):
            return False
    return default


def safe_set_setting(settings: KeyValueStore, key: str, value) -> None:
    """Best-effort write that never breaks the UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        log.exception("Failed to write preference: %s", key)


def clamp_font_size(size: int | str) -> int:
    try:
        size_i = int(size)
    except Exception:
        return FONT_SIZE_DEFAULT
    return max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, size_i))


class Preferences:
    """
    Host-wide key/value preferences of the notepad.

    The store is passed in explicitly; the app hands over a QSettings,
    tests a plain in-memory object.
    """

    def __init__(self, store: KeyValueStore, *, custom_font_default: bool = True) -> None:
        self._store = store
        self._custom_font_default = custom_font_default

    @property
    def use_custom_font(self) -> bool:
        return get_bool(self._store, SettingsKeys.USE_CUSTOM_FONT, self._custom_font_default)

    @use_custom_font.setter
    def use_custom_font(self, value: bool) -> None:
        safe_set_setting(self._store, SettingsKeys.USE_CUSTOM_FONT, bool(value))

    def toggle_custom_font(self) -> bool:
        new_value = not self.use_custom_font
        self.use_custom_font = new_value
        log.info("Custom font toggled: %s", new_value)
        return new_value

    @property
    def font_size(self) -> int:
        return clamp_font_size(get_int(self._store, SettingsKeys.FONT_SIZE, FONT_SIZE_DEFAULT))

    @font_size.setter
    def font_size(self, value: int) -> None:
        safe_set_setting(self._store, SettingsKeys.FONT_SIZE, clamp_font_size(value))

    @property
    def last_note(self) -> str:
        return get_str(self._store, SettingsKeys.LAST_NOTE, "")

    @last_note.setter
    def last_note(self, name: str) -> None:
        safe_set_setting(self._store, SettingsKeys.LAST_NOTE, name or "")

    @property
    def geometry(self):
        try:
            return self._store.value(SettingsKeys.UI_GEOMETRY)
        except Exception:
            return None

    @geometry.setter
    def geometry(self, value) -> None:
        safe_set_setting(self._store, SettingsKeys.UI_GEOMETRY, value)
