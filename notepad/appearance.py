from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Protocol

from notepad.infrastructure.filesystem import atomic_write_text
from notepad.logging_setup import log

DEFAULT_TEXT_COLOR = "#26AB2E"
DEFAULT_BACKGROUND_COLOR = "#2A2A2A"
DEFAULT_FONT = "CourierPrime"
FONT_SUFFIXES = (".ttf", ".otf")

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_color(value, default: str) -> str:
    """'26ab2e' / '#26AB2E' -> '#26AB2E'; anything else -> default."""
    m = _HEX_COLOR_RE.match(str(value or "").strip())
    if not m:
        return default
    return "#" + m.group(1).upper()


@dataclass
class NotepadSettings:
    text_color: str = DEFAULT_TEXT_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR
    selected_font: str = DEFAULT_FONT
    use_custom_font: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "NotepadSettings":
        known = {f.name for f in fields(cls)}
        raw = {k: v for k, v in (data or {}).items() if k in known}
        s = cls(**raw)
        s.text_color = normalize_color(s.text_color, DEFAULT_TEXT_COLOR)
        s.background_color = normalize_color(s.background_color, DEFAULT_BACKGROUND_COLOR)
        s.selected_font = str(s.selected_font or "").strip() or DEFAULT_FONT
        if not isinstance(s.use_custom_font, bool):
            s.use_custom_font = str(s.use_custom_font).strip().lower() in ("true", "1", "yes", "on")
        return s


class SettingsProvider(Protocol):
    def load_settings(self) -> NotepadSettings: ...

    def save_settings(self, settings: NotepadSettings) -> None: ...


class JsonSettingsProvider:
    """
    Settings asset stored as a JSON file next to the notes.

    A missing asset is created with defaults on first load; a corrupt one
    yields defaults and is left on disk for the user to inspect.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load_settings(self) -> NotepadSettings:
        if not self.path.exists():
            settings = NotepadSettings()
            log.info("Settings asset not found, creating defaults: %s", self.path)
            try:
                self.save_settings(settings)
            except OSError:
                log.exception("Failed to create settings asset: %s", self.path)
            return settings

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.exception("Failed to read settings asset: %s", self.path)
            return NotepadSettings()

        if not isinstance(data, dict):
            log.error("Settings asset is not an object: %s", self.path)
            return NotepadSettings()
        return NotepadSettings.from_dict(data)

    def save_settings(self, settings: NotepadSettings) -> None:
        text = json.dumps(settings.to_dict(), indent=2, ensure_ascii=False) + "\n"
        atomic_write_text(self.path, text, encoding="utf-8")
        log.info("Settings asset saved: %s", self.path)


def text_area_stylesheet(settings: NotepadSettings) -> str:
    return (
        "QPlainTextEdit {"
        f" color: {settings.text_color};"
        f" background-color: {settings.background_color};"
        " }"
    )


def list_font_names(fonts_dir: Path) -> list[str]:
    fonts_dir = Path(fonts_dir)
    if not fonts_dir.is_dir():
        return []
    return sorted(
        {p.stem for p in fonts_dir.iterdir() if p.is_file() and p.suffix.lower() in FONT_SUFFIXES},
        key=str.lower,
    )


def find_font_file(fonts_dir: Path, font_name: str) -> Path | None:
    for suffix in FONT_SUFFIXES:
        candidate = Path(fonts_dir) / f"{font_name}{suffix}"
        if candidate.is_file():
            return candidate
    return None
