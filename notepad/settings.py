from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

APP_NAME = "notepad"
APP_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
RECOVERY_DIR = APP_DIR / "recovery"

# Layout under the notepad root
NOTES_DIRNAME = "Notes"
FONTS_DIRNAME = "Fonts"
SETTINGS_ASSET_NAME = "NotepadSettings.json"
META_SUFFIX = ".meta"
NOTE_EXTENSION = ".txt"
NEW_NOTE_DEFAULT_NAME = "NewNote"

FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 30
FONT_SIZE_DEFAULT = 14

# Menu
MENU_TITLE = "Notepad"
MENU_CUSTOM_FONT = "Toggle Monospace Font"
MENU_SETTINGS = "Notepad Settings…"

# Dialogs
UNSAVED_CHANGES = "Unsaved Changes"
UNSAVED_MESSAGE = "You have unsaved changes. Do you want to save before discarding and changing to another file?"
UNSAVED_NEW_FILE_MESSAGE = "You have unsaved changes. Do you want to save before creating a new file?"
UNSAVED_CLOSE_MESSAGE = "You have unsaved changes. Do you want to save before closing?"
FILE_EXISTS_TITLE = "File Exists"
RESERVED_NAME_MESSAGE = "Names ending in .meta are reserved for metadata files. Please choose a different name."
FILE_EXISTS_MESSAGE = "A file with that name already exists. Please choose a different name."
CREATE_NEW_FILE_DIALOG = "Create New File"

# Labels
NOTEPAD_TITLE = "Notepad"
SELECT_FILE = "Select File:"
FONT_SIZE_LABEL = "Font Size:"

# Errors
SAVE_ERROR = "Failed to save Notepad: "
LOAD_ERROR = "Failed to load Notepad: "
FONT_LOAD_ERROR = "Failed to load custom font"
FILE_NOT_FOUND = "Notepad file not found: "
NOTES_FOLDER_NOT_FOUND = "Notes folder not found: "


@dataclass(frozen=True)
class NotepadConfig:
    root: Path = APP_DIR

    @property
    def notes_dir(self) -> Path:
        return self.root / NOTES_DIRNAME

    @property
    def fonts_dir(self) -> Path:
        return self.root / FONTS_DIRNAME

    @property
    def settings_path(self) -> Path:
        return self.root / SETTINGS_ASSET_NAME

    def ensure(self) -> None:
        self.notes_dir.mkdir(parents=True, exist_ok=True)
