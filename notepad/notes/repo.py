from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from notepad.errors import NameConflictError, NoteIOError, NoteNotFoundError
from notepad.infrastructure.filesystem import atomic_write_text


@dataclass(frozen=True)
class NotesDirectory:
    notes_dir: Path

    def path_for(self, name: str) -> Path:
        return self.notes_dir / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> str:
        path = self.path_for(name)
        if not path.is_file():
            raise NoteNotFoundError(str(path))
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise NoteIOError(f"{path}: {e}") from e

    def write(self, name: str, text: str) -> None:
        path = self.path_for(name)
        try:
            atomic_write_text(path, text, encoding="utf-8")
        except OSError as e:
            raise NoteIOError(f"{path}: {e}") from e

    def create_empty(self, name: str) -> Path:
        path = self.path_for(name)
        if path.exists():
            raise NameConflictError(name)
        self.write(name, "")
        return path
