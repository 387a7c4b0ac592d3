from __future__ import annotations


class NotepadError(Exception):
    """Base class for errors raised by the notes storage layer."""


class NoteNotFoundError(NotepadError):
    """The notes directory or a note file is missing."""


class NoteIOError(NotepadError):
    """Reading or writing a note failed."""


class NameConflictError(NotepadError):
    """A note with the requested name already exists."""

    def __init__(self, name: str):
        super().__init__(f"A note named {name!r} already exists")
        self.name = name
