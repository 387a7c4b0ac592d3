from .errors import NameConflictError, NoteIOError, NoteNotFoundError, NotepadError
from .notes.catalog import FileCatalog
from .notes.repo import NotesDirectory
from .session import NoteSession, SessionState

__all__ = ["FileCatalog",
           "NotesDirectory",
           "NoteSession",
           "SessionState",
           "NotepadError",
           "NoteNotFoundError",
           "NoteIOError",
           "NameConflictError"
           ]
