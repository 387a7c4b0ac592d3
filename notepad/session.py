from __future__ import annotations

import enum
from typing import Callable, List, Optional, Protocol, Sequence

from notepad.core.filenames import is_metadata_sidecar, safe_filename
from notepad.errors import NameConflictError, NoteIOError, NoteNotFoundError
from notepad.infrastructure.filesystem import write_recovery_copy
from notepad.logging_setup import log
from notepad.notes.catalog import FileCatalog
from notepad.notes.repo import NotesDirectory
from notepad.settings import (
    CREATE_NEW_FILE_DIALOG,
    FILE_EXISTS_MESSAGE,
    FILE_EXISTS_TITLE,
    FILE_NOT_FOUND,
    LOAD_ERROR,
    NEW_NOTE_DEFAULT_NAME,
    NOTE_EXTENSION,
    NOTEPAD_TITLE,
    RESERVED_NAME_MESSAGE,
    SAVE_ERROR,
    UNSAVED_CHANGES,
    UNSAVED_CLOSE_MESSAGE,
    UNSAVED_MESSAGE,
    UNSAVED_NEW_FILE_MESSAGE,
)


class SessionState(enum.Enum):
    CLEAN = "clean"
    DIRTY = "dirty"


class Prompter(Protocol):
    def ask_yes_no(self, title: str, message: str) -> bool: ...

    def notify(self, title: str, message: str) -> None: ...


Listener = Callable[[], None]


class NoteSession:
    """
    In-memory state of the open note: buffer, dirty flag and selection.

    Every operation that would replace the note behind the buffer (switching,
    creating, closing) goes through confirm_discard_if_dirty() first.
    Storage errors are logged and reported through return values; none of
    them escape to the caller.
    """

    def __init__(
        self,
        *,
        catalog: FileCatalog,
        notes: NotesDirectory,
        prompter: Prompter,
        on_disk_changed: Optional[Callable[[], None]] = None,
        default_name: str = NEW_NOTE_DEFAULT_NAME + NOTE_EXTENSION,
    ) -> None:
        self.catalog = catalog
        self.notes = notes
        self.prompter = prompter
        self._on_disk_changed = on_disk_changed
        self.default_name = default_name

        self.current_name: str = default_name
        self.text: str = ""
        self.dirty = False
        self.selected_index = -1
        # False when the selected file could not be read; save() then refuses to write over it
        self.readable = True
        self._listeners: List[Listener] = []

    # ───────────────────────── observers ─────────────────────────

    def on_changed(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                log.exception("Session listener failed: %r", listener)

    def _disk_changed(self) -> None:
        if self._on_disk_changed is None:
            return
        try:
            self._on_disk_changed()
        except Exception:
            log.exception("Disk-changed hook failed")

    # ───────────────────────── properties ─────────────────────────

    @property
    def state(self) -> SessionState:
        return SessionState.DIRTY if self.dirty else SessionState.CLEAN

    @property
    def files(self) -> Sequence[str]:
        return self.catalog.names

    @property
    def title(self) -> str:
        return NOTEPAD_TITLE + (" *" if self.dirty else "")

    # ───────────────────────── lifecycle ─────────────────────────

    def init(self, preferred: str | None = None) -> None:
        files = self.catalog.refresh()
        if files:
            self._open_first_readable(files, preferred=preferred)
        else:
            self._reset_to_default()
        self._notify()

    def dispose(self) -> None:
        self.confirm_discard_if_dirty(UNSAVED_CLOSE_MESSAGE)
        self._listeners.clear()

    # ───────────────────────── operations ─────────────────────────

    def open(self, name: str) -> bool:
        if not self._load(name):
            return False
        self._notify()
        return True

    def edit(self, new_text: str) -> None:
        if new_text == self.text:
            return
        self.text = new_text
        self.dirty = True
        self._notify()

    def save(self) -> bool:
        name = self.current_name
        if not self.readable:
            log.error("%srefusing to overwrite unreadable note %s", SAVE_ERROR, name)
            self._write_recovery(name)
            return False
        try:
            self.notes.write(name, self.text)
        except NoteIOError as e:
            log.error("%s%s", SAVE_ERROR, e)
            self._write_recovery(name)
            return False

        self.dirty = False
        log.info("Note saved: %s", name)
        self._disk_changed()
        if name not in self.catalog:
            self.catalog.refresh()
        self.selected_index = self.catalog.index_of(name)
        self._notify()
        return True

    def confirm_discard_if_dirty(self, message: str = UNSAVED_MESSAGE) -> bool:
        """
        Ask before the buffer is thrown away.

        Returns False only when the user chose to save and the save failed;
        the caller must then keep the buffer.
        """
        if not self.dirty:
            return True
        if self.prompter.ask_yes_no(UNSAVED_CHANGES, message):
            return self.save()
        log.info("Unsaved changes discarded: %s", self.current_name)
        return True

    def switch_to(self, name: str) -> bool:
        if name == self.current_name and self.selected_index == self.catalog.index_of(name):
            return True

        if not self.confirm_discard_if_dirty(UNSAVED_MESSAGE):
            return False
        if not self._load(name):
            return False
        self.selected_index = self.catalog.index_of(name)
        self._notify()
        return True

    def select_index(self, index: int) -> bool:
        if index == self.selected_index:
            return False
        files = self.catalog.names
        if not 0 <= index < len(files):
            log.debug("Ignoring out-of-range selection: %d (files=%d)", index, len(files))
            return False
        return self.switch_to(files[index])

    def create_new(self, name: str) -> bool:
        name = safe_filename(name)
        if is_metadata_sidecar(name, suffix=self.catalog.meta_suffix):
            log.info("New note rejected, reserved suffix: %s", name)
            self.prompter.notify(CREATE_NEW_FILE_DIALOG, RESERVED_NAME_MESSAGE)
            return False
        if self.notes.exists(name):
            log.info("New note rejected, already exists: %s", name)
            self.prompter.notify(FILE_EXISTS_TITLE, FILE_EXISTS_MESSAGE)
            return False

        if not self.confirm_discard_if_dirty(UNSAVED_NEW_FILE_MESSAGE):
            return False
        try:
            self.notes.create_empty(name)
        except NameConflictError:
            self.prompter.notify(FILE_EXISTS_TITLE, FILE_EXISTS_MESSAGE)
            return False
        except NoteIOError as e:
            log.error("%s%s", SAVE_ERROR, e)
            return False

        log.info("New note created: %s", name)
        self._disk_changed()
        self.catalog.refresh()
        if not self._load(name):
            return False
        self.selected_index = self.catalog.index_of(name)
        self._notify()
        return True

    def reload(self) -> None:
        files = self.catalog.refresh()
        idx = self.catalog.index_of(self.current_name)
        if idx == -1 and self.dirty:
            # saving recreates the vanished file
            self.confirm_discard_if_dirty(UNSAVED_MESSAGE)
            idx = self.catalog.index_of(self.current_name)
            files = list(self.catalog.names)

        if idx != -1:
            self.selected_index = idx
        elif files:
            self._open_first_readable(files)
        else:
            self._reset_to_default()
        self._notify()

    # ───────────────────────── internals ─────────────────────────

    def _load(self, name: str) -> bool:
        try:
            text = self.notes.read(name)
        except NoteNotFoundError:
            log.warning("%s%s", FILE_NOT_FOUND, self.notes.path_for(name))
            return False
        except NoteIOError as e:
            log.error("%s%s", LOAD_ERROR, e)
            return False

        self.current_name = name
        self.text = text
        self.dirty = False
        self.readable = True
        log.info("Note opened: %s (%d chars)", name, len(text))
        return True

    def _open_first_readable(self, files: Sequence[str], *, preferred: str | None = None) -> None:
        candidates = list(files)
        if preferred in candidates:
            candidates.remove(preferred)
            candidates.insert(0, preferred)

        for name in candidates:
            if self._load(name):
                self.selected_index = self.catalog.index_of(name)
                return

        # nothing loads: stay on the first entry but never write over it
        log.error("%sno readable note in %s", LOAD_ERROR, self.catalog.notes_dir)
        self.current_name = files[0]
        self.text = ""
        self.dirty = False
        self.readable = False
        self.selected_index = 0

    def _write_recovery(self, name: str) -> None:
        try:
            rec_path = write_recovery_copy(self.notes.path_for(name), self.text)
            log.critical("Recovery copy written: %s", rec_path)
        except OSError:
            log.exception("Failed to write recovery copy")

    def _reset_to_default(self) -> None:
        self.current_name = self.default_name
        self.text = ""
        self.dirty = False
        self.readable = True
        self.selected_index = -1
