from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Sequence

from notepad.core.filenames import is_metadata_sidecar
from notepad.logging_setup import log
from notepad.settings import META_SUFFIX, NOTES_FOLDER_NOT_FOUND


class FileCatalog:
    """
    Ordered list of note file names in the notes directory.

    Order is the directory enumeration order, not sorted. The list is rebuilt
    wholesale on every refresh().
    """

    def __init__(self, notes_dir: Path, *, meta_suffix: str = META_SUFFIX) -> None:
        self.notes_dir = Path(notes_dir)
        self.meta_suffix = meta_suffix
        self._names: List[str] = []

    @property
    def names(self) -> Sequence[str]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def refresh(self) -> List[str]:
        if not self.notes_dir.is_dir():
            self._names = []
            log.warning("%s%s", NOTES_FOLDER_NOT_FOUND, self.notes_dir)
            return []

        try:
            with os.scandir(self.notes_dir) as it:
                names = [
                    entry.name
                    for entry in it
                    if entry.is_file() and not is_metadata_sidecar(entry.name, suffix=self.meta_suffix)
                ]
        except OSError:
            log.exception("Failed to list notes folder: %s", self.notes_dir)
            self._names = []
            return []

        self._names = names
        log.debug("Catalog refreshed: dir=%s count=%d", self.notes_dir, len(names))
        return list(names)

    def index_of(self, name: str | None) -> int:
        if name is None:
            return -1
        try:
            return self._names.index(name)
        except ValueError:
            return -1
