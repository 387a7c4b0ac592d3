from __future__ import annotations

import re
import unicodedata
import uuid

from notepad.settings import NOTE_EXTENSION


_WINDOWS_RESERVED = {"con", "prn", "aux", "nul"} | {f"com{i}" for i in range(1, 10)} | {f"lpt{i}" for i in range(1, 10)}


def safe_filename(name: str | None, *, default_ext: str = NOTE_EXTENSION, max_len: int = 120) -> str:
    """
    Make a filesystem-safe note file name (cross-platform).

    Only the last path component of ``name`` is kept, so a full path picked
    in a save dialog collapses to its file name. ``default_ext`` is appended
    when the name has no extension.
    """
    if name is None:
        return f"Untitled-{uuid.uuid4().hex[:6]}{default_ext}"

    s = unicodedata.normalize("NFKC", str(name))
    s = "".join(ch for ch in s if unicodedata.category(ch)[0] != "C")
    s = s.replace("\\", "/").rsplit("/", 1)[-1]
    s = s.strip()
    s = re.sub(r'[<>:"|?*]', "_", s)
    s = re.sub(r"\s+", " ", s)
    s = s.rstrip(" .")
    s = s.lstrip(".")

    if not s:
        s = f"Untitled-{uuid.uuid4().hex[:6]}"

    base = s.split(".")[0].strip().lower()
    if base in _WINDOWS_RESERVED:
        s = f"_{s}"

    stem, dot, ext = s.rpartition(".")
    if not dot:
        stem, ext = s, ""
        if len(stem) > max_len:
            stem = stem[:max_len].rstrip(" .")
        return stem + default_ext

    if len(stem) > max_len:
        stem = stem[:max_len].rstrip(" .")
    return f"{stem}.{ext}"


def is_metadata_sidecar(name: str, *, suffix: str) -> bool:
    return name.endswith(suffix)
