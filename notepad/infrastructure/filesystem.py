# notepad/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from datetime import datetime
from pathlib import Path

from notepad.settings import RECOVERY_DIR


# ───────────────────────── public API ─────────────────────────

def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Prevents partial writes on crash/power loss.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_name = f".{path.name}.tmp-{uuid.uuid4().hex}"
    tmp_path = parent / tmp_name

    f = None
    try:
        f = open(tmp_path, "w", encoding=encoding, newline="")
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        try:
            if f is not None:
                f.close()
        except Exception:
            pass

        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except Exception:
            pass


def write_recovery_copy(note_path: Path, text: str, *, recovery_dir: Path = RECOVERY_DIR) -> Path:
    """
    Best-effort emergency save when normal save fails.

    Writes timestamped copy into:
      ~/.notepad/recovery/
    """
    note_path = Path(note_path)

    stem = note_path.stem or "Untitled"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")

    recovery_path = Path(recovery_dir) / f"{stem}.recovery.{ts}{note_path.suffix or '.txt'}"
    atomic_write_text(recovery_path, text, encoding="utf-8")

    return recovery_path
