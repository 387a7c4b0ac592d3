import pytest

from notepad.errors import NameConflictError, NoteNotFoundError
from notepad.notes.repo import NotesDirectory


def test_read_missing_raises_not_found(notes_dir):
    with pytest.raises(NoteNotFoundError):
        NotesDirectory(notes_dir).read("nope.txt")


def test_write_is_utf8_and_leaves_no_temp_files(notes_dir):
    repo = NotesDirectory(notes_dir)
    repo.write("u.txt", "привет\n")

    assert (notes_dir / "u.txt").read_text(encoding="utf-8") == "привет\n"
    assert [p.name for p in notes_dir.iterdir()] == ["u.txt"]


def test_create_empty_refuses_existing(notes_dir):
    repo = NotesDirectory(notes_dir)
    repo.create_empty("n.txt")

    assert repo.exists("n.txt")
    with pytest.raises(NameConflictError):
        repo.create_empty("n.txt")
