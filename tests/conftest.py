import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging

import pytest

from notepad.notes.catalog import FileCatalog
from notepad.notes.repo import NotesDirectory
from notepad.session import NoteSession
from notepad.settings import APP_NAME


class FakePrompter:
    """Answers yes/no prompts from a queue and records every dialog."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.questions = []
        self.notices = []

    def ask_yes_no(self, title, message):
        self.questions.append((title, message))
        return self.answers.pop(0) if self.answers else False

    def notify(self, title, message):
        self.notices.append((title, message))


@pytest.fixture
def notes_dir(tmp_path):
    d = tmp_path / "Notes"
    d.mkdir()
    return d


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def make_session(notes_dir, prompter):
    def _make(**kwargs):
        return NoteSession(
            catalog=FileCatalog(notes_dir),
            notes=NotesDirectory(notes_dir),
            prompter=kwargs.pop("prompter", prompter),
            **kwargs,
        )
    return _make


@pytest.fixture
def app_log(caplog):
    # the app logger does not propagate, so hook caplog onto it directly
    logger = logging.getLogger(APP_NAME)
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def recovered(monkeypatch, tmp_path):
    copies = []

    def fake_recovery(path, text):
        copies.append((path.name, text))
        return tmp_path / "recovery.txt"

    monkeypatch.setattr("notepad.session.write_recovery_copy", fake_recovery)
    return copies
