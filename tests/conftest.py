"""Pytest configuration and shared fixtures."""
import pytest

from notepad_pro.config import NotepadConfig
from notepad_pro.notes import SAMPLE_NOTES, create_note_store
from notepad_pro.session import SessionGate
from notepad_pro.ui import NotepadProApp


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep NOTEPAD_PRO_* variables from the shell out of the tests."""
    for name in ("NOTEPAD_PRO_LOG_LEVEL", "NOTEPAD_PRO_THEME", "NOTEPAD_PRO_START_ROUTE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gate():
    """Return a fresh, unauthenticated session gate."""
    return SessionGate()


@pytest.fixture
def store():
    """Return the sample note store."""
    return create_note_store("sample")


@pytest.fixture
def sample_notes():
    """Return the sample notes as a list."""
    return list(SAMPLE_NOTES)


@pytest.fixture
def tui_app():
    """Return a TUI app with default config."""
    return NotepadProApp(config=NotepadConfig())
