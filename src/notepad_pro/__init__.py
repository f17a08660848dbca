"""
Notepad Pro: a note-taking app shell for the terminal.

Login with a placeholder Gemini key, browse sample notes, search them,
draft in the editor and flip settings. All state is in memory only.
"""

__version__ = "0.1.0"

from .errors import EmptyKeyError, NotepadError, UnknownRouteError, UnknownSettingError
from .notes import Note, NoteStore, create_note_store, filter_notes
from .router import Route, resolve_route
from .session import LockState, Session, SessionGate
from .settings import AppSettings

__all__ = [
    "AppSettings",
    "EmptyKeyError",
    "LockState",
    "Note",
    "NoteStore",
    "NotepadError",
    "Route",
    "Session",
    "SessionGate",
    "UnknownRouteError",
    "UnknownSettingError",
    "create_note_store",
    "filter_notes",
    "resolve_route",
]
