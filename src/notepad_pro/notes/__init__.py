"""Note store module for notepad_pro.

Provides the note model, the sample note backend and search filtering.
"""

from .base import NoteStore
from .factory import create_note_store
from .models import Note, NoteDraft
from .sample import SAMPLE_NOTES, SampleNoteStore
from .search import SEARCH_CHIPS, filter_notes

__all__ = [
    "Note",
    "NoteDraft",
    "NoteStore",
    "SAMPLE_NOTES",
    "SEARCH_CHIPS",
    "SampleNoteStore",
    "create_note_store",
    "filter_notes",
]
