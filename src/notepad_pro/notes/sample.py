"""Hardcoded sample note backend.

The note list is fixed at import time and never mutated.
"""

from .base import NoteStore
from .models import Note

SAMPLE_NOTES: tuple[Note, ...] = (
    Note(
        title="Research Sprint",
        snippet="Summarize model eval metrics and benchmark outcomes...",
        tags=("research", "ai"),
        timestamp="Today",
    ),
    Note(
        title="API Security Checklist",
        snippet="Gemini key verification and E2E encryption status...",
        tags=("security", "backend"),
        timestamp="Yesterday",
    ),
    Note(
        title="Writing Plan",
        snippet="Draft chapter outline with code snippets and references...",
        tags=("writing",),
        timestamp="2 days ago",
    ),
)


class SampleNoteStore(NoteStore):
    """Serves the built-in sample notes."""

    def __init__(self, notes: tuple[Note, ...] = SAMPLE_NOTES):
        self._notes = tuple(notes)

    def list_notes(self) -> list[Note]:
        return list(self._notes)

    @property
    def backend_type(self) -> str:
        return "sample"
