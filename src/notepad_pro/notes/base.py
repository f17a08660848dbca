"""Abstract base class for note stores.

The abstraction hides where notes come from. Only a fixed sample
backend exists; a persistent store would implement the same interface.
"""

from abc import ABC, abstractmethod

from .models import Note
from .search import filter_notes


class NoteStore(ABC):
    """Read-only source of notes for the UI."""

    @abstractmethod
    def list_notes(self) -> list[Note]:
        """Return all notes in display order."""

    def filter_notes(self, query: str) -> list[Note]:
        """Return notes whose title or snippet contains `query`."""
        return filter_notes(self.list_notes(), query)

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
