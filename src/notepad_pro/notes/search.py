"""Note filtering for the search screen."""

from collections.abc import Iterable

from .models import Note

# Suggested queries shown as chips above the search results
SEARCH_CHIPS = ("research", "security", "today")


def matches(note: Note, query: str) -> bool:
    """Case-insensitive substring match against title or snippet."""
    needle = query.lower()
    return needle in note.title.lower() or needle in note.snippet.lower()


def filter_notes(notes: Iterable[Note], query: str) -> list[Note]:
    """Return the notes matching `query`, keeping their order.

    An empty query matches every note.
    """
    return [note for note in notes if matches(note, query)]
