"""Factory for creating note stores."""

from typing import Any

from .base import NoteStore


def create_note_store(backend: str = "sample", **kwargs: Any) -> NoteStore:
    """Create a note store.

    Args:
        backend: Backend type ("sample" currently supported)
        **kwargs: Backend-specific configuration

    Returns:
        NoteStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "sample":
        from .sample import SampleNoteStore
        return SampleNoteStore(**kwargs)

    raise ValueError(
        f"Unsupported note store backend: {backend}. "
        f"Supported backends: sample"
    )
