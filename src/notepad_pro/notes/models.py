from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """A note as shown in the note lists.

    Notes have no identity or primary key; two notes with equal fields
    are indistinguishable.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Note title")
    snippet: str = Field(description="Preview of the note body")
    tags: tuple[str, ...] = Field(default=(), description="Ordered tag labels")
    timestamp: str = Field(description="Display label such as 'Today'")


class NoteDraft(BaseModel):
    """Editor state for a note being written. Never saved."""

    title: str = "Untitled"
    content: str = ""
