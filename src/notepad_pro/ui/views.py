"""The four route views shown inside the main screen.

Each view renders its own piece of state and asks the main screen for
anything that crosses views (navigation, lock toggle, logout) by posting
a message.
"""

from collections.abc import Callable

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, Static, Switch, TextArea

from ..notes import SEARCH_CHIPS, Note, NoteDraft
from ..router import Route
from ..session import LockState
from ..settings import KEY_STATUS_SUBTITLE, KEY_STATUS_TITLE, TOGGLES
from .config import (
    EDITOR_LOCKED_NOTICE,
    LANDING_LOCKED_NOTICE,
    LOCK_LABEL,
    SEARCH_LOCKED_NOTICE,
    UNLOCK_LABEL,
)
from .widgets import LockedNotice, NoteCard, SettingsItem, SettingsToggle

TOGGLE_ICONS = {
    "dark_mode": "◐",
    "notifications": "♪",
    "cloud_sync": "☁",
}


class NavigateRequested(Message):
    """Posted by a view that wants another route shown."""

    def __init__(self, route: Route) -> None:
        super().__init__()
        self.route = route


class LockToggleRequested(Message):
    """Posted when the user presses a lock toggle."""


class LogoutRequested(Message):
    """Posted when the user presses Logout."""


async def show_notes(container: VerticalScroll, notes: list[Note], unlocked: bool) -> None:
    """Replace the cards in `container` with one card per note."""
    await container.remove_children()
    await container.mount_all([NoteCard(note, unlocked) for note in notes])


class LandingView(Vertical):
    """Home route: quick actions and recent notes."""

    BORDER_TITLE = "Notepad Pro"

    def __init__(self, notes: list[Note], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._notes = notes
        self._lock_state = LockState.LOCKED

    def compose(self):
        yield Static("Quick Actions", classes="section-title")
        with Horizontal(id="quick-actions"):
            yield Button("+ Create Note", id="create-note", variant="primary")
            yield Button("Create Notebook", id="create-notebook")
            yield Button(UNLOCK_LABEL, id="lock-toggle", variant="warning")
        yield LockedNotice(LANDING_LOCKED_NOTICE, id="landing-locked")
        yield Static("Recent Notes", classes="section-title")
        yield VerticalScroll(id="recent-notes", classes="note-list")

    async def set_lock_state(self, lock_state: LockState) -> None:
        """Re-render for a new lock state."""
        self._lock_state = lock_state
        locked = lock_state is LockState.LOCKED
        self.query_one("#landing-locked", LockedNotice).display = locked
        button = self.query_one("#lock-toggle", Button)
        button.label = UNLOCK_LABEL if locked else LOCK_LABEL
        button.variant = "warning" if locked else "success"
        self.border_subtitle = "Locked" if locked else "Unlocked"
        await show_notes(self.query_one("#recent-notes", VerticalScroll), self._notes, not locked)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("create-note", "create-notebook"):
            event.stop()
            self.post_message(NavigateRequested(Route.EDITOR))
        elif event.button.id == "lock-toggle":
            event.stop()
            self.post_message(LockToggleRequested())


class EditorView(Vertical):
    """Editor route: an in-memory draft that is never saved."""

    def __init__(self, draft: NoteDraft, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.draft = draft

    def compose(self):
        yield LockedNotice(EDITOR_LOCKED_NOTICE, id="editor-locked")
        with Vertical(id="editor-form"):
            yield Input(value=self.draft.title, placeholder="Title", id="note-title")
            text_area = TextArea(self.draft.content, id="note-content", show_line_numbers=False)
            text_area.border_title = "Start typing…"
            yield text_area
            with Horizontal(id="editor-actions"):
                yield Button("Attach", id="editor-attach")
                yield Button("Code", id="editor-code")
                yield Button("Tags", id="editor-tags")
                yield Button("Save", id="editor-save", variant="primary")

    def on_mount(self) -> None:
        self.border_title = self.draft.title

    async def set_lock_state(self, lock_state: LockState) -> None:
        locked = lock_state is LockState.LOCKED
        self.query_one("#editor-locked", LockedNotice).display = locked
        self.query_one("#editor-form", Vertical).display = not locked

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "note-title":
            event.stop()
            self.draft.title = event.value
            self.border_title = event.value

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == "note-content":
            event.stop()
            self.draft.content = event.text_area.text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("editor-"):
            return
        event.stop()
        if button_id == "editor-code":
            text_area = self.query_one("#note-content", TextArea)
            text_area.insert("```\n\n```")
            text_area.focus()
        elif button_id == "editor-save":
            self.notify("Draft kept in memory for this session only", timeout=2)
        else:
            self.notify(f"{event.button.label} is not available yet", severity="warning", timeout=2)


class SearchView(Vertical):
    """Search route: query input, suggestion chips and filtered notes."""

    class Searched(Message):
        """Posted after results are refreshed."""

        def __init__(self, query: str, count: int) -> None:
            super().__init__()
            self.query = query
            self.count = count

    def __init__(self, notes_filter: Callable[[str], list[Note]], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._notes_filter = notes_filter
        self._lock_state = LockState.LOCKED
        self.results: list[Note] = []

    def compose(self):
        yield Input(placeholder="Encrypted search", id="search-query")
        with Horizontal(id="search-chips"):
            for chip in SEARCH_CHIPS:
                yield Button(chip, id=f"chip-{chip}", classes="chip")
        yield LockedNotice(SEARCH_LOCKED_NOTICE, id="search-locked")
        yield Static("No notes match", id="search-empty")
        yield VerticalScroll(id="search-results", classes="note-list")

    @property
    def query_text(self) -> str:
        return self.query_one("#search-query", Input).value

    async def set_lock_state(self, lock_state: LockState) -> None:
        self._lock_state = lock_state
        await self.refresh_results()

    async def refresh_results(self) -> None:
        """Re-run the filter for the current query and lock state."""
        locked = self._lock_state is LockState.LOCKED
        results_box = self.query_one("#search-results", VerticalScroll)
        self.query_one("#search-locked", LockedNotice).display = locked
        results_box.display = not locked
        if locked:
            self.results = []
            self.query_one("#search-empty", Static).display = False
            await results_box.remove_children()
            return
        query = self.query_text
        self.results = self._notes_filter(query)
        self.query_one("#search-empty", Static).display = not self.results
        await show_notes(results_box, self.results, unlocked=True)
        self.post_message(self.Searched(query, len(self.results)))

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-query":
            event.stop()
            await self.refresh_results()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("chip-"):
            event.stop()
            # Setting the value posts Input.Changed, which refreshes results
            self.query_one("#search-query", Input).value = button_id[5:]


class SettingsView(VerticalScroll):
    """Settings route: key status, toggles and logout."""

    class Toggled(Message):
        """Posted when a settings switch changes."""

        def __init__(self, setting: str, value: bool) -> None:
            super().__init__()
            self.setting = setting
            self.value = value

    def __init__(self, values: dict[str, bool], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._values = values

    def compose(self):
        yield SettingsItem(KEY_STATUS_TITLE, KEY_STATUS_SUBTITLE, icon="⚿", id="key-status")
        for name, title in TOGGLES:
            yield SettingsToggle(name, title, self._values[name], icon=TOGGLE_ICONS[name])
        yield Button("Logout", id="logout", variant="error")

    def on_switch_changed(self, event: Switch.Changed) -> None:
        switch_id = event.switch.id or ""
        if switch_id.startswith("toggle-"):
            event.stop()
            self.post_message(self.Toggled(switch_id[7:], event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "logout":
            event.stop()
            self.post_message(LogoutRequested())
