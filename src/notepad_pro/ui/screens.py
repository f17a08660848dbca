"""Screens for the TUI.

This module hides the design decisions about:
- The login flow and its two wordings
- How the four route views are switched
- How logout is confirmed

To change the screen flow, modify only this file and app.py.
"""

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, ContentSwitcher, Footer, Header, Input, Static

from ..errors import NotepadError
from ..router import Route, resolve_route, route_label
from ..session import LoginMode, SessionGate
from .config import APP_TITLE, LOGOUT_PROMPT, LogLevel
from .views import (
    EditorView,
    LandingView,
    LockToggleRequested,
    LogoutRequested,
    NavigateRequested,
    SearchView,
    SettingsView,
)
from .widgets import LogPanel, NavBar

if TYPE_CHECKING:
    from .app import NotepadProApp


class LoginScreen(Screen):
    """Gemini key entry. Submitting any non-empty key signs in."""

    def __init__(self) -> None:
        super().__init__()
        self.login_mode = LoginMode.SETUP

    @property
    def notepad(self) -> "NotepadProApp":
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        with Vertical(id="login-card"):
            yield Static(APP_TITLE, id="login-title")
            yield Static(self.login_mode.heading, id="login-heading")
            yield Input(placeholder="Gemini Key", password=True, id="key-input")
            yield Button(
                self.login_mode.submit_label,
                id="submit-key",
                variant="primary",
                disabled=True,
            )
            yield Button(self.login_mode.switch_label, id="switch-mode")

    def on_mount(self) -> None:
        self.query_one("#key-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "key-input":
            self.query_one("#submit-key", Button).disabled = not SessionGate.can_submit(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "key-input":
            self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit-key":
            self._submit(self.query_one("#key-input", Input).value)
        elif event.button.id == "switch-mode":
            self.switch_mode()

    def switch_mode(self) -> None:
        """Flip between setup and verify wording."""
        self.login_mode = self.login_mode.switched()
        self.query_one("#login-heading", Static).update(self.login_mode.heading)
        self.query_one("#submit-key", Button).label = self.login_mode.submit_label
        self.query_one("#switch-mode", Button).label = self.login_mode.switch_label
        self.notepad.write_log("Session", f"Login mode: {self.login_mode.value}")

    def _submit(self, key: str) -> None:
        try:
            self.notepad.login(key)
        except NotepadError as e:
            self.notepad.report_error("Session", e)


class MainScreen(Screen):
    """Signed-in screen: route views plus the bottom navigation bar."""

    BINDINGS = [
        Binding("f1", "navigate('home')", "Home"),
        Binding("f2", "navigate('search')", "Search"),
        Binding("f3", "navigate('editor')", "Editor"),
        Binding("f4", "navigate('settings')", "Settings"),
    ]

    def __init__(self, start_route: Route = Route.HOME) -> None:
        super().__init__()
        self._start_route = start_route
        self.current_route = start_route

    @property
    def notepad(self) -> "NotepadProApp":
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        app = self.notepad
        yield Header(show_clock=True)
        with ContentSwitcher(id="routes", initial=self._start_route.value):
            yield LandingView(app.store.list_notes(), id=Route.HOME.value)
            yield SearchView(app.store.filter_notes, id=Route.SEARCH.value)
            yield EditorView(app.draft, id=Route.EDITOR.value)
            yield SettingsView(app.settings.model_dump(), id=Route.SETTINGS.value)
        yield LogPanel(id="log-panel", log_level=app.log_threshold)
        yield NavBar(id="nav-bar")
        yield Footer()

    async def on_mount(self) -> None:
        app = self.notepad
        if app.config.log_level is not None:
            self.query_one(LogPanel).show()
        app.flush_log(self.query_one(LogPanel))
        self.navigate(self.current_route)
        await self.apply_lock_state()

    async def apply_lock_state(self) -> None:
        """Push the gate's lock state to every view."""
        lock_state = self.notepad.gate.lock_state
        self.sub_title = lock_state.value.capitalize()
        await self.query_one(LandingView).set_lock_state(lock_state)
        await self.query_one(SearchView).set_lock_state(lock_state)
        await self.query_one(EditorView).set_lock_state(lock_state)

    def navigate(self, route: Route) -> None:
        """Show the view for `route`."""
        self.query_one("#routes", ContentSwitcher).current = route.value
        self.query_one(NavBar).set_active(route)
        if route is not self.current_route:
            self.notepad.write_log("Router", f"{self.current_route.value} -> {route.value}")
        self.current_route = route
        self.title = f"{APP_TITLE} · {route_label(route)}"

    def action_navigate(self, name: str) -> None:
        try:
            self.navigate(resolve_route(name))
        except NotepadError as e:
            self.notepad.report_error("Router", e)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("nav-"):
            self.action_navigate(button_id[4:])

    def on_navigate_requested(self, message: NavigateRequested) -> None:
        self.navigate(message.route)

    async def on_lock_toggle_requested(self, message: LockToggleRequested) -> None:
        await self.notepad.action_toggle_lock()

    def on_logout_requested(self, message: LogoutRequested) -> None:
        self.notepad.action_logout()

    def on_search_view_searched(self, message: SearchView.Searched) -> None:
        self.notepad.write_log("Notes", f"Search {message.query!r}: {message.count} result(s)")

    def on_settings_view_toggled(self, message: SettingsView.Toggled) -> None:
        try:
            self.notepad.settings.set(message.setting, message.value)
        except NotepadError as e:
            self.notepad.report_error("Settings", e)
            return
        self.notepad.write_log("Settings", f"{message.setting} = {message.value}", LogLevel.INFO)


class LogoutConfirmScreen(ModalScreen[bool]):
    """Modal yes/no dialog shown before logging out."""

    CSS = """
    LogoutConfirmScreen {
        align: center middle;
        background: $background 70%;
    }

    #confirmation-dialog {
        width: 50;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #confirmation-prompt {
        width: 100%;
        height: auto;
        text-align: center;
        padding: 1 2;
        color: $foreground;
    }

    #confirmation-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #confirmation-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("y", "confirm_yes", "Yes", show=False),
        Binding("n", "confirm_no", "No", show=False),
        Binding("escape", "confirm_no", "Cancel", show=False),
    ]

    def __init__(self, prompt: str = LOGOUT_PROMPT) -> None:
        super().__init__()
        self._prompt = prompt

    def compose(self) -> ComposeResult:
        with Vertical(id="confirmation-dialog"):
            yield Static(self._prompt, id="confirmation-prompt")
            with Horizontal(id="confirmation-buttons"):
                yield Button("Yes", id="btn-yes", variant="error")
                yield Button("No", id="btn-no", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_confirm_yes(self) -> None:
        self.dismiss(True)

    def action_confirm_no(self) -> None:
        self.dismiss(False)
