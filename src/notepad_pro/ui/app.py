"""Main Textual TUI application.

Owns the session gate, note store, settings and editor draft, and moves
between the login and main screens as the session changes.
"""

import asyncio

from textual.app import App
from textual.binding import Binding
from textual.css.query import NoMatches

from ..config import NotepadConfig
from ..errors import NotepadError
from ..notes import NoteDraft, NoteStore, create_note_store
from ..session import LockState, SessionGate
from ..settings import AppSettings
from .config import APP_TITLE, NOTIFY_ERROR_TIMEOUT, NOTIFY_TIMEOUT, LogLevel
from .screens import LoginScreen, LogoutConfirmScreen, MainScreen
from .styles import APP_CSS
from .themes import NOTEPAD_PRO, THEMES
from .widgets import LogPanel


class NotepadProApp(App):
    """Textual TUI for Notepad Pro."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "toggle_lock", "Lock"),
        Binding("ctrl+d", "toggle_log", "Log", priority=True),
    ]

    def __init__(
        self,
        config: NotepadConfig | None = None,
        gate: SessionGate | None = None,
        store: NoteStore | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.config = config or NotepadConfig()
        self.gate = gate or SessionGate()
        self.store = store or create_note_store("sample")
        self.settings = settings or AppSettings()
        self.draft = NoteDraft()
        # Entries written while no log panel is mounted (e.g. on the login screen)
        self._pending_log: list[tuple[str, str, int]] = []

    @property
    def log_threshold(self) -> int:
        if self.config.log_level is None:
            return LogLevel.DEBUG
        return LogLevel.from_string(self.config.log_level)

    def on_mount(self) -> None:
        for theme in THEMES:
            self.register_theme(theme)
        if self.config.theme in self.available_themes:
            self.theme = self.config.theme
        else:
            self.theme = NOTEPAD_PRO.name
            self.write_log("TUI", f"Unknown theme {self.config.theme!r}, using {NOTEPAD_PRO.name}", LogLevel.WARNING)

        self.sub_title = f"{self.store.backend_type} notes"
        self.write_log("TUI", "Started")
        self.push_screen(LoginScreen())

    # -- logging ---------------------------------------------------------

    def _log_panel(self) -> LogPanel | None:
        try:
            return self.screen.query_one(LogPanel)
        except NoMatches:
            return None

    def write_log(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Send an entry to the visible log panel, or queue it until one mounts."""
        panel = self._log_panel()
        if panel is None:
            self._pending_log.append((component, message, level))
        else:
            panel.write_entry(component, message, level)

    def flush_log(self, panel: LogPanel) -> None:
        """Write queued entries into a freshly mounted panel."""
        for component, message, level in self._pending_log:
            panel.write_entry(component, message, level)
        self._pending_log.clear()

    def report_error(self, component: str, error: NotepadError) -> None:
        """Log an error and show it as a toast."""
        self.write_log(component, str(error), LogLevel.ERROR)
        severity = "warning" if error.is_user_error() else "error"
        self.notify(str(error), severity=severity, timeout=NOTIFY_ERROR_TIMEOUT)

    # -- session ---------------------------------------------------------

    def login(self, key: str) -> None:
        """Authenticate with `key` and open the main screen.

        Raises:
            EmptyKeyError: If the key is empty
        """
        self.gate.authenticate(key)
        self.write_log("Session", "Authenticated, notes unlocked", LogLevel.INFO)
        self.switch_screen(MainScreen(self.config.start_route))

    async def action_toggle_lock(self) -> None:
        """Flip the lock state and re-render the views."""
        if not self.gate.authenticated:
            return
        lock_state = self.gate.toggle_lock()
        self.write_log("Session", f"Lock state: {lock_state.value}", LogLevel.INFO)
        if isinstance(self.screen, MainScreen):
            await self.screen.apply_lock_state()
        label = "Notes locked" if lock_state is LockState.LOCKED else "Notes unlocked"
        self.notify(label, timeout=NOTIFY_TIMEOUT)

    def action_logout(self) -> None:
        """Ask for confirmation, then sign out and return to login."""
        if not self.gate.authenticated:
            return

        def _on_confirm(confirmed: bool | None) -> None:
            if not confirmed:
                self.write_log("Session", "Logout cancelled")
                return
            self.logout()

        self.push_screen(LogoutConfirmScreen(), _on_confirm)

    def logout(self) -> None:
        """Sign out without confirmation."""
        self.gate.logout()
        self.draft = NoteDraft()
        self.write_log("Session", "Logged out, notes locked", LogLevel.INFO)
        self.switch_screen(LoginScreen())

    # -- misc ------------------------------------------------------------

    def action_toggle_log(self) -> None:
        """Toggle the log panel visibility."""
        panel = self._log_panel()
        if panel is None:
            self.notify("Log panel is available after login", severity="warning", timeout=NOTIFY_TIMEOUT)
            return
        is_visible = panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=NOTIFY_TIMEOUT)


async def run_textual_tui(config: NotepadConfig | None = None) -> None:
    """Run the Textual TUI.

    Args:
        config: Runtime configuration, defaults when None
    """
    app = NotepadProApp(config=config)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass

