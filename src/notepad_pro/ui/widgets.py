"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Note card rendering (locked vs unlocked)
- Lock notices
- Settings rows and toggles
- Bottom navigation highlighting
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.widgets import Button, RichLog, Static, Switch

from ..notes import Note
from ..router import NAV_ICONS, NAV_ROUTES, Route, route_label
from .config import HIDDEN_SNIPPET, LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel


class NoteCard(Vertical):
    """A note in a list. Locked cards hide the snippet."""

    def __init__(self, note: Note, unlocked: bool, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.note = note
        self.unlocked = unlocked
        if not unlocked:
            self.add_class("-locked")

    @property
    def snippet_text(self) -> str:
        return self.note.snippet if self.unlocked else HIDDEN_SNIPPET

    def compose(self):
        yield Static(self.note.title, classes="note-title")
        yield Static(self.snippet_text, classes="note-snippet")
        with Horizontal(classes="note-tags"):
            for tag in self.note.tags:
                yield Static(f"# {tag}", classes="tag-chip")
        yield Static(self.note.timestamp, classes="note-timestamp")


class LockedNotice(Static):
    """Grey block shown in place of content while notes are locked."""

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, classes="locked-notice", **kwargs)


class SettingsItem(Horizontal):
    """Read-only settings row with a title and subtitle."""

    def __init__(self, title: str, subtitle: str, icon: str = "", *args, **kwargs) -> None:
        super().__init__(*args, classes="settings-row", **kwargs)
        self._title = title
        self._subtitle = subtitle
        self._icon = icon

    def compose(self):
        yield Static(self._icon, classes="settings-icon")
        with Vertical(classes="settings-text"):
            yield Static(self._title, classes="settings-title")
            yield Static(self._subtitle, classes="settings-subtitle")


class SettingsToggle(Horizontal):
    """Settings row with a switch. Clicking anywhere on the row flips it."""

    def __init__(self, name: str, title: str, value: bool, icon: str = "", *args, **kwargs) -> None:
        super().__init__(*args, classes="settings-row", **kwargs)
        self.setting_name = name
        self._title = title
        self._value = value
        self._icon = icon

    def compose(self):
        yield Static(self._icon, classes="settings-icon")
        yield Static(self._title, classes="settings-title toggle-title")
        yield Switch(value=self._value, id=f"toggle-{self.setting_name}")

    def on_click(self, event: Click) -> None:
        # Switch stops its own clicks, so this only sees the rest of the row
        event.stop()
        self.query_one(Switch).toggle()


class NavBar(Horizontal):
    """Bottom navigation bar with one button per route."""

    def compose(self):
        for route in NAV_ROUTES:
            yield Button(
                f"{NAV_ICONS[route]} {route_label(route)}",
                id=f"nav-{route.value}",
                classes="nav-button",
            )

    def set_active(self, route: Route) -> None:
        """Highlight the button for the current route."""
        for button in self.query(".nav-button").results(Button):
            button.set_class(button.id == f"nav-{route.value}", "-active")


class LogPanel(RichLog):
    """Log panel for app events with level filtering.

    Shows timestamped entries from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Event log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self._entries: list[str] = []
        # Hidden until shown with --log-level or Ctrl+D
        self.display = False

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Notes, Router, Settings)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors[level]
        level_name = LogLevel.name(level)

        component_colors = {
            "TUI": "cyan",
            "Session": "green",
            "Notes": "bright_magenta",
            "Router": "bright_blue",
            "Settings": "yellow",
        }
        comp_color = component_colors.get(component, "white")

        self._entries.append(f"{timestamp} {level_name:<5} [{component}] {message}")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns True if now visible."""
        if self.display:
            self.hide()
        else:
            self.show()
        return bool(self.display)

    def get_plain_text(self) -> str:
        """Get log content as plain text."""
        return "\n".join(self._entries)
