"""Terminal UI module for notepad_pro.

Provides a Textual-based TUI for the note-taking app shell.

Module structure (each module hides a design decision):
- config.py: Labels, notices and log level constants
- widgets.py: Custom widgets (note cards, settings rows, navigation, log panel)
- views.py: The four route views and the messages they post
- screens.py: Login, main and logout confirmation screens
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- app.py: Application orchestration (session flow)
"""

from .app import NotepadProApp, run_textual_tui
from .config import LogLevel
from .screens import LoginScreen, LogoutConfirmScreen, MainScreen
from .widgets import LogPanel, NoteCard

__all__ = [
    "LogLevel",
    "LogPanel",
    "LoginScreen",
    "LogoutConfirmScreen",
    "MainScreen",
    "NoteCard",
    "NotepadProApp",
    "run_textual_tui",
]
