"""Exceptions raised by the core modules.

The UI catches these at the event handler and reports them as
notifications; the CLI turns them into a non-zero exit.
"""


class NotepadError(Exception):
    """Base class for Notepad Pro errors."""

    def is_user_error(self) -> bool:
        """Override in subclasses for errors caused by user input."""
        return False


class EmptyKeyError(NotepadError):
    """A blank key was submitted to the session gate."""

    def __init__(self, message: str = "Gemini key must not be empty"):
        super().__init__(message)

    def is_user_error(self) -> bool:
        return True


class UnknownRouteError(NotepadError):
    """A route name that does not map to any screen."""

    def __init__(self, route: str):
        super().__init__(f"Unknown route: {route!r}")
        self.route = route

    def is_user_error(self) -> bool:
        return True


class UnknownSettingError(NotepadError):
    """A settings toggle that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown setting: {name!r}")
        self.name = name
