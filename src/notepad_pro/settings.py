"""Settings screen state.

The toggles only drive their own checked state; nothing else reads them.
"""

from pydantic import BaseModel, Field

from .errors import UnknownSettingError

KEY_STATUS_TITLE = "Gemini Key Status"
KEY_STATUS_SUBTITLE = "Valid · backup recommended"

# (field name, display title) in display order
TOGGLES: tuple[tuple[str, str], ...] = (
    ("dark_mode", "Dark mode"),
    ("notifications", "Notifications"),
    ("cloud_sync", "Cloud Sync"),
)


class AppSettings(BaseModel):
    """Settings toggles, all on by default."""

    dark_mode: bool = Field(default=True)
    notifications: bool = Field(default=True)
    cloud_sync: bool = Field(default=True)

    def get(self, name: str) -> bool:
        if name not in type(self).model_fields:
            raise UnknownSettingError(name)
        return getattr(self, name)

    def set(self, name: str, value: bool) -> None:
        if name not in type(self).model_fields:
            raise UnknownSettingError(name)
        setattr(self, name, value)

    def toggle(self, name: str) -> bool:
        """Flip a toggle and return its new value.

        Raises:
            UnknownSettingError: If no toggle has that name
        """
        value = not self.get(name)
        self.set(name, value)
        return value
