"""Runtime configuration.

Values come from environment variables (optionally via a .env file),
and CLI options override them.

Environment variables:
    NOTEPAD_PRO_LOG_LEVEL: Log panel level (debug/info/warning/error), unset to hide
    NOTEPAD_PRO_THEME: Textual theme name (default: notepad-pro)
    NOTEPAD_PRO_START_ROUTE: Route shown after login (default: home)
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .router import START_ROUTE, Route, resolve_route

DEFAULT_THEME = "notepad-pro"


class NotepadConfig(BaseModel):
    """Settings for one run of the app."""

    log_level: str | None = Field(default=None, description="Log panel level, None to hide")
    theme: str = Field(default=DEFAULT_THEME, description="Textual theme name")
    start_route: Route = Field(default=START_ROUTE, description="Route shown after login")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip().lower()
        if value not in ("debug", "info", "warning", "error"):
            raise ValueError(f"Invalid log level: {value}")
        return value

    @field_validator("start_route", mode="before")
    @classmethod
    def _resolve_start_route(cls, value: str | Route) -> Route:
        return resolve_route(value)


def load_config(**overrides: object) -> NotepadConfig:
    """Build the config from the environment plus explicit overrides.

    Overrides that are None are ignored so unset CLI options fall back
    to the environment.
    """
    load_dotenv()
    values: dict[str, object] = {}
    if level := os.getenv("NOTEPAD_PRO_LOG_LEVEL"):
        values["log_level"] = level
    if theme := os.getenv("NOTEPAD_PRO_THEME"):
        values["theme"] = theme
    if route := os.getenv("NOTEPAD_PRO_START_ROUTE"):
        values["start_route"] = route
    values.update({k: v for k, v in overrides.items() if v is not None})
    return NotepadConfig(**values)
