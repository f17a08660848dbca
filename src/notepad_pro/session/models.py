"""Data models for the session gate.

These models hold transient view state only; nothing here is persisted.
"""

from enum import Enum

from pydantic import BaseModel, Field


class LockState(str, Enum):
    """Whether note content is rendered or obscured."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"

    def toggled(self) -> "LockState":
        return LockState.UNLOCKED if self is LockState.LOCKED else LockState.LOCKED


class LoginMode(str, Enum):
    """Wording shown on the login screen.

    The mode only changes labels; both modes accept the same keys.
    """

    SETUP = "setup"
    VERIFY = "verify"

    @property
    def heading(self) -> str:
        return "Set up Gemini Key" if self is LoginMode.SETUP else "Unlock with Gemini Key"

    @property
    def submit_label(self) -> str:
        return "Generate & Continue" if self is LoginMode.SETUP else "Verify Key"

    @property
    def switch_label(self) -> str:
        return "Already have a key? Verify" if self is LoginMode.SETUP else "No key yet? Setup"

    def switched(self) -> "LoginMode":
        return LoginMode.VERIFY if self is LoginMode.SETUP else LoginMode.SETUP


class Session(BaseModel):
    """Authentication flag and lock state for the running app."""

    authenticated: bool = Field(default=False, description="Set after a key is submitted")
    lock_state: LockState = Field(default=LockState.LOCKED, description="Current lock state")
