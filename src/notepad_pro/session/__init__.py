"""Session gate module for notepad_pro.

Provides the placeholder Gemini key login and the lock toggle.
"""

from .gate import SessionGate
from .models import LockState, LoginMode, Session

__all__ = [
    "LockState",
    "LoginMode",
    "Session",
    "SessionGate",
]
