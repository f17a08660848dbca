"""Session gate.

This module hides how a key submission turns into an authenticated session.
The gate accepts any non-empty key; it does not verify, hash or keep it.
A real credential check would replace `authenticate` without touching callers.
"""

from ..errors import EmptyKeyError
from .models import LockState, Session


class SessionGate:
    """Holds the authentication flag and the lock state.

    All transitions are driven by explicit user actions. There is no
    timeout-based locking.
    """

    def __init__(self, session: Session | None = None):
        self._session = session or Session()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def authenticated(self) -> bool:
        return self._session.authenticated

    @property
    def lock_state(self) -> LockState:
        return self._session.lock_state

    @property
    def is_unlocked(self) -> bool:
        return self._session.lock_state is LockState.UNLOCKED

    @staticmethod
    def can_submit(key: str) -> bool:
        """Whether the submit action should be enabled for this key."""
        return bool(key)

    def authenticate(self, key: str) -> Session:
        """Open the session with a Gemini key.

        Args:
            key: Any non-empty string

        Returns:
            The authenticated, unlocked session

        Raises:
            EmptyKeyError: If the key is empty
        """
        if not self.can_submit(key):
            raise EmptyKeyError()
        self._session.authenticated = True
        self._session.lock_state = LockState.UNLOCKED
        return self._session

    def toggle_lock(self) -> LockState:
        """Flip between LOCKED and UNLOCKED and return the new state."""
        self._session.lock_state = self._session.lock_state.toggled()
        return self._session.lock_state

    def logout(self) -> Session:
        """Drop authentication and re-lock."""
        self._session.authenticated = False
        self._session.lock_state = LockState.LOCKED
        return self._session
