"""Unit tests for the session gate."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from notepad_pro.errors import EmptyKeyError, NotepadError
from notepad_pro.session import LockState, LoginMode, Session, SessionGate


class TestSession:
    """Tests for the Session model."""

    def test_defaults(self):
        """A new session is signed out and locked."""
        session = Session()

        assert session.authenticated is False
        assert session.lock_state == LockState.LOCKED

    def test_lock_state_values(self):
        assert LockState.LOCKED == "locked"
        assert LockState.UNLOCKED == "unlocked"


class TestAuthenticate:
    """Tests for key submission."""

    @given(st.text(min_size=1))
    def test_any_non_empty_key_succeeds(self, key: str):
        """Property test: every non-empty key opens the session."""
        gate = SessionGate()

        session = gate.authenticate(key)

        assert session.authenticated is True
        assert session.lock_state == LockState.UNLOCKED

    def test_empty_key_is_blocked(self, gate):
        """The empty key cannot be submitted and raises on authenticate."""
        assert SessionGate.can_submit("") is False

        with pytest.raises(EmptyKeyError):
            gate.authenticate("")

        assert gate.authenticated is False
        assert gate.lock_state == LockState.LOCKED

    def test_empty_key_error_is_user_error(self):
        error = EmptyKeyError()

        assert isinstance(error, NotepadError)
        assert error.is_user_error() is True

    @given(st.text(min_size=1))
    def test_can_submit_non_empty(self, key: str):
        assert SessionGate.can_submit(key) is True

    def test_key_is_not_retained(self, gate):
        """The gate keeps no copy of the submitted key."""
        gate.authenticate("super-secret-key")

        assert "super-secret-key" not in gate.session.model_dump_json()
        assert "super-secret-key" not in repr(vars(gate))


class TestLockToggle:
    """Tests for the lock toggle."""

    def test_toggle_flips_state(self, gate):
        assert gate.toggle_lock() == LockState.UNLOCKED
        assert gate.is_unlocked is True
        assert gate.toggle_lock() == LockState.LOCKED
        assert gate.is_unlocked is False

    def test_double_toggle_restores_locked(self, gate):
        """LOCKED -> UNLOCKED -> LOCKED returns to LOCKED."""
        assert gate.lock_state == LockState.LOCKED

        gate.toggle_lock()
        gate.toggle_lock()

        assert gate.lock_state == LockState.LOCKED

    @given(st.sampled_from(list(LockState)), st.integers(min_value=0, max_value=20))
    def test_even_toggles_restore_state(self, start: LockState, pairs: int):
        """Property test: any even number of toggles is a no-op."""
        gate = SessionGate(Session(lock_state=start))

        for _ in range(pairs * 2):
            gate.toggle_lock()

        assert gate.lock_state == start

    def test_toggle_after_login(self, gate):
        gate.authenticate("key")

        assert gate.toggle_lock() == LockState.LOCKED
        assert gate.authenticated is True


class TestLogout:
    """Tests for logging out."""

    def test_logout_resets_session(self, gate):
        gate.authenticate("key")

        session = gate.logout()

        assert session.authenticated is False
        assert session.lock_state == LockState.LOCKED

    def test_logout_when_signed_out(self, gate):
        gate.logout()

        assert gate.authenticated is False
        assert gate.lock_state == LockState.LOCKED


class TestLoginMode:
    """Tests for the login screen wording."""

    def test_setup_wording(self):
        assert LoginMode.SETUP.heading == "Set up Gemini Key"
        assert LoginMode.SETUP.submit_label == "Generate & Continue"
        assert LoginMode.SETUP.switch_label == "Already have a key? Verify"

    def test_verify_wording(self):
        assert LoginMode.VERIFY.heading == "Unlock with Gemini Key"
        assert LoginMode.VERIFY.submit_label == "Verify Key"
        assert LoginMode.VERIFY.switch_label == "No key yet? Setup"

    def test_switched_round_trip(self):
        assert LoginMode.SETUP.switched() == LoginMode.VERIFY
        assert LoginMode.SETUP.switched().switched() == LoginMode.SETUP
