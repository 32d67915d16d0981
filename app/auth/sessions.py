# =============================================================================
# app/auth/sessions.py - Server-side Admin Sessions
# =============================================================================
# Sessions live in process memory, keyed by an opaque random token. The
# browser only ever sees the token, signed with SESSION_SECRET so forged or
# tampered cookies are rejected before the store is consulted.
#
# Sessions expire after a fixed lifetime and are dropped on restart.
#
# Usage:
#   store = SessionStore(secret="...", max_age_seconds=8 * 3600)
#   cookie_value = store.create("admin@example.com")
#   session = store.get(cookie_value)   # AdminSession | None
#   store.destroy(cookie_value)
# =============================================================================

import logging
import secrets
import threading
import time
from collections.abc import Callable

from itsdangerous import BadSignature, TimestampSigner

from app.auth.models import AdminSession

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class SessionStore:
    """
    In-memory store of admin sessions.

    Thread-safe: FastAPI runs sync handlers in a threadpool, so every access
    to the session map holds a lock.
    """

    def __init__(
        self,
        secret: str,
        max_age_seconds: int,
        clock: Callable[[], float] = time.time,
    ):
        self.max_age_seconds = max_age_seconds
        self._signer = TimestampSigner(secret, salt="admin-session")
        self._clock = clock
        self._sessions: dict[str, AdminSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _unsign(self, cookie_value: str) -> str | None:
        try:
            token = self._signer.unsign(cookie_value, max_age=self.max_age_seconds)
        except BadSignature:
            # Also covers SignatureExpired
            return None
        return token.decode("utf-8")

    def create(self, admin_email: str) -> str:
        """
        Start a session for the admin.

        Returns:
            The signed token to store in the session cookie
        """
        token = secrets.token_urlsafe(TOKEN_BYTES)
        session = AdminSession(
            is_admin=True,
            admin_email=admin_email,
            expires_at=self._clock() + self.max_age_seconds,
        )

        with self._lock:
            self._purge_expired_locked()
            self._sessions[token] = session

        logger.debug(f"Created admin session for {admin_email}")
        return self._signer.sign(token).decode("utf-8")

    def get(self, cookie_value: str | None) -> AdminSession | None:
        """
        Look up the session referenced by a cookie value.

        Returns None for a missing, badly signed, unknown or expired
        session. Expired sessions are removed.
        """
        if not cookie_value:
            return None

        token = self._unsign(cookie_value)
        if token is None:
            return None

        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.expires_at <= self._clock():
                del self._sessions[token]
                return None
            return session

    def destroy(self, cookie_value: str | None) -> None:
        """End the session referenced by a cookie value, if any."""
        if not cookie_value:
            return

        token = self._unsign(cookie_value)
        if token is None:
            return

        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Remove all expired sessions. Returns how many were removed."""
        with self._lock:
            return self._purge_expired_locked()

    def _purge_expired_locked(self) -> int:
        now = self._clock()
        expired = [t for t, s in self._sessions.items() if s.expires_at <= now]
        for token in expired:
            del self._sessions[token]
        return len(expired)
