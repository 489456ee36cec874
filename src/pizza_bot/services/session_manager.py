"""Session manager — tracks per-user conversation state."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from pizza_bot.models.order import Order, Step

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(hours=2)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class Session:
    """Represents the current conversation state for one user."""

    user_phone: str
    started_at: datetime
    step: Step = Step.GREETING
    order: Order = field(default_factory=Order)
    # Serializes message handling for this user; held by the router.
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)


class SessionManager:
    """In-memory session store keyed by the sender's phone number.

    Sessions are never removed by the ordering flow itself; they live until
    :pymethod:`sweep_expired` finds them older than ``max_age`` (or until
    :pymethod:`clear` is called).  The clock is injectable so expiry can be
    tested without waiting.
    """

    def __init__(
        self,
        max_age: timedelta = DEFAULT_MAX_AGE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()
        self._max_age = max_age
        self._clock = clock

    def get_or_create(self, phone: str) -> Session:
        """Retrieve or create a session for the given phone number."""
        with self._lock:
            session = self._sessions.get(phone)
            if session is None:
                logger.info("Creating new session for %s", phone)
                session = Session(user_phone=phone, started_at=self._clock())
                self._sessions[phone] = session
            return session

    def get(self, phone: str) -> Session | None:
        """Return the session for *phone* without creating one."""
        with self._lock:
            return self._sessions.get(phone)

    def clear(self, phone: str) -> None:
        """Remove a session (e.g. on timeout)."""
        with self._lock:
            self._sessions.pop(phone, None)
        logger.info("Session cleared for %s", phone)

    def sweep_expired(
        self, now: datetime | None = None, max_age: timedelta | None = None
    ) -> None:
        """Drop every session older than *max_age*, whatever its step."""
        if now is None:
            now = self._clock()
        if max_age is None:
            max_age = self._max_age
        with self._lock:
            expired = [
                phone
                for phone, session in self._sessions.items()
                if now - session.started_at > max_age
            ]
            for phone in expired:
                del self._sessions[phone]
        for phone in expired:
            logger.info("Cleaning up old session for %s", phone)

    async def sweep_forever(self, interval_seconds: float) -> None:
        """Run :pymethod:`sweep_expired` every *interval_seconds* until cancelled."""
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                self.sweep_expired()
            except Exception:
                logger.exception("Session sweep failed")
                continue
            logger.debug("Session sweep done, %d active", self.active_count)

    @property
    def active_count(self) -> int:
        """Number of active sessions (useful for monitoring)."""
        return len(self._sessions)
