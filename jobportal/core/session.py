"""
Authenticated session context and the process-wide session-change hub.

A SessionContext is built once per request by the auth dependency and passed
explicitly to every service that needs to know who is acting. Sign-in and
sign-out are published through SessionHub so long-lived consumers (the
notification stream) can react without polling.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import UUID

from jobportal.core.logging import get_logger

logger = get_logger(__name__)

SIGNED_IN = "signed_in"
SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class SessionContext:
    """Who is acting on this request."""

    user_id: UUID
    email: str
    role: str = "user"

    @property
    def can_post_jobs(self) -> bool:
        return self.role in ("employer", "admin")


@dataclass(frozen=True)
class SessionEvent:
    event: str  # SIGNED_IN / SIGNED_OUT
    user_id: UUID
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


SessionListener = Callable[[SessionEvent], None]


class SessionHub:
    """
    Observer that republishes session changes to registered listeners.

    Started from the application lifespan and closed at shutdown; closing
    detaches every listener so nothing is called after teardown.
    """

    def __init__(self) -> None:
        self._listeners: List[SessionListener] = []
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def start(self) -> None:
        self._running = True
        logger.info("session_hub_started")

    def close(self) -> None:
        detached = len(self._listeners)
        self._listeners.clear()
        self._running = False
        logger.info("session_hub_closed", detached_listeners=detached)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: str, user_id: UUID) -> Optional[SessionEvent]:
        """Deliver a session change to every listener, in registration order."""
        if not self._running:
            logger.debug("session_event_ignored", session_event=event, user_id=str(user_id))
            return None

        session_event = SessionEvent(event=event, user_id=user_id)
        # Copy: listeners may unsubscribe themselves while being notified
        for listener in list(self._listeners):
            try:
                listener(session_event)
            except Exception:
                logger.exception("session_listener_failed", session_event=event)
        return session_event


session_hub = SessionHub()
