"""In-memory session registry."""

from __future__ import annotations

import asyncio
from typing import Callable, Generic, Optional, TypeVar
from uuid import uuid4

from cinematic_mirror.core.exceptions import SessionNotFoundError

StateT = TypeVar("StateT")
ResultT = TypeVar("ResultT")


class SessionStore(Generic[StateT]):
    """Keyed collection of live conversation state.

    No expiry, no capacity bound, no persistence: sessions live until they
    are deleted or the process exits. One instance is owned by the
    application and passed to the services that need it, so tests can use
    an isolated store per case.
    """

    def __init__(self):
        self._sessions: dict[str, StateT] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, state: StateT, session_id: Optional[str] = None) -> str:
        """Register a new session and return its id."""
        session_id = session_id or str(uuid4())
        self._sessions[session_id] = state
        return session_id

    def get(self, session_id: str) -> StateT:
        """Return the session state, or raise SessionNotFoundError."""
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def find(self, session_id: str) -> Optional[StateT]:
        """Return the session state, or None."""
        return self._sessions.get(session_id)

    def mutate(self, session_id: str, fn: Callable[[StateT], ResultT]) -> ResultT:
        """Apply `fn` to the stored state in place and return its result."""
        return fn(self.get(session_id))

    def delete(self, session_id: str) -> bool:
        """Remove a session. Deleting an absent id is a no-op."""
        self._locks.pop(session_id, None)
        return self._sessions.pop(session_id, None) is not None

    def lock(self, session_id: str) -> asyncio.Lock:
        """Per-session lock serializing turns on the same session."""
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        return lock
