"""
Session Manager
===============

Manages HTTP sessions mapped to ValuesApp instances.
Uses in-memory cache for fast access while preserving disk-based persistence.
"""

from __future__ import annotations

import re
import secrets
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Optional, Tuple
from threading import Lock

from config import ValuesortConfig
from ui.app import ValuesApp

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{16,64}$")


class SessionManager:
    """
    Manages HTTP sessions with ValuesApp instances.

    - In-memory cache for active sessions
    - Auto-cleanup of inactive sessions after TTL
    - Sessions evicted from memory resume from their directory on disk
    """

    def __init__(self, base_save_dir: str = "./valuesort_sessions", ttl_minutes: int = 120):
        self.base_save_dir = Path(base_save_dir)
        self.config = ValuesortConfig(save_dir=str(base_save_dir), session_ttl_minutes=ttl_minutes)

        self._sessions: Dict[str, Tuple[ValuesApp, datetime]] = {}  # session_id -> (app, last_access)
        self._ttl = timedelta(minutes=ttl_minutes)
        self._lock = Lock()  # Thread safety for concurrent requests

    def configure(self, config: ValuesortConfig) -> None:
        """Apply a new configuration to sessions created from now on."""
        with self._lock:
            self.config = config
            self.base_save_dir = Path(config.save_dir)
            self._ttl = timedelta(minutes=config.session_ttl_minutes)

    def _new_app(self, session_id: str) -> ValuesApp:
        return ValuesApp(session_dir=str(self.base_save_dir / session_id), config=self.config)

    def create_session(self) -> str:
        """
        Create new session with a ValuesApp instance.

        Returns:
            session_id (str): Secure random session identifier
        """
        session_id = secrets.token_urlsafe(32)
        app = self._new_app(session_id)

        with self._lock:
            self._sessions[session_id] = (app, datetime.now())

        return session_id

    def get_app(self, session_id: Optional[str]) -> Optional[ValuesApp]:
        """
        Retrieve ValuesApp for session, update last access time.

        A session that has been evicted but still has a directory on disk is
        reopened.

        Args:
            session_id: Session identifier

        Returns:
            ValuesApp instance or None if session doesn't exist
        """
        if not session_id or not _SESSION_ID_PATTERN.match(session_id):
            return None

        with self._lock:
            if session_id in self._sessions:
                app, _ = self._sessions[session_id]
                # Refresh timestamp
                self._sessions[session_id] = (app, datetime.now())
                return app

            if (self.base_save_dir / session_id).is_dir():
                app = self._new_app(session_id)
                self._sessions[session_id] = (app, datetime.now())
                return app

        return None

    def get_or_create_app(self, session_id: Optional[str]) -> Tuple[str, ValuesApp, bool]:
        """
        Resolve the app for a request, creating a session if needed.

        Returns:
            (session_id, app, created) where created is True for a new session
        """
        app = self.get_app(session_id)
        if app is not None:
            return session_id, app, False

        new_id = self.create_session()
        return new_id, self.get_app(new_id), True

    def cleanup_expired(self) -> int:
        """
        Remove expired sessions (inactive beyond TTL), committing any
        pending statement input first.

        Returns:
            Number of sessions removed
        """
        now = datetime.now()

        with self._lock:
            expired = [
                sid for sid, (_, last_access) in self._sessions.items()
                if now - last_access > self._ttl
            ]

            for sid in expired:
                app, _ = self._sessions.pop(sid)
                # Typed statements must reach disk before the app is dropped
                app.flush_statements()

        return len(expired)

    def session_count(self) -> int:
        """Get number of active sessions."""
        with self._lock:
            return len(self._sessions)


# Global session manager instance
session_manager = SessionManager()
