"""
Server-side login sessions.

A SessionStore maps an opaque token to the identity that logged in with it.
Entries live for a fixed TTL and are checked for expiry when resolved; there
is no background sweep. The Flask app owns one store, built by
``make_session_store`` at startup and kept in ``app.extensions``.
"""

import logging
import secrets
import threading
from collections import namedtuple
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from errors import SessionError
from models import db, UserSession

log = logging.getLogger(__name__)

SessionIdentity = namedtuple("SessionIdentity", ["user_id", "user_name"])

DEFAULT_TTL = timedelta(hours=24)


def new_token():
    return secrets.token_urlsafe(32)


class SessionStore:
    """Interface shared by the session backends."""

    def __init__(self, ttl=DEFAULT_TTL, clock=datetime.now):
        self.ttl = ttl
        self.clock = clock

    def create(self, user_id, user_name):
        """Start a session and return its token."""
        raise NotImplementedError

    def resolve(self, token):
        """Return the SessionIdentity for a live token, else None."""
        raise NotImplementedError

    def destroy(self, token):
        """Invalidate a token. Unknown tokens are ignored."""
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    def __init__(self, ttl=DEFAULT_TTL, clock=datetime.now):
        super().__init__(ttl, clock)
        self._entries = {}
        self._lock = threading.Lock()

    def create(self, user_id, user_name):
        token = new_token()
        with self._lock:
            self._entries[token] = (SessionIdentity(user_id, user_name), self.clock() + self.ttl)
        return token

    def resolve(self, token):
        if not token:
            return None
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            identity, expires_at = entry
            if expires_at <= self.clock():
                del self._entries[token]
                return None
            return identity

    def destroy(self, token):
        with self._lock:
            self._entries.pop(token, None)

    def __len__(self):
        with self._lock:
            return len(self._entries)


class DatabaseSessionStore(SessionStore):
    """Sessions kept in the ``sessions`` table; needs an app context."""

    def create(self, user_id, user_name):
        token = new_token()
        db.session.add(UserSession(
            token=token,
            user_id=user_id,
            user_name=user_name,
            expires_at=self.clock() + self.ttl,
        ))
        db.session.commit()
        return token

    def resolve(self, token):
        if not token:
            return None
        row = db.session.get(UserSession, token)
        if row is None:
            return None
        if row.expires_at <= self.clock():
            db.session.delete(row)
            db.session.commit()
            return None
        return SessionIdentity(row.user_id, row.user_name)

    def destroy(self, token):
        if not token:
            return
        try:
            UserSession.query.filter_by(token=token).delete()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise SessionError() from e


BACKENDS = {
    "memory": InMemorySessionStore,
    "database": DatabaseSessionStore,
}


def make_session_store(backend="memory", ttl_hours=24, clock=datetime.now):
    try:
        store_cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown SESSION_BACKEND: {backend!r}") from None
    log.info("Using %s session store (ttl=%sh)", backend, ttl_hours)
    return store_cls(ttl=timedelta(hours=ttl_hours), clock=clock)
