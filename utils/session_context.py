"""
Request-scoped view of the tracker session.

The browser cookie holds exactly two values: the active user's id and the
family id that user was logged in under.  Routes never read the cookie
directly; they receive a ``SessionContext`` built at the request boundary
and write it back with ``save()`` after a transition.

Usage
-----
::

    @tracker_bp.route('/home')
    @session_required
    def home(ctx):
        ...

    ctx = SessionContext.from_session(session)
    ctx.identify(user)
    ctx.save(session)
"""
from functools import wraps

from flask import current_app, redirect, request, session, url_for

SESSION_USER_KEY = 'current_user_id'
SESSION_FAMILY_KEY = 'current_family_id'


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class SessionContext:
    """The active user and family for one request."""

    def __init__(self, user_id=None, family_id=None):
        self.user_id = user_id
        self.family_id = family_id

    @classmethod
    def from_session(cls, store):
        return cls(
            user_id=_as_int(store.get(SESSION_USER_KEY)),
            family_id=_as_int(store.get(SESSION_FAMILY_KEY)),
        )

    @property
    def is_identified(self):
        return self.user_id is not None

    def identify(self, user):
        """Log in as *user*: both ids come from the stored record."""
        self.user_id = user.id
        self.family_id = user.family_id

    def switch_user(self, user_id, family_id=None):
        """
        Make *user_id* the active member.

        The family id is left as it is unless *family_id* is given; callers
        that trust the member list they rendered skip the lookup.
        """
        self.user_id = user_id
        if family_id is not None:
            self.family_id = family_id

    def clear(self):
        self.user_id = None
        self.family_id = None

    def save(self, store):
        """Write this context back into the cookie session."""
        if self.user_id is None:
            store.pop(SESSION_USER_KEY, None)
            store.pop(SESSION_FAMILY_KEY, None)
            return
        store[SESSION_USER_KEY] = self.user_id
        if self.family_id is None:
            store.pop(SESSION_FAMILY_KEY, None)
        else:
            store[SESSION_FAMILY_KEY] = self.family_id

    def __repr__(self):
        return f'<SessionContext user={self.user_id} family={self.family_id}>'


def session_required(view):
    """Pass the request's SessionContext to *view*, or redirect to the start page."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        ctx = SessionContext.from_session(session)
        if not ctx.is_identified:
            current_app.logger.info(f'No active session for {request.method} {request.path}; redirecting to start')
            return redirect(url_for('tracker.start'))
        return view(ctx, *args, **kwargs)
    return wrapped
