"""
Session Guard - issues, resolves and revokes sign-in sessions.

Every session is a row in ``auth_sessions`` keyed by an opaque random token.
The client only ever holds the token (inside Flask's signed session cookie,
through Flask-Login), so deleting the row revokes the session even if an old
cookie is replayed.
"""
import re
import secrets
from datetime import timedelta

from flask import current_app

from cardstack_app.core.extensions import db
from cardstack_app.utils.time_utils import as_utc, utcnow
from ..exceptions import UnauthenticatedError
from ..models import AuthSession, User

# secrets.token_urlsafe(32) yields 43 characters from the URL-safe alphabet.
TOKEN_BYTES = 32
TOKEN_PATTERN = re.compile(r'[A-Za-z0-9_-]{43}')


class SessionGuard:
    """Service for the sign-in session lifecycle."""

    @staticmethod
    def lifetime():
        return timedelta(days=current_app.config['AUTH_SESSION_LIFETIME_DAYS'])

    @staticmethod
    def establish(user):
        """Create a session bound to ``user`` and return its token."""
        token = secrets.token_urlsafe(TOKEN_BYTES)
        now = utcnow()
        db.session.add(AuthSession(
            token=token,
            user_id=user.id,
            created_at=now,
            expires_at=now + SessionGuard.lifetime(),
        ))
        db.session.commit()
        user.session_token = token
        return token

    @staticmethod
    def resolve(token):
        """
        Return the user id bound to ``token``.

        Raises:
            UnauthenticatedError if the token is missing, malformed, unknown
            or expired. Expired sessions are deleted on sight.
        """
        if not token:
            raise UnauthenticatedError('missing')
        if not isinstance(token, str) or not TOKEN_PATTERN.fullmatch(token):
            raise UnauthenticatedError('malformed')

        record = AuthSession.query.filter_by(token=token).first()
        if record is None:
            raise UnauthenticatedError('unknown')

        if as_utc(record.expires_at) <= utcnow():
            db.session.delete(record)
            db.session.commit()
            raise UnauthenticatedError('expired')

        return record.user_id

    @staticmethod
    def destroy(token):
        """Invalidate the session immediately. Unknown tokens are ignored."""
        if not token:
            return False
        removed = AuthSession.query.filter_by(token=token).delete(synchronize_session=False)
        db.session.commit()
        return bool(removed)

    @staticmethod
    def purge_expired():
        """Delete every expired session and return how many were removed."""
        removed = AuthSession.query.filter(AuthSession.expires_at <= utcnow()).delete(
            synchronize_session=False
        )
        db.session.commit()
        return removed


def load_session_user(token):
    """Flask-Login user loader: map a session token back to its user."""
    try:
        user_id = SessionGuard.resolve(token)
    except UnauthenticatedError as exc:
        current_app.logger.debug("Session did not resolve: %s", exc.reason)
        return None

    user = db.session.get(User, user_id)
    if user is not None:
        user.session_token = token
    return user
