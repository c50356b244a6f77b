from functools import wraps
from flask import redirect, url_for
from flask_login import current_user
from cardstack_app.core.extensions import login_manager
from .schemas import ANONYMOUS, Identity


def current_identity():
    """Resolve the request's session into an Identity, or ANONYMOUS."""
    if not current_user.is_authenticated:
        return ANONYMOUS
    return Identity(
        user_id=current_user.id,
        email=current_user.email,
        session_token=current_user.session_token,
    )


def require_identity(view):
    """
    Route decorator for protected pages.
    Resolves the session before the view runs; anonymous requests are
    redirected to the login page and the view is never called.
    """
    @wraps(view)
    def guarded(*args, **kwargs):
        identity = current_identity()
        if not identity.is_authenticated:
            return login_manager.unauthorized()
        return view(*args, identity=identity, **kwargs)
    return guarded


def with_identity(view):
    """Route decorator for public pages: passes the Identity or ANONYMOUS."""
    @wraps(view)
    def decorated(*args, **kwargs):
        return view(*args, identity=current_identity(), **kwargs)
    return decorated


def anonymous_only(redirect_endpoint):
    """Send already signed-in visitors to ``redirect_endpoint`` instead of the view."""
    def decorator(view):
        @wraps(view)
        def decorated(*args, **kwargs):
            if current_identity().is_authenticated:
                return redirect(url_for(redirect_endpoint))
            return view(*args, **kwargs)
        return decorated
    return decorator
