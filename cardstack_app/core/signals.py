"""
Central Signal Registry.

Uses Flask's blinker integration so modules can react to authentication
events without importing each other.

Usage:
    # Publisher
    from cardstack_app.core.signals import user_signed_in
    user_signed_in.send(current_app._get_current_object(), user=user)

    # Subscriber (in a module's events.py)
    @user_signed_in.connect
    def on_signed_in(sender, **kwargs):
        ...
"""
from blinker import Namespace

auth_signals = Namespace()

# Payload: user
user_registered = auth_signals.signal('user-registered')

# Payload: user
user_signed_in = auth_signals.signal('user-signed-in')

# Payload: user_id
user_signed_out = auth_signals.signal('user-signed-out')

# Payload: reason (error code, never the submitted credentials)
sign_in_failed = auth_signals.signal('sign-in-failed')
