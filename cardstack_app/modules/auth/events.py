from cardstack_app.core.signals import sign_in_failed, user_registered, user_signed_in, user_signed_out


def on_user_registered(sender, user, **kwargs):
    sender.logger.info(f"User registered: {user.email} ({user.id})")


def on_user_signed_in(sender, user, **kwargs):
    sender.logger.info(f"User signed in: {user.id}")


def on_user_signed_out(sender, user_id, **kwargs):
    sender.logger.info(f"User signed out: {user_id}")


def on_sign_in_failed(sender, reason, **kwargs):
    sender.logger.warning(f"Failed sign-in attempt ({reason})")


def register_events():
    """Connect signals."""
    user_registered.connect(on_user_registered)
    user_signed_in.connect(on_user_signed_in)
    user_signed_out.connect(on_user_signed_out)
    sign_in_failed.connect(on_sign_in_failed)
