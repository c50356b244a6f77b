"""
Auth Service - credential verification and account registration.

Decouples database logic from the routes. Failures are raised as
``AuthenticationError`` subclasses; the request boundary collapses them
into one user-visible message.
"""
from flask import current_app
from sqlalchemy.exc import IntegrityError

from cardstack_app.core.error_handlers import ValidationError
from cardstack_app.core.extensions import db
from cardstack_app.core.signals import user_registered
from cardstack_app.utils.time_utils import utcnow
from ..exceptions import AccountNotFoundError, DuplicateEmailError, InvalidCredentialsError
from ..models import User, normalize_email


class AuthService:
    """Service for authentication related operations."""

    @staticmethod
    def find_by_email(email):
        return User.query.filter_by(email=normalize_email(email)).first()

    @staticmethod
    def verify_credentials(email, password):
        """
        Verify an email/password pair.

        Returns:
            The matching User.
        Raises:
            AccountNotFoundError if no account uses the email,
            InvalidCredentialsError if the password does not match.
        """
        user = AuthService.find_by_email(email)
        if user is None:
            raise AccountNotFoundError()
        if not user.check_password(password or ''):
            raise InvalidCredentialsError()
        return user

    @staticmethod
    def register_user(email, password):
        """
        Create an account and emit ``user_registered``.

        Raises:
            ValidationError for a malformed email or short password,
            DuplicateEmailError if the email is taken.
        """
        email = normalize_email(email)
        min_length = current_app.config['AUTH_MIN_PASSWORD_LENGTH']
        if '@' not in email:
            raise ValidationError('Email is invalid', errors={'email': ['is invalid']})
        if len(password or '') < min_length:
            raise ValidationError(
                f'Password is too short (minimum is {min_length} characters)',
                errors={'password': ['is too short']},
            )
        if AuthService.find_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = User(email=email)
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent signup for the same email.
            db.session.rollback()
            raise DuplicateEmailError(email) from exc

        user_registered.send(current_app._get_current_object(), user=user)
        return user

    @staticmethod
    def record_sign_in(user):
        user.last_sign_in_at = utcnow()
        db.session.commit()
