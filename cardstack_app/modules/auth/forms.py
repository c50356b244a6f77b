# File: cardstack_app/modules/auth/forms.py
# Sign-in and sign-up forms. Fields are prefixed with ``user_`` so inputs
# render as user_email / user_password.

from flask import current_app
from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField
from wtforms.validators import DataRequired, EqualTo, Optional, Regexp, ValidationError

from .models import normalize_email
from .services.auth_service import AuthService

EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'


class _UserForm(FlaskForm):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('prefix', 'user_')
        super().__init__(*args, **kwargs)


class LoginForm(_UserForm):
    """
    Sign-in form.
    """
    email = StringField('Email', validators=[DataRequired(message="Email can't be blank")],
                        filters=[normalize_email])
    password = PasswordField('Password', validators=[DataRequired(message="Password can't be blank")])
    submit = SubmitField('Login')


class RegistrationForm(_UserForm):
    """
    Sign-up form.
    """
    email = StringField('Email', validators=[
        DataRequired(message="Email can't be blank"),
        Regexp(EMAIL_PATTERN, message='Email is invalid'),
    ], filters=[normalize_email])
    password = PasswordField('Password', validators=[DataRequired(message="Password can't be blank")])
    password_confirmation = PasswordField('Password confirmation', validators=[
        Optional(), EqualTo('password', message="Password confirmation doesn't match Password"),
    ])
    submit = SubmitField('Sign up')

    def validate_email(self, email):
        """
        Reject an email that already has an account.
        """
        if AuthService.find_by_email(email.data) is not None:
            raise ValidationError('Email has already been taken')

    def validate_password(self, password):
        min_length = current_app.config['AUTH_MIN_PASSWORD_LENGTH']
        if len(password.data or '') < min_length:
            raise ValidationError(f'Password is too short (minimum is {min_length} characters)')
