from cardstack_app.core.error_handlers import CardstackError

# Shown for every failed sign-in, whatever the cause, so accounts cannot be enumerated.
INVALID_CREDENTIALS_MESSAGE = "Invalid Email or password"


class AuthenticationError(CardstackError):
    """Base exception for a failed credential check."""
    def __init__(self, code: str):
        super().__init__(INVALID_CREDENTIALS_MESSAGE, code=code, status_code=401)


class AccountNotFoundError(AuthenticationError):
    """Raised when no account exists for the given email."""
    def __init__(self):
        super().__init__('ACCOUNT_NOT_FOUND')


class InvalidCredentialsError(AuthenticationError):
    """Raised when the password does not match the stored hash."""
    def __init__(self):
        super().__init__('INVALID_CREDENTIALS')


class UnauthenticatedError(CardstackError):
    """Raised when a session token is missing, malformed, unknown or expired."""
    def __init__(self, reason: str = 'missing'):
        self.reason = reason
        super().__init__('Authentication required', code='UNAUTHENTICATED', status_code=401,
                         details={'reason': reason})


class DuplicateEmailError(CardstackError):
    """Raised when registering an email that already has an account."""
    def __init__(self, email: str):
        self.email = email
        super().__init__('Email has already been taken', code='DUPLICATE_EMAIL', status_code=409)
