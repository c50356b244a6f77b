# File: cardstack_app/modules/auth/config.py

class AuthModuleDefaultConfig:
    AUTH_SESSION_LIFETIME_DAYS = 30
    AUTH_MIN_PASSWORD_LENGTH = 6

    @classmethod
    def apply(cls, app):
        for key, value in vars(cls).items():
            if key.isupper():
                app.config.setdefault(key, value)
