# File: cardstack_app/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# cardstack_app/core/ -> project root is two levels up
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "cardstack.db")


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


class Config:
    """Cardstack application configuration."""

    APP_NAME = 'Cardstack'

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, the environment is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = os.environ.get('LOG_JSON', '').lower() in ('1', 'true', 'yes')

    # Tables normally come from `flask db upgrade`.
    AUTO_CREATE_TABLES = os.environ.get('AUTO_CREATE_TABLES', '').lower() in ('1', 'true', 'yes')

    AUTH_SESSION_LIFETIME_DAYS = _env_int('AUTH_SESSION_LIFETIME_DAYS', 30)
    AUTH_MIN_PASSWORD_LENGTH = _env_int('AUTH_MIN_PASSWORD_LENGTH', 6)

    @classmethod
    def init_app(cls, app):
        """Create the directories the configured storage needs."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
