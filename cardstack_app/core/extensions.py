# File: cardstack_app/core/extensions.py
# Flask extension instances, importable without circular dependencies.

import sqlite3
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf import CSRFProtect
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine

# 1. Database
db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, _connection_record):
    """Enable WAL mode, foreign keys and a busy timeout for SQLite connections."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL;")
        cursor.execute("PRAGMA synchronous=NORMAL;")
        cursor.execute("PRAGMA busy_timeout=30000;")
        cursor.execute("PRAGMA foreign_keys=ON;")
    finally:
        cursor.close()


# 2. Login management
login_manager = LoginManager()
login_manager.login_view = "auth.login"
login_manager.login_message = "You need to sign in or sign up before continuing."
login_manager.login_message_category = "info"

# 3. Security & migrations
csrf_protect = CSRFProtect()
migrate = Migrate()

__all__ = ["db", "login_manager", "csrf_protect", "migrate"]
