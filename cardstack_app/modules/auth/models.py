from __future__ import annotations
from flask_login import UserMixin
from cardstack_app.core.extensions import db
from cardstack_app.utils.time_utils import utcnow
from werkzeug.security import check_password_hash, generate_password_hash


def normalize_email(email: str) -> str:
    return (email or '').strip().lower()


class User(UserMixin, db.Model):
    """Application user model."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    last_sign_in_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    sessions = db.relationship('AuthSession', backref='user', lazy='dynamic', cascade='all, delete-orphan')
    flashcards = db.relationship('Flashcard', backref='user', lazy='dynamic', cascade='all, delete-orphan')

    # Token of the sign-in session this instance was loaded through; never persisted.
    session_token = None

    def get_id(self):
        # Flask-Login keeps this value in the cookie, so it must be the
        # revocable session token and not the primary key.
        return self.session_token

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"


class AuthSession(db.Model):
    """A sign-in session bound to exactly one user."""
    __tablename__ = 'auth_sessions'

    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(64), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<AuthSession(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at})>"
