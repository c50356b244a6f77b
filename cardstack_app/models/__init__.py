"""Database models package for Cardstack."""

from ..core.extensions import db
from ..modules.auth.models import AuthSession, User
from .study import ContentChunk, Flashcard

__all__ = [
    'db',
    'AuthSession',
    'User',
    'ContentChunk',
    'Flashcard',
]
