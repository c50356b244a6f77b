"""Study content models: content chunks and the flashcards derived from them."""

from __future__ import annotations

from ..core.extensions import db
from ..utils.time_utils import utcnow


class ContentChunk(db.Model):
    """A piece of source material that flashcards are derived from."""

    __tablename__ = 'content_chunks'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=True)
    body = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    flashcards = db.relationship('Flashcard', backref='content_chunk', lazy='dynamic', cascade='all, delete-orphan')

    def __repr__(self):
        return f"<ContentChunk(id={self.id}, title={self.title})>"


class Flashcard(db.Model):
    """A question/answer card owned by one user and derived from one content chunk."""

    __tablename__ = 'flashcards'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    content_chunk_id = db.Column(db.Integer, db.ForeignKey('content_chunks.id'), nullable=False, index=True)
    question = db.Column(db.Text, nullable=True)
    answer = db.Column(db.Text, nullable=True)
    # Next scheduled review; stored as given, nothing here interprets it.
    review_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Flashcard(id={self.id}, user_id={self.user_id}, content_chunk_id={self.content_chunk_id})>"
