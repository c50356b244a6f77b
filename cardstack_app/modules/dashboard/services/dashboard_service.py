"""
Dashboard Service - gathers what the overview page shows for one user.
"""
from cardstack_app.core.extensions import db
from cardstack_app.models import ContentChunk, Flashcard


class DashboardService:

    @staticmethod
    def get_user_flashcards(user_id):
        """Return (flashcard, chunk title) pairs owned by the user, oldest first."""
        return (
            db.session.query(Flashcard, ContentChunk.title)
            .join(ContentChunk, Flashcard.content_chunk_id == ContentChunk.id)
            .filter(Flashcard.user_id == user_id)
            .order_by(Flashcard.id.asc())
            .all()
        )

    @staticmethod
    def get_dashboard_data(user_id):
        rows = DashboardService.get_user_flashcards(user_id)
        return {
            'flashcards': [
                {
                    'id': card.id,
                    'question': card.question,
                    'answer': card.answer,
                    'review_at': card.review_at,
                    'content_chunk_title': chunk_title,
                }
                for card, chunk_title in rows
            ],
            'flashcard_count': len(rows),
        }
