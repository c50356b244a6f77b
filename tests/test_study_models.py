from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from cardstack_app import db
from cardstack_app.models import ContentChunk, Flashcard, User
from cardstack_app.modules.auth.services.auth_service import AuthService
from cardstack_app.modules.dashboard.services.dashboard_service import DashboardService
from cardstack_app.utils.time_utils import as_utc


@pytest.fixture
def chunk_id(app):
    with app.app_context():
        chunk = ContentChunk(title='Cell biology', body='Mitochondria produce ATP.')
        db.session.add(chunk)
        db.session.commit()
        return chunk.id


def test_flashcard_links_user_and_chunk(app, registered_user_id, chunk_id):
    review_at = datetime(2025, 6, 10, 8, 30, tzinfo=timezone.utc)
    with app.app_context():
        card = Flashcard(
            user_id=registered_user_id,
            content_chunk_id=chunk_id,
            question='What produces ATP?',
            answer='Mitochondria',
            review_at=review_at,
        )
        db.session.add(card)
        db.session.commit()

        stored = db.session.get(Flashcard, card.id)
        assert stored.user.id == registered_user_id
        assert stored.content_chunk.title == 'Cell biology'
        assert as_utc(stored.review_at) == review_at
        assert stored.created_at is not None and stored.updated_at is not None


def test_question_answer_and_review_at_are_optional(app, registered_user_id, chunk_id):
    with app.app_context():
        card = Flashcard(user_id=registered_user_id, content_chunk_id=chunk_id)
        db.session.add(card)
        db.session.commit()

        stored = db.session.get(Flashcard, card.id)
        assert stored.question is None
        assert stored.answer is None
        assert stored.review_at is None


def test_flashcard_requires_a_content_chunk(app, registered_user_id):
    with app.app_context():
        db.session.add(Flashcard(user_id=registered_user_id, question='Orphan?'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_flashcard_requires_a_user(app, chunk_id):
    with app.app_context():
        db.session.add(Flashcard(content_chunk_id=chunk_id, question='Whose?'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_flashcard_foreign_keys_are_enforced(app, registered_user_id):
    with app.app_context():
        db.session.add(Flashcard(user_id=registered_user_id, content_chunk_id=9999))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_email_uniqueness_is_enforced_by_the_database(app, registered_user_id, user_email):
    with app.app_context():
        clone = User(email=user_email)
        clone.set_password('password123')
        db.session.add(clone)
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_dashboard_data_only_lists_own_flashcards(app, registered_user_id, chunk_id):
    with app.app_context():
        other = AuthService.register_user('other@example.com', 'password123')
        db.session.add_all([
            Flashcard(user_id=registered_user_id, content_chunk_id=chunk_id, question='Mine 1'),
            Flashcard(user_id=other.id, content_chunk_id=chunk_id, question='Theirs'),
            Flashcard(user_id=registered_user_id, content_chunk_id=chunk_id, question='Mine 2'),
        ])
        db.session.commit()

        data = DashboardService.get_dashboard_data(registered_user_id)

    assert data['flashcard_count'] == 2
    assert [card['question'] for card in data['flashcards']] == ['Mine 1', 'Mine 2']
    assert {card['content_chunk_title'] for card in data['flashcards']} == {'Cell biology'}


def test_dashboard_page_shows_flashcards(app, client, sign_in, registered_user_id, chunk_id, user_email, user_password):
    with app.app_context():
        db.session.add(Flashcard(
            user_id=registered_user_id,
            content_chunk_id=chunk_id,
            question='What produces ATP?',
            answer='Mitochondria',
        ))
        db.session.commit()
    sign_in(user_email, user_password)

    response = client.get('/dashboard')

    assert b'What produces ATP?' in response.data
    assert b'Mitochondria' in response.data
    assert b'1 card' in response.data


def test_dashboard_page_shows_review_at_as_stored(app, client, sign_in, registered_user_id, chunk_id, user_email, user_password):
    with app.app_context():
        db.session.add(Flashcard(
            user_id=registered_user_id,
            content_chunk_id=chunk_id,
            question='When is the next review?',
            review_at=datetime(2025, 6, 10, 8, 30, 45, tzinfo=timezone.utc),
        ))
        db.session.commit()
    sign_in(user_email, user_password)

    response = client.get('/dashboard')

    assert b'2025-06-10 08:30:45' in response.data
