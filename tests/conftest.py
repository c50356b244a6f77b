import pytest

from cardstack_app import create_app, db
from cardstack_app.core.config import Config
from cardstack_app.modules.auth.services.auth_service import AuthService


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None
    AUTO_CREATE_TABLES = True


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_email():
    return 'test@example.com'


@pytest.fixture
def user_password():
    return 'password123'


@pytest.fixture
def registered_user_id(app, user_email, user_password):
    with app.app_context():
        user = AuthService.register_user(user_email, user_password)
        return user.id


@pytest.fixture
def sign_in(client):
    def _sign_in(email, password, follow_redirects=False, next_url=None):
        return client.post(
            '/users/sign_in',
            query_string={'next': next_url} if next_url is not None else None,
            data={'user_email': email, 'user_password': password},
            follow_redirects=follow_redirects,
        )
    return _sign_in
