from urllib.parse import urlparse

from cardstack_app.modules.auth.exceptions import UnauthenticatedError
from cardstack_app.modules.auth.guard import current_identity, require_identity, with_identity
from cardstack_app.modules.auth.schemas import ANONYMOUS, Identity


def _add_probe_routes(app, calls):
    @app.route('/_probe/protected')
    @require_identity
    def protected_probe(identity):
        calls.append(identity)
        return {'user_id': identity.user_id, 'email': identity.email}

    @app.route('/_probe/public')
    @with_identity
    def public_probe(identity):
        calls.append(identity)
        return {'authenticated': identity.is_authenticated}

    @app.route('/_probe/raise')
    def raising_probe():
        raise UnauthenticatedError('expired')


def test_current_identity_is_anonymous_without_session(app):
    with app.test_request_context('/'):
        assert current_identity() is ANONYMOUS
        assert not current_identity().is_authenticated


def test_guard_redirects_before_running_the_view(app, client):
    calls = []
    _add_probe_routes(app, calls)

    response = client.get('/_probe/protected')

    assert response.status_code == 302
    assert urlparse(response.location).path == '/users/sign_in'
    assert calls == []


def test_guard_passes_identity_explicitly(app, client, sign_in, registered_user_id, user_email, user_password):
    calls = []
    _add_probe_routes(app, calls)
    sign_in(user_email, user_password)

    response = client.get('/_probe/protected')

    assert response.status_code == 200
    assert response.get_json() == {'user_id': registered_user_id, 'email': user_email}
    identity = calls[0]
    assert isinstance(identity, Identity)
    assert identity.is_authenticated
    assert identity.session_token


def test_public_views_receive_anonymous_marker(app, client):
    calls = []
    _add_probe_routes(app, calls)

    response = client.get('/_probe/public')

    assert response.get_json() == {'authenticated': False}
    assert calls == [ANONYMOUS]


def test_escaped_unauthenticated_error_redirects_pages(app, client):
    _add_probe_routes(app, [])

    response = client.get('/_probe/raise')

    assert response.status_code == 302
    assert urlparse(response.location).path == '/users/sign_in'


def test_escaped_unauthenticated_error_is_json_for_api_clients(app, client):
    _add_probe_routes(app, [])

    response = client.get('/_probe/raise', headers={'Accept': 'application/json'})

    assert response.status_code == 401
    payload = response.get_json()
    assert payload['code'] == 'UNAUTHENTICATED'
    assert payload['details'] == {'reason': 'expired'}
