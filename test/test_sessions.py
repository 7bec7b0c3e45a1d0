"""
Test cases for the session lifecycle.
"""
from quizguard.extensions import db
from quizguard.models import QuizSession
from quizguard.services import SessionService

KEY = {'student_absen': 12, 'student_class': 'XI-IPA'}


def status_of(client):
    return client.get('/api/session/status?absen=12&kelas=XI-IPA')


class TestSessionLifecycle:
    """Test cases for start, block, unblock and status."""

    def test_status_before_start_is_not_found(self, client):
        response = status_of(client)
        assert response.status_code == 404
        assert response.get_json() == {'status': 'not_found'}

    def test_start_sets_active(self, client):
        assert client.post('/api/session/start', json=KEY).get_json() == {'success': True}
        assert status_of(client).get_json() == {'status': 'active'}

    def test_block_sets_blocked(self, client):
        client.post('/api/session/start', json=KEY)
        client.post('/api/session/block', json=KEY)
        assert status_of(client).get_json() == {'status': 'blocked'}

    def test_start_resets_blocked_session(self, app, client):
        client.post('/api/session/start', json=KEY)
        client.post('/api/session/block', json=KEY)
        client.post('/api/session/start', json=KEY)
        assert status_of(client).get_json() == {'status': 'active'}

        with app.app_context():
            assert QuizSession.query.count() == 1

    def test_unblock_sets_active(self, client, admin_client):
        client.post('/api/session/start', json=KEY)
        client.post('/api/session/block', json=KEY)
        response = admin_client.post('/api/session/unblock', json=KEY)
        assert response.status_code == 200
        assert response.get_json()['success'] is True
        assert status_of(client).get_json() == {'status': 'active'}

    def test_unblock_on_active_session_stays_active(self, client, admin_client):
        client.post('/api/session/start', json=KEY)
        admin_client.post('/api/session/unblock', json=KEY)
        assert status_of(client).get_json() == {'status': 'active'}

    def test_block_without_session_is_noop(self, app, client):
        response = client.post('/api/session/block', json=KEY)
        assert response.status_code == 200
        assert status_of(client).status_code == 404
        with app.app_context():
            assert QuizSession.query.count() == 0

    def test_unblock_requires_admin(self, client):
        client.post('/api/session/start', json=KEY)
        client.post('/api/session/block', json=KEY)
        assert client.post('/api/session/unblock', json=KEY).status_code == 401
        assert status_of(client).get_json() == {'status': 'blocked'}

    def test_missing_fields(self, client):
        assert client.post('/api/session/start', json={'student_absen': 12}).status_code == 400
        assert client.post('/api/session/block', json={'student_class': 'X'}).status_code == 400
        assert client.get('/api/session/status?absen=12').status_code == 400


class TestSessionService:
    """Test cases for SessionService directly."""

    def test_last_write_wins(self, app):
        with app.app_context():
            SessionService.start(3, 'X-1')
            SessionService.block(3, 'X-1')
            SessionService.unblock(3, 'X-1')
            SessionService.block(3, 'X-1')
            assert SessionService.status(3, 'X-1') == 'blocked'

    def test_start_refreshes_last_updated(self, app):
        with app.app_context():
            SessionService.start(3, 'X-1')
            first = QuizSession.query.one().last_updated
            SessionService.block(3, 'X-1')
            SessionService.start(3, 'X-1')
            db.session.expire_all()
            assert QuizSession.query.one().last_updated >= first

    def test_set_status_reports_rows_touched(self, app):
        with app.app_context():
            assert SessionService.block(5, 'X-1') == 0
            SessionService.start(5, 'X-1')
            assert SessionService.block(5, 'X-1') == 1


class TestSessionKeys:
    """Test cases for how (absen, class) keys are read."""

    def test_numeric_class_is_stored_as_text(self, app, client, admin_client):
        key = {'student_absen': 3, 'student_class': 12}
        client.post('/api/session/start', json=key)
        client.post('/api/session/block', json=key)
        assert admin_client.post('/api/session/unblock', json=key).status_code == 200

        with app.app_context():
            row = QuizSession.query.one()
            assert row.student_class == '12'
            assert row.status == 'active'

    def test_absen_out_of_integer_range(self, client, admin_client):
        for absen in (2 ** 31, -2 ** 31 - 1, 10 ** 20):
            key = {'student_absen': absen, 'student_class': 'X-1'}
            assert client.post('/api/session/start', json=key).status_code == 400
            assert admin_client.post('/api/session/unblock', json=key).status_code == 400

    def test_absen_at_integer_bounds(self, client):
        for absen in (2 ** 31 - 1, -2 ** 31):
            key = {'student_absen': absen, 'student_class': 'X-1'}
            assert client.post('/api/session/start', json=key).status_code == 200
