"""
Pytest configuration and fixtures for testing.
Each test gets a fresh app over in-memory SQLite.
"""
import pytest

from quizguard import create_app
from quizguard.extensions import db
from quizguard.models import Quiz

ADMIN_USERNAME = 'guru'
ADMIN_PASSWORD = 'rahasia'


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def admin_client(app):
    """Test client already holding the admin cookie."""
    client = app.test_client()
    response = client.post('/api/login', json={
        'username': ADMIN_USERNAME,
        'password': ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def seeded_quizzes(app):
    """Two questions: id 1 answers B, id 2 answers C."""
    with app.app_context():
        db.session.add_all([
            Quiz(id=1, question='2 + 2 = ?', options={'A': '3', 'B': '4', 'C': '5'}, correct_answer='B'),
            Quiz(id=2, question='Ibu kota Indonesia?', options={'A': 'Bandung', 'B': 'Surabaya', 'C': 'Jakarta'},
                 correct_answer='C'),
        ])
        db.session.commit()
    return [1, 2]
