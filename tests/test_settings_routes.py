"""
Integration tests for user settings routes (/api/user/settings).
"""

import sys
import os
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db
from models.user_settings import UserSettings


@pytest.fixture(scope='function')
def app():
    """Create app with a fresh in-memory database for each test"""
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client signed in as ana"""
    client = app.test_client()
    client.post('/auth/signup', json={
        'username': 'ana',
        'email': 'ana@example.com',
        'password': 'secret123'
    })
    return client


class TestGetSettings:
    """Tests for GET /api/user/settings"""

    def test_defaults_created_on_first_access(self, app, client):
        response = client.get('/api/user/settings')

        assert response.status_code == 200
        data = response.get_json()
        assert data['selected_languages'] == ['english', 'serbian', 'russian', 'spanish']
        assert data['skip_button_enabled'] is False
        assert data['help_button_enabled'] is False
        assert data['auto_insert_enabled'] is False

        client.get('/api/user/settings')
        with app.app_context():
            assert UserSettings.query.count() == 1

    def test_requires_login(self, app):
        assert app.test_client().get('/api/user/settings').status_code == 401


class TestUpdateSettings:
    """Tests for PUT /api/user/settings"""

    def test_update_languages_and_flags(self, client):
        response = client.put('/api/user/settings', json={
            'selected_languages': ['english', 'serbian'],
            'help_button_enabled': True
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['selected_languages'] == ['english', 'serbian']
        assert data['help_button_enabled'] is True
        assert data['skip_button_enabled'] is False

        assert client.get('/api/user/settings').get_json()['help_button_enabled'] is True

    def test_empty_language_list_rejected(self, client):
        response = client.put('/api/user/settings', json={'selected_languages': []})

        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_non_boolean_flag_rejected(self, client):
        response = client.put('/api/user/settings', json={'skip_button_enabled': 'yes'})

        assert response.status_code == 400
        assert 'must be a boolean' in response.get_json()['error']

    def test_unknown_keys_rejected(self, client):
        response = client.put('/api/user/settings', json={'theme': 'dark'})

        assert response.status_code == 400

    def test_missing_body(self, client):
        response = client.put('/api/user/settings')

        assert response.status_code == 400
