"""
Integration tests for vocabulary routes (/api/vocabulary).

Tests the CRUD flow including:
- Creating items with synonyms and language defaults
- 409 with the existing item on duplicates
- Per-user isolation
- Updating, deleting and resetting attempt counts
- Reviewing and clearing incorrect attempts
"""

import sys
import os
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db
from models.synonym import Synonym
from models.vocabulary_item import VocabularyItem


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


@pytest.fixture
def other_client(app):
    """Test client signed in as a second user"""
    client = app.test_client()
    client.post('/auth/signup', json={
        'username': 'marko',
        'email': 'marko@example.com',
        'password': 'secret123'
    })
    return client


@pytest.fixture
def house(client):
    response = client.post('/api/vocabulary', json={
        'word': 'kuća',
        'translation': 'house',
        'synonyms': ['home']
    })
    return response.get_json()


class TestCreateVocabulary:
    """Tests for POST /api/vocabulary"""

    def test_create_with_synonyms(self, client):
        response = client.post('/api/vocabulary', json={
            'word': 'kuća',
            'translation': 'house',
            'synonyms': ['home', ' ', 'home']
        })

        assert response.status_code == 201
        data = response.get_json()
        assert data['word'] == 'kuća'
        assert data['language'] == 'serbian'
        assert data['translation_language'] == 'english'
        assert data['synonyms'] == ['home']
        assert data['learned'] is False

    def test_create_with_explicit_languages(self, client):
        response = client.post('/api/vocabulary', json={
            'word': 'perro',
            'translation': 'dog',
            'language': 'spanish',
            'translation_language': 'english'
        })

        assert response.status_code == 201
        assert response.get_json()['language'] == 'spanish'

    def test_duplicate_returns_existing_item(self, client, house):
        response = client.post('/api/vocabulary', json={'word': 'kuća', 'translation': 'building'})

        assert response.status_code == 409
        data = response.get_json()
        assert data['error'] == 'Word already exists'
        assert data['existing_item']['id'] == house['id']
        assert data['existing_item']['translation'] == 'house'

    def test_missing_translation(self, client):
        response = client.post('/api/vocabulary', json={'word': 'pas'})

        assert response.status_code == 400

    def test_no_json_body(self, client):
        response = client.post('/api/vocabulary')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'No JSON data provided'


class TestReadVocabulary:
    """Tests for GET /api/vocabulary and GET /api/vocabulary/<id>"""

    def test_list_only_own_items(self, client, other_client, house):
        other_client.post('/api/vocabulary', json={'word': 'pas', 'translation': 'dog'})

        data = client.get('/api/vocabulary').get_json()

        assert [item['word'] for item in data] == ['kuća']

    def test_get_item(self, client, house):
        response = client.get(f"/api/vocabulary/{house['id']}")

        assert response.status_code == 200
        assert response.get_json()['synonyms'] == ['home']

    def test_other_users_item_is_404(self, other_client, house):
        response = other_client.get(f"/api/vocabulary/{house['id']}")

        assert response.status_code == 404


class TestUpdateVocabulary:
    """Tests for PUT /api/vocabulary/<id>"""

    def test_update_fields_and_synonyms(self, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json={
            'translation': 'building',
            'synonyms': ['house', 'home'],
            'mastered': True
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['translation'] == 'building'
        assert data['synonyms'] == ['house', 'home']
        assert data['mastered'] is True

    def test_clear_synonyms(self, app, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json={'synonyms': []})

        assert response.get_json()['synonyms'] == []
        with app.app_context():
            assert Synonym.query.count() == 0

    def test_empty_word_rejected(self, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json={'word': '  '})

        assert response.status_code == 400

    def test_no_valid_fields(self, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json={'foo': 'bar'})

        assert response.status_code == 400

    def test_clash_with_existing_word(self, client, house):
        dog = client.post('/api/vocabulary', json={'word': 'pas', 'translation': 'dog'}).get_json()

        response = client.put(f"/api/vocabulary/{dog['id']}", json={'word': 'kuća'})

        assert response.status_code == 409

    def test_other_users_item_is_404(self, other_client, house):
        response = other_client.put(f"/api/vocabulary/{house['id']}", json={'translation': 'barn'})

        assert response.status_code == 404


class TestDeleteVocabulary:
    """Tests for DELETE /api/vocabulary/<id>"""

    def test_delete(self, app, client, house):
        response = client.delete(f"/api/vocabulary/{house['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/vocabulary/{house['id']}").status_code == 404
        with app.app_context():
            assert VocabularyItem.query.count() == 0
            assert Synonym.query.count() == 0

    def test_other_users_item_is_404(self, other_client, house):
        response = other_client.delete(f"/api/vocabulary/{house['id']}")

        assert response.status_code == 404


class TestAttemptEndpoints:
    """Tests for reset-attempts and incorrect-attempts endpoints"""

    def test_reset_attempts(self, client, house):
        client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 'house'})
        client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 'horse'})

        response = client.post(f"/api/vocabulary/{house['id']}/reset-attempts")

        assert response.status_code == 200
        item = response.get_json()['item']
        assert item['correct_attempts'] == 0
        assert item['wrong_attempts'] == 0

    def test_list_and_clear_incorrect_attempts(self, client, house):
        client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 'horse'})

        attempts = client.get(f"/api/vocabulary/{house['id']}/incorrect-attempts").get_json()
        assert len(attempts) == 1
        assert attempts[0]['incorrect_answer'] == 'horse'
        assert attempts[0]['expected_answer'] == 'house'

        response = client.delete(f"/api/vocabulary/{house['id']}/incorrect-attempts")
        assert response.get_json()['deleted'] == 1
        assert client.get(f"/api/vocabulary/{house['id']}/incorrect-attempts").get_json() == []

    def test_incorrect_attempts_of_other_user_is_404(self, other_client, house):
        response = other_client.get(f"/api/vocabulary/{house['id']}/incorrect-attempts")

        assert response.status_code == 404


class TestMalformedBodies:
    """Tests for request bodies of the wrong shape or type"""

    def test_create_with_array_body(self, client):
        response = client.post('/api/vocabulary', json=['kuća', 'house'])

        assert response.status_code == 400
        assert response.get_json()['error'] == 'No JSON data provided'

    def test_update_with_array_body(self, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json=['learned'])

        assert response.status_code == 400

    def test_string_flag_rejected(self, client, house):
        response = client.put(f"/api/vocabulary/{house['id']}", json={'learned': 'false'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'learned must be a boolean'
        assert client.get(f"/api/vocabulary/{house['id']}").get_json()['learned'] is False
