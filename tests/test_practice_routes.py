"""
Integration tests for practice routes (/api/practice).

Tests the practice flow including:
- Fetching a word to practice in either direction
- Checking answers (synonyms, folded diacritics, wrong answers)
- Input validation on /check
- Statistics and progress reset
"""

import sys
import os
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from models import db
from models.incorrect_attempt import IncorrectAttempt
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
def house(client):
    response = client.post('/api/vocabulary', json={
        'word': 'kuća',
        'translation': 'house',
        'synonyms': ['home']
    })
    return response.get_json()


class TestGetPracticeWord:
    """Tests for GET /api/practice/word"""

    def test_returns_word(self, client, house):
        response = client.get('/api/practice/word')

        assert response.status_code == 200
        data = response.get_json()
        assert data['id'] == house['id']
        assert data['mode'] == 'word-translation'
        assert data['synonyms'] == ['home']

    def test_reverse_mode(self, client, house):
        data = client.get('/api/practice/word?mode=translation-word').get_json()

        assert data['mode'] == 'translation-word'

    def test_invalid_mode(self, client, house):
        response = client.get('/api/practice/word?mode=backwards')

        assert response.status_code == 400

    def test_no_words_left(self, client):
        response = client.get('/api/practice/word')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'No unlearned words available for practice'

    def test_language_filter(self, client, house):
        response = client.get('/api/practice/word?language=spanish')

        assert response.status_code == 404

    def test_requires_login(self, app):
        response = app.test_client().get('/api/practice/word')

        assert response.status_code == 401


class TestCheckAnswer:
    """Tests for POST /api/practice/check"""

    def test_correct_answer_marks_learned(self, app, client, house):
        response = client.post('/api/practice/check', json={
            'id': house['id'],
            'user_answer': 'HOUSE'
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['correct'] is True
        assert data['expected_answer'] == 'house'
        assert data['mode'] == 'word-translation'

        with app.app_context():
            item = db.session.get(VocabularyItem, house['id'])
            assert item.learned is True
            assert item.correct_attempts == 1

    def test_folded_answer_reveals_original(self, client, house):
        data = client.post('/api/practice/check', json={
            'id': house['id'],
            'user_answer': 'kuca',
            'mode': 'translation-word'
        }).get_json()

        assert data['correct'] is True
        assert data['original_answer'] == 'kuća'

    def test_wrong_answer(self, app, client, house):
        data = client.post('/api/practice/check', json={
            'id': house['id'],
            'user_answer': 'mouse'
        }).get_json()

        assert data['correct'] is False
        assert data['expected_answer'] == 'house'
        assert data['other_answers'] == ['home']
        assert data['word_differences'][0]['correct_word'] == 'house'

        with app.app_context():
            assert IncorrectAttempt.query.count() == 1
            assert db.session.get(VocabularyItem, house['id']).wrong_attempts == 1

    def test_missing_fields(self, client, house):
        response = client.post('/api/practice/check', json={'id': house['id']})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Word ID and user answer are required'

    def test_non_string_answer(self, client, house):
        response = client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 42})

        assert response.status_code == 400

    def test_invalid_mode(self, client, house):
        response = client.post('/api/practice/check', json={
            'id': house['id'],
            'user_answer': 'house',
            'mode': 'backwards'
        })

        assert response.status_code == 400

    def test_unknown_word(self, client):
        response = client.post('/api/practice/check', json={'id': 999, 'user_answer': 'house'})

        assert response.status_code == 404

    def test_array_body(self, client, house):
        response = client.post('/api/practice/check', json=[house['id'], 'house'])

        assert response.status_code == 400
        assert response.get_json()['error'] == 'No JSON data provided'


class TestStatsAndReset:
    """Tests for GET /api/practice/stats and POST /api/practice/reset"""

    def test_stats(self, client, house):
        client.post('/api/vocabulary', json={'word': 'pas', 'translation': 'dog'})
        client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 'home'})

        stats = client.get('/api/practice/stats').get_json()

        assert stats['total'] == 2
        assert stats['learned'] == 1
        assert stats['unlearned'] == 1
        assert stats['progress'] == 50
        assert stats['total_correct_attempts'] == 1

    def test_reset(self, client, house):
        client.post('/api/practice/check', json={'id': house['id'], 'user_answer': 'house'})
        assert client.get('/api/practice/word').status_code == 404

        response = client.post('/api/practice/reset')

        assert response.status_code == 200
        assert client.get('/api/practice/word').get_json()['id'] == house['id']
