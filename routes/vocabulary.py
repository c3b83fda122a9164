"""
Vocabulary Routes - CRUD endpoints for the user's vocabulary.

This module provides:
- GET /api/vocabulary - List all items with synonyms
- GET /api/vocabulary/<id> - Get one item
- POST /api/vocabulary - Create an item
- PUT /api/vocabulary/<id> - Update an item and/or its synonyms
- DELETE /api/vocabulary/<id> - Delete an item
- POST /api/vocabulary/<id>/reset-attempts - Zero the attempt counters
- GET/DELETE /api/vocabulary/<id>/incorrect-attempts - Review or clear logged mistakes
"""

import logging

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from models import db
from services.errors import ConflictError, NotFoundError
from services.practice_service import PracticeService
from services.vocabulary_service import VocabularyService

logger = logging.getLogger(__name__)

bp = Blueprint('vocabulary', __name__, url_prefix='/api/vocabulary')


@bp.route('', methods=['GET'])
@login_required
def list_vocabulary():
    """Get all vocabulary items of the current user, newest first"""
    try:
        items = VocabularyService.list_items(current_user.id)
        return jsonify([item.to_dict() for item in items])

    except Exception as e:
        logger.exception(f'Error fetching vocabulary for user {current_user.id}: {str(e)}')
        return jsonify({'error': 'Failed to fetch vocabulary'}), 500


@bp.route('/<int:vocabulary_id>', methods=['GET'])
@login_required
def get_vocabulary_item(vocabulary_id):
    """Get one vocabulary item with its synonyms"""
    try:
        item = VocabularyService.get_item(current_user.id, vocabulary_id)
        return jsonify(item.to_dict())

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404


@bp.route('', methods=['POST'])
@login_required
def create_vocabulary_item():
    """
    Create a vocabulary item.

    Request Body:
        {
            "word": "kuća",
            "translation": "house",
            "language": "serbian",              (optional)
            "translation_language": "english",  (optional)
            "synonyms": ["home"]                (optional)
        }

    Returns:
        201: Created item
        400: Missing word or translation
        409: Word already exists in this language
            {
                "error": "Word already exists",
                "details": "...",
                "existing_item": {...}
            }
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or not data:
            return jsonify({'error': 'No JSON data provided'}), 400

        item = VocabularyService.create_item(
            user_id=current_user.id,
            word=data.get('word'),
            translation=data.get('translation'),
            language=data.get('language'),
            translation_language=data.get('translation_language'),
            synonyms=data.get('synonyms')
        )
        return jsonify(item.to_dict()), 201

    except ConflictError as e:
        return jsonify({
            'error': 'Word already exists',
            'details': str(e),
            'existing_item': e.existing.to_dict() if e.existing else None
        }), 409
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        logger.exception(f'Error creating vocabulary item: {str(e)}')
        return jsonify({'error': 'Failed to create vocabulary item'}), 500


@bp.route('/<int:vocabulary_id>', methods=['PUT'])
@login_required
def update_vocabulary_item(vocabulary_id):
    """
    Update a vocabulary item.

    Any subset of word, translation, language, translation_language, learned,
    mastered and synonyms may be sent. Synonyms replace the existing set.
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or not data:
            return jsonify({'error': 'No valid fields to update'}), 400

        item = VocabularyService.update_item(current_user.id, vocabulary_id, data)
        return jsonify(item.to_dict())

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except ConflictError as e:
        return jsonify({'error': str(e)}), 409
    except ValueError as e:
        db.session.rollback()
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        logger.exception(f'Error updating vocabulary item {vocabulary_id}: {str(e)}')
        return jsonify({'error': 'Failed to update vocabulary item'}), 500


@bp.route('/<int:vocabulary_id>', methods=['DELETE'])
@login_required
def delete_vocabulary_item(vocabulary_id):
    """Delete a vocabulary item"""
    try:
        VocabularyService.delete_item(current_user.id, vocabulary_id)
        return '', 204

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except Exception as e:
        logger.exception(f'Error deleting vocabulary item {vocabulary_id}: {str(e)}')
        return jsonify({'error': 'Failed to delete vocabulary item'}), 500


@bp.route('/<int:vocabulary_id>/reset-attempts', methods=['POST'])
@login_required
def reset_attempts(vocabulary_id):
    """Reset correct/wrong attempt counts of a vocabulary item"""
    try:
        item = VocabularyService.reset_attempts(current_user.id, vocabulary_id)
        return jsonify({
            'message': 'Attempt counts reset successfully',
            'item': item.to_dict()
        })

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except Exception as e:
        db.session.rollback()
        logger.exception(f'Error resetting attempt counts for {vocabulary_id}: {str(e)}')
        return jsonify({'error': 'Failed to reset attempt counts'}), 500


@bp.route('/<int:vocabulary_id>/incorrect-attempts', methods=['GET'])
@login_required
def get_incorrect_attempts(vocabulary_id):
    """List the wrong answers logged for a vocabulary item, newest first"""
    try:
        attempts = PracticeService.get_incorrect_attempts(current_user.id, vocabulary_id)
        return jsonify([attempt.to_dict() for attempt in attempts])

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404


@bp.route('/<int:vocabulary_id>/incorrect-attempts', methods=['DELETE'])
@login_required
def clear_incorrect_attempts(vocabulary_id):
    """Delete the wrong answers logged for a vocabulary item"""
    try:
        count = PracticeService.clear_incorrect_attempts(current_user.id, vocabulary_id)
        return jsonify({'message': f'Deleted {count} incorrect attempts', 'deleted': count})

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except Exception as e:
        db.session.rollback()
        logger.exception(f'Error clearing incorrect attempts for {vocabulary_id}: {str(e)}')
        return jsonify({'error': 'Failed to clear incorrect attempts'}), 500
