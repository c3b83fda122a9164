"""
Practice Routes - Endpoints for practicing vocabulary.

This module provides API endpoints for the practice flow including:
- GET /api/practice/word - Retrieve a random word to practice
- POST /api/practice/check - Submit and check an answer
- GET /api/practice/stats - Aggregate progress statistics
- POST /api/practice/reset - Mark every word as unlearned
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from models import db
from services.errors import NotFoundError
from services.practice_service import PracticeService

bp = Blueprint('practice', __name__, url_prefix='/api/practice')


@bp.route('/word', methods=['GET'])
@login_required
def get_practice_word():
    """
    Get a random word that is neither learned nor mastered.

    Query Parameters:
        mode (str, optional): 'word-translation' (default) or 'translation-word'
        language (str, optional): Only practice words of this language

    Returns:
        200: Practice prompt
            {
                "id": 7,
                "word": "kuća",
                "translation": "house",
                "language": "serbian",
                "translation_language": "english",
                "mode": "word-translation",
                "synonyms": ["home"]
            }
        400: Invalid mode
        404: No unlearned words available for practice
    """
    try:
        mode = request.args.get('mode', 'word-translation')
        language = request.args.get('language') or None

        word = PracticeService.get_practice_word(current_user.id, mode=mode, language=language)

        if not word:
            return jsonify({'error': 'No unlearned words available for practice'}), 404

        return jsonify(word)

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': f'Server error: {str(e)}'}), 500


@bp.route('/check', methods=['POST'])
@login_required
def check_answer():
    """
    Check a practice answer.

    Request Body:
        {
            "id": 7,
            "user_answer": "Kuca",
            "mode": "translation-word"
        }

    Returns:
        200: Practice result
            {
                "correct": true,
                "expected_answer": "kuća",
                "user_answer": "Kuca",
                "mode": "translation-word",
                "word_differences": [],
                "original_answer": "kuća"
            }
        400: Missing fields or invalid mode
        404: Vocabulary item not found
        500: Server error

    Implementation Notes:
        - original_answer is present only when the user typed a folded form
          of an accented answer
        - other_answers is present only when the answer was wrong
        - Correct answers mark the word learned; wrong ones are logged
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict) or not data:
            return jsonify({'error': 'No JSON data provided'}), 400

        vocabulary_id = data.get('id')
        user_answer = data.get('user_answer')

        if not vocabulary_id or user_answer is None:
            return jsonify({'error': 'Word ID and user answer are required'}), 400

        if not isinstance(user_answer, str):
            return jsonify({'error': 'user_answer must be a string'}), 400

        result = PracticeService.check_answer(
            user_id=current_user.id,
            vocabulary_id=vocabulary_id,
            user_answer=user_answer,
            mode=data.get('mode', 'word-translation')
        )

        return jsonify(result)

    except NotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        return jsonify({'error': f'Server error: {str(e)}'}), 500


@bp.route('/stats', methods=['GET'])
@login_required
def get_stats():
    """
    Get practice statistics.

    Returns:
        200:
            {
                "total": 10,
                "learned": 4,
                "unlearned": 6,
                "mastered": 1,
                "progress": 40,
                "total_correct_attempts": 12,
                "total_wrong_attempts": 5
            }
    """
    try:
        return jsonify(PracticeService.get_stats(current_user.id))

    except Exception as e:
        return jsonify({'error': f'Failed to fetch practice statistics: {str(e)}'}), 500


@bp.route('/reset', methods=['POST'])
@login_required
def reset_practice():
    """Reset all of the user's words to unlearned"""
    try:
        count = PracticeService.reset_progress(current_user.id)
        return jsonify({'message': f'Reset {count} words to unlearned status'})

    except Exception as e:
        return jsonify({'error': f'Failed to reset practice progress: {str(e)}'}), 500
