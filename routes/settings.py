from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from models import db
from services.user_settings_service import get_or_create_settings, update_settings
import logging

logger = logging.getLogger(__name__)

bp = Blueprint('settings', __name__, url_prefix='/api/user')


@bp.route('/settings', methods=['GET'])
@login_required
def get_user_settings():
    """
    Get the user's settings, creating defaults on first access.

    Returns:
        JSON settings object:
        {
            "id": 1,
            "user_id": 1,
            "selected_languages": ["english", "serbian", "russian", "spanish"],
            "skip_button_enabled": false,
            "help_button_enabled": false,
            "auto_insert_enabled": false,
            ...
        }
    """
    try:
        settings = get_or_create_settings(current_user.id)
        return jsonify(settings.to_dict()), 200

    except Exception as e:
        logger.exception(f'Error fetching settings for user {current_user.email}: {str(e)}')
        return jsonify({
            'success': False,
            'error': 'Failed to retrieve user settings'
        }), 500


@bp.route('/settings', methods=['PUT'])
@login_required
def update_user_settings():
    """
    Update the user's settings.

    Request Body:
        {
            "selected_languages": ["english", "serbian"],  (optional)
            "skip_button_enabled": true,                   (optional)
            "help_button_enabled": false,                  (optional)
            "auto_insert_enabled": false                   (optional)
        }

    Returns:
        JSON settings object, 400 on invalid values
    """
    try:
        data = request.get_json(silent=True)
        settings = update_settings(current_user.id, data)
        return jsonify(settings.to_dict()), 200

    except ValueError as e:
        db.session.rollback()
        return jsonify({
            'success': False,
            'error': str(e)
        }), 400
    except Exception as e:
        db.session.rollback()
        logger.exception(f'Error updating settings for user {current_user.email}: {str(e)}')
        return jsonify({
            'success': False,
            'error': 'Failed to update user settings. Please try again.'
        }), 500
