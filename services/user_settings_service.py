"""User Settings Service - per-user language selection and practice toggles"""
import logging
from typing import Any, Dict

from models import db
from models.user_settings import UserSettings

logger = logging.getLogger(__name__)

BOOLEAN_SETTINGS = ['skip_button_enabled', 'help_button_enabled', 'auto_insert_enabled']


def get_or_create_settings(user_id: int) -> UserSettings:
    """
    Return the user's settings, creating the defaults on first access.

    Args:
        user_id: The ID of the user

    Returns:
        UserSettings: Existing or newly created settings row
    """
    settings = UserSettings.query.filter_by(user_id=user_id).first()
    if settings:
        return settings

    try:
        settings = UserSettings(user_id=user_id)
        db.session.add(settings)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        logger.error(f'Failed to create default settings for user_id={user_id}: {str(e)}', exc_info=True)
        raise RuntimeError(f'Failed to create user settings: {str(e)}')

    logger.info(f'Created default settings for user_id={user_id}')
    return settings


def update_settings(user_id: int, data: Dict[str, Any]) -> UserSettings:
    """
    Update the user's settings.

    Request keys:
        selected_languages (list[str], optional): non-empty list of language names
        skip_button_enabled, help_button_enabled, auto_insert_enabled (bool, optional)

    Raises:
        ValueError: If nothing valid was provided or a value has the wrong type
    """
    if not isinstance(data, dict) or not data:
        raise ValueError('Missing request body')

    settings = get_or_create_settings(user_id)
    updated_fields = []

    if 'selected_languages' in data:
        # Validated by the model
        settings.selected_languages = data['selected_languages']
        updated_fields.append('selected_languages')

    for key in BOOLEAN_SETTINGS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ValueError(f'{key} must be a boolean')
            setattr(settings, key, data[key])
            updated_fields.append(key)

    if not updated_fields:
        raise ValueError('No valid settings provided')

    db.session.commit()

    logger.info(f'Updated settings for user_id={user_id}: {updated_fields}')
    return settings
