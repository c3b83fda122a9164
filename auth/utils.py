from models import db
from models.user import User
from flask import current_app
from flask_login import current_user
from services.errors import ConflictError
import logging

logger = logging.getLogger(__name__)


def create_user(username, email, password):
    """
    Register a new user account.

    Args:
        username: Unique display name
        email: Unique email address
        password: Plain text password (hashed before storage)

    Returns:
        User object

    Raises:
        ValueError: If a field is missing, the email is malformed or the
                    password is too short
        ConflictError: If the username or email is already taken
    """
    if not username or not email or not password:
        raise ValueError('Username, email, and password are required')
    if not all(isinstance(value, str) for value in (username, email, password)):
        raise ValueError('Username, email, and password must be strings')

    min_length = current_app.config.get('MIN_PASSWORD_LENGTH', 6)
    if len(password) < min_length:
        raise ValueError(f'Password must be at least {min_length} characters long')

    username = username.strip()
    email = email.strip().lower()

    existing = User.query.filter(db.or_(User.email == email, User.username == username)).first()
    if existing:
        if existing.email == email:
            raise ConflictError('Email already exists')
        raise ConflictError('Username already exists')

    user = User(username=username, email=email)
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        logger.error(f'Failed to create user {email}: {str(e)}')
        raise RuntimeError(f'Failed to create user: {str(e)}')

    logger.info(f'Created new user: {email}')
    return user


def authenticate_user(email, password):
    """
    Verify credentials.

    Returns:
        User object if valid, None otherwise
    """
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        return None

    user = User.query.filter_by(email=email.strip().lower()).first()
    if user and user.check_password(password):
        return user
    return None


def get_current_user():
    """
    Get the current authenticated user.

    Returns:
        User object or None if not authenticated
    """
    if current_user.is_authenticated:
        return current_user
    return None
