from flask import Blueprint, jsonify, request
from flask_login import login_user, logout_user, current_user
from auth.utils import authenticate_user, create_user, get_current_user
from services.errors import ConflictError
import logging

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__, url_prefix='/auth')


@bp.route('/signup', methods=['POST'])
def signup():
    """
    Register a new account and log it in.

    Request Body:
        {
            "username": "ana",
            "email": "ana@example.com",
            "password": "secret1"
        }

    Returns:
        201: {"success": true, "user": {...}}
        400: Missing fields, invalid email or short password
        409: Email or username already exists
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        user = create_user(
            username=data.get('username'),
            email=data.get('email'),
            password=data.get('password')
        )

        login_user(user, remember=True)
        logger.info(f'User {user.email} signed up and logged in')

        return jsonify({
            'success': True,
            'user': user.to_dict()
        }), 201

    except ConflictError as e:
        return jsonify({
            'success': False,
            'error': str(e)
        }), 409
    except ValueError as e:
        return jsonify({
            'success': False,
            'error': str(e)
        }), 400
    except Exception as e:
        logger.exception(f'Exception during signup: {str(e)}')
        return jsonify({
            'success': False,
            'error': 'Failed to create user account'
        }), 500


@bp.route('/login', methods=['POST'])
def login():
    """
    Log in with email and password.

    Returns:
        200: {"success": true, "user": {...}}
        400: Missing credentials
        401: Invalid credentials
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    email = data.get('email')
    password = data.get('password')

    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        return jsonify({
            'success': False,
            'error': 'Email and password are required'
        }), 400

    user = authenticate_user(email, password)
    if not user:
        logger.info(f'Failed login attempt for {email}')
        return jsonify({
            'success': False,
            'error': 'Invalid email or password'
        }), 401

    login_user(user, remember=True)
    logger.info(f'User {user.email} logged in successfully')

    return jsonify({
        'success': True,
        'user': user.to_dict()
    }), 200


@bp.route('/me', methods=['GET'])
def me():
    """
    Get current authenticated user information.
    Used by frontend to check auth status and get user data.
    """
    user = get_current_user()
    if user:
        return jsonify({
            'success': True,
            'authenticated': True,
            'user': user.to_dict()
        }), 200

    return jsonify({
        'success': True,
        'authenticated': False,
        'user': None
    }), 200


@bp.route('/logout', methods=['POST'])
def logout():
    """Log out the current user"""
    user_email = current_user.email if current_user.is_authenticated else 'anonymous'

    logout_user()

    logger.info(f'User {user_email} logged out successfully')

    return jsonify({
        'success': True,
        'message': 'Successfully logged out'
    }), 200
