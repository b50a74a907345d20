"""
Authentication blueprint
Handles admin registration, login and logout
"""
import logging
from datetime import date

from flask import Blueprint, jsonify
from flask_login import current_user, login_required, login_user, logout_user
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront_admin import db
from storefront_admin.extensions import AUTH_ENDPOINTS, limiter
from storefront_admin.models import User
from storefront_admin.models.base import utcnow
from storefront_admin.monitoring import track_error, track_event
from storefront_admin.sanitize import (
    sanitize_login_inputs_strict,
    sanitize_registration_inputs_strict,
)
from storefront_admin.utils import error_response, get_json_body, get_request_id, mask_email
from storefront_admin.validation import validate_login, validate_registration

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/register', methods=['POST'])
@limiter.limit(AUTH_ENDPOINTS)
def register():
    """
    Register a new admin user

    POST /api/auth/register
    Body: {
        "username": "Jane",
        "email": "jane@example.com",
        "phone": "+237 690 000 000",
        "password": "Str0ng!Pass",
        "confirmPassword": "Str0ng!Pass",
        "dateOfBirth": "1990-04-12",
        "terms": true
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_registration_inputs_strict(data)
    errors = validate_registration(sanitized)
    if errors:
        logger.warning('Registration validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'registration_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    if User.query.filter_by(email=sanitized['email']).first():
        logger.warning('Registration with existing email %s', mask_email(sanitized['email']))
        return error_response('User with this email already exists', 409)

    user = User(
        username=sanitized['username'],
        email=sanitized['email'],
        phone=sanitized['phone'],
        date_of_birth=date.fromisoformat(sanitized['dateOfBirth']),
    )
    user.set_password(sanitized['password'])

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return error_response('User with this email already exists', 409)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to register user')
        track_error(e, 'register', {'request_id': get_request_id()})
        return error_response('Registration failed', 500)

    logger.info('User registered: %s', mask_email(user.email))
    track_event('auth', 'user_registered', {'user_id': user.id})

    return jsonify({
        'success': True,
        'message': 'User registered successfully',
        'user': user.to_dict()
    }), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(AUTH_ENDPOINTS)
def login():
    """
    Login user

    POST /api/auth/login
    Body: {
        "email": "jane@example.com",
        "password": "Str0ng!Pass"
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_login_inputs_strict(data)
    errors = validate_login(sanitized)
    if errors:
        track_event('validation', 'login_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    user = User.query.filter_by(email=sanitized['email']).first()
    if user is None or not user.check_password(sanitized['password']):
        logger.warning('Failed login for %s (request %s)',
                       mask_email(sanitized['email']), get_request_id())
        track_event('auth', 'login_failed', level='warning')
        return error_response('Invalid email or password', 401)

    try:
        user.last_login_at = utcnow()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to record login time')
        track_error(e, 'login', {'user_id': user.id})
        return error_response('Login failed', 500)

    login_user(user)
    logger.info('User logged in: %s', user.id)
    track_event('auth', 'login_succeeded', {'user_id': user.id})

    return jsonify({
        'success': True,
        'message': 'Login successful',
        'user': user.to_dict()
    }), 200


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """
    Logout current user

    POST /api/auth/logout
    """
    user_id = current_user.id
    logout_user()
    track_event('auth', 'logout', {'user_id': user_id})
    return jsonify({'success': True, 'message': 'Logout successful'}), 200
