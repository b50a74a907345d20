"""
Payment platforms blueprint
"""
import logging

from flask import Blueprint, jsonify
from flask_login import current_user, login_required
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from storefront_admin import db
from storefront_admin.extensions import CONTENT_API, limiter
from storefront_admin.models import Platform
from storefront_admin.monitoring import track_error, track_event
from storefront_admin.sanitize import (
    sanitize_platform_inputs_strict,
    sanitize_platform_update_inputs_strict,
)
from storefront_admin.utils import error_response, get_json_body, get_request_id
from storefront_admin.validation import clean_uuid, validate_platform

logger = logging.getLogger(__name__)

platforms_bp = Blueprint('platforms', __name__)

UPDATE_COLUMNS = {
    'platformName': 'platform_name',
    'isCashPayment': 'is_cash_payment',
    'accountName': 'account_name',
    'accountNumber': 'account_number',
    'description': 'description',
    'isActive': 'is_active',
}


def _name_taken(name, exclude_id=None):
    query = Platform.query.filter(func.lower(Platform.platform_name) == name.lower())
    if exclude_id is not None:
        query = query.filter(Platform.platform_id != exclude_id)
    return query.first() is not None


@platforms_bp.route('', methods=['GET'])
@limiter.limit(CONTENT_API)
@login_required
def list_platforms():
    """
    List payment platforms

    GET /api/dashboard/platforms
    """
    try:
        platforms = Platform.query.order_by(Platform.created_at.desc()).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to list platforms')
        track_error(e, 'list_platforms', {'request_id': get_request_id()})
        return error_response('Failed to load platforms', 500)

    return jsonify({
        'success': True,
        'platforms': [platform.to_dict() for platform in platforms],
        'total': len(platforms),
    }), 200


@platforms_bp.route('', methods=['POST'])
@limiter.limit(CONTENT_API)
@login_required
def create_platform():
    """
    Create a payment platform

    POST /api/dashboard/platforms
    Body: {
        "platformName": "Orange Money",
        "isCashPayment": false,
        "accountName": "Storefront Ltd",
        "accountNumber": "+237690000000",
        "description": "Mobile money"
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_platform_inputs_strict(data)
    errors = validate_platform(sanitized)
    if errors:
        logger.warning('Platform validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'platform_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    if _name_taken(sanitized['platformName']):
        return error_response('A platform with this name already exists', 409)

    platform = Platform(
        platform_name=sanitized['platformName'],
        is_cash_payment=sanitized['isCashPayment'],
        account_name=sanitized['accountName'],
        account_number=sanitized['accountNumber'],
        description=sanitized['description'],
    )

    try:
        db.session.add(platform)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to create platform')
        track_error(e, 'create_platform', {'request_id': get_request_id()})
        return error_response('Failed to add platform', 500)

    logger.info('Platform %s created by %s', platform.platform_id, current_user.id)
    track_event('database', 'platform_created', {
        'platform_id': platform.platform_id,
        'is_cash_payment': platform.is_cash_payment,
    })

    return jsonify({
        'success': True,
        'message': 'Platform added successfully',
        'platform': platform.to_dict()
    }), 201


@platforms_bp.route('/<platform_id>', methods=['PUT'])
@limiter.limit(CONTENT_API)
@login_required
def update_platform(platform_id):
    """
    Update a payment platform; only the fields sent are changed

    PUT /api/dashboard/platforms/<platform_id>
    Body: {"isCashPayment": true}
    """
    cleaned_id = clean_uuid(platform_id)
    if cleaned_id is None:
        return error_response('Invalid platform ID format', 400)

    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_platform_update_inputs_strict(data)
    errors = validate_platform(sanitized, partial=True)
    if errors:
        logger.warning('Platform update validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'platform_update_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    platform = db.session.get(Platform, cleaned_id)
    if platform is None:
        return error_response('Platform not found', 404)

    if 'platformName' in sanitized and _name_taken(sanitized['platformName'], exclude_id=cleaned_id):
        return error_response('A platform with this name already exists', 409)

    # switching to cash drops the stored account
    if sanitized.get('isCashPayment') is True:
        sanitized['accountName'] = None
        sanitized['accountNumber'] = None

    for field, column in UPDATE_COLUMNS.items():
        if field in sanitized:
            setattr(platform, column, sanitized[field])
    platform.touch()

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to update platform %s', cleaned_id)
        track_error(e, 'update_platform', {'platform_id': cleaned_id})
        return error_response('Failed to update platform', 500)

    logger.info('Platform %s updated by %s', cleaned_id, current_user.id)
    track_event('database', 'platform_updated', {'platform_id': cleaned_id})

    return jsonify({
        'success': True,
        'message': 'Platform updated successfully',
        'platform': platform.to_dict()
    }), 200


@platforms_bp.route('/<platform_id>', methods=['DELETE'])
@limiter.limit(CONTENT_API)
@login_required
def delete_platform(platform_id):
    """
    Delete an inactive payment platform

    DELETE /api/dashboard/platforms/<platform_id>
    """
    cleaned_id = clean_uuid(platform_id)
    if cleaned_id is None:
        return error_response('Invalid platform ID format', 400)

    platform = db.session.get(Platform, cleaned_id)
    if platform is None:
        return error_response('Platform not found', 404)

    if platform.is_active:
        return error_response('Cannot delete active platform. Please deactivate the platform first.', 400)

    try:
        db.session.delete(platform)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to delete platform %s', cleaned_id)
        track_error(e, 'delete_platform', {'platform_id': cleaned_id})
        return error_response('Failed to delete platform', 500)

    logger.info('Platform %s deleted by %s', cleaned_id, current_user.id)
    track_event('database', 'platform_deleted', {'platform_id': cleaned_id})

    return jsonify({
        'success': True,
        'message': 'Platform deleted successfully',
        'platformId': cleaned_id,
    }), 200
