"""
Applications blueprint
List, create, update and delete the applications sold in the storefront
"""
import logging

from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required
from sqlalchemy.exc import SQLAlchemyError

from storefront_admin import db
from storefront_admin.extensions import CONTENT_API, limiter
from storefront_admin.models import Application, Template
from storefront_admin.monitoring import track_error, track_event
from storefront_admin.sanitize import (
    sanitize_application_filters,
    sanitize_application_inputs_strict,
    sanitize_application_update_inputs_strict,
)
from storefront_admin.utils import contains_pattern, error_response, get_json_body, get_request_id
from storefront_admin.validation import clean_uuid, validate_application, validate_image_updates

logger = logging.getLogger(__name__)

applications_bp = Blueprint('applications', __name__)

# Update-form field -> Application column
UPDATE_COLUMNS = {
    'name': 'application_name',
    'link': 'application_link',
    'admin': 'application_admin_link',
    'description': 'application_description',
    'category': 'application_category',
    'level': 'application_level',
    'fee': 'application_fee',
    'rent': 'application_rent',
    'imageUrls': 'application_images',
    'otherVersions': 'application_other_versions',
    'isActive': 'is_active',
}


def _filters_from_args(args):
    filters = args.to_dict(flat=False)
    if 'application_name' in filters:
        filters['application_name'] = filters['application_name'][0]
    return filters


@applications_bp.route('', methods=['GET'])
@limiter.limit(CONTENT_API)
@login_required
def list_applications():
    """
    List applications

    GET /api/dashboard/applications?application_name=shop&category=web&level=2&status=true
    """
    filters = sanitize_application_filters(_filters_from_args(request.args))

    query = Application.query
    if 'application_name' in filters:
        query = query.filter(Application.application_name.ilike(
            contains_pattern(filters['application_name']), escape='\\'))
    if filters.get('category'):
        query = query.filter(Application.application_category.in_(filters['category']))
    if filters.get('level'):
        query = query.filter(Application.application_level.in_([int(level) for level in filters['level']]))
    if filters.get('status'):
        query = query.filter(Application.is_active.in_([status == 'true' for status in filters['status']]))

    try:
        applications = query.order_by(Application.created_at.desc()).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to list applications')
        track_error(e, 'list_applications', {'request_id': get_request_id()})
        return error_response('Failed to load applications', 500)

    track_event('database', 'applications_filtered', {'count': len(applications), 'filters': sorted(filters)})

    return jsonify({
        'success': True,
        'applications': [application.to_dict() for application in applications],
        'total': len(applications),
        'filters': filters,
    }), 200


@applications_bp.route('', methods=['POST'])
@limiter.limit(CONTENT_API)
@login_required
def create_application():
    """
    Create an application

    POST /api/dashboard/applications
    Body: {
        "name": "Shop Pro",
        "link": "https://shop.example.com",
        "admin": "https://admin.shop.example.com",
        "description": "Online shop",
        "category": "web",
        "fee": 50000,
        "rent": 5000,
        "imageUrls": ["apps/shop_1"],
        "templateId": "uuid",
        "level": 2
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_application_inputs_strict(data)
    errors = validate_application(sanitized)
    if errors:
        logger.warning('Application validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'application_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    template_id = clean_uuid(sanitized['templateId'])
    if db.session.get(Template, template_id) is None:
        return error_response('Template not found', 404)

    application = Application(
        application_name=sanitized['name'],
        application_link=sanitized['link'],
        application_admin_link=sanitized['admin'],
        application_description=sanitized['description'] or None,
        application_category=sanitized['category'],
        application_fee=sanitized['fee'],
        application_rent=sanitized['rent'],
        application_images=sanitized['imageUrls'],
        application_template_id=template_id,
        application_level=sanitized['level'],
    )

    try:
        db.session.add(application)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to create application')
        track_error(e, 'create_application', {'request_id': get_request_id()})
        return error_response('Failed to add application', 500)

    logger.info('Application %s created by %s', application.application_id, current_user.id)
    track_event('database', 'application_created', {
        'application_id': application.application_id,
        'category': application.application_category,
    })

    return jsonify({
        'success': True,
        'message': 'Application added successfully',
        'application': application.to_dict()
    }), 201


@applications_bp.route('/<application_id>', methods=['PUT'])
@limiter.limit(CONTENT_API)
@login_required
def update_application(application_id):
    """
    Update an application; only the fields sent are changed

    PUT /api/dashboard/applications/<application_id>
    Body: {"name": "Shop Pro 2", "isActive": false, "oldImageUrls": [...]}
    """
    cleaned_id = clean_uuid(application_id)
    if cleaned_id is None:
        return error_response('Invalid application ID format', 400)

    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_application_update_inputs_strict(data)
    errors = validate_application(sanitized, partial=True)
    if errors:
        logger.warning('Application update validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'application_update_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    application = db.session.get(Application, cleaned_id)
    if application is None:
        return error_response('Application not found', 404)

    images_to_delete = []
    if 'imageUrls' in sanitized:
        old_images = sanitized.get('oldImageUrls')
        if not isinstance(old_images, list):
            old_images = application.application_images
        image_changes = validate_image_updates(sanitized['imageUrls'], old_images)
        images_to_delete = image_changes['images_to_delete']
        sanitized['imageUrls'] = image_changes['valid_images']

    for field, column in UPDATE_COLUMNS.items():
        if field in sanitized:
            setattr(application, column, sanitized[field])
    application.touch()

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to update application %s', cleaned_id)
        track_error(e, 'update_application', {'application_id': cleaned_id})
        return error_response('Failed to update application', 500)

    if images_to_delete:
        logger.info('Application %s no longer uses images: %s', cleaned_id, ', '.join(images_to_delete))

    logger.info('Application %s updated by %s', cleaned_id, current_user.id)
    track_event('database', 'application_updated', {
        'application_id': cleaned_id,
        'fields': sorted(field for field in sanitized if field in UPDATE_COLUMNS),
    })

    return jsonify({
        'success': True,
        'message': 'Application updated successfully',
        'application': application.to_dict(),
        'imagesToDelete': images_to_delete,
    }), 200


@applications_bp.route('/<application_id>', methods=['DELETE'])
@limiter.limit(CONTENT_API)
@login_required
def delete_application(application_id):
    """
    Delete an inactive application without sales

    DELETE /api/dashboard/applications/<application_id>
    """
    cleaned_id = clean_uuid(application_id)
    if cleaned_id is None:
        return error_response('Invalid application ID format', 400)

    application = db.session.get(Application, cleaned_id)
    if application is None:
        return error_response('Application not found', 404)

    if application.is_active:
        track_event('validation', 'delete_active_application_blocked',
                    {'application_id': cleaned_id}, level='warning')
        return error_response(
            'Cannot delete active application. Please deactivate the application first.', 400
        )

    if (application.sales_count or 0) > 0 or application.orders.count() > 0:
        track_event('validation', 'delete_application_with_sales_blocked',
                    {'application_id': cleaned_id}, level='warning')
        return error_response('Cannot delete application with existing sales', 400)

    images = list(application.application_images or [])
    try:
        db.session.delete(application)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to delete application %s', cleaned_id)
        track_error(e, 'delete_application', {'application_id': cleaned_id})
        return error_response('Failed to delete application', 500)

    logger.info('Application %s deleted by %s', cleaned_id, current_user.id)
    track_event('database', 'application_deleted', {'application_id': cleaned_id})

    return jsonify({
        'success': True,
        'message': 'Application deleted successfully',
        'applicationId': cleaned_id,
        'imagesToDelete': images,
    }), 200
