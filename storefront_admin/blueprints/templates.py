"""
Templates blueprint
Storefront templates that applications are built on
"""
import logging

from flask import Blueprint, jsonify
from flask_login import current_user, login_required
from sqlalchemy.exc import SQLAlchemyError

from storefront_admin import db
from storefront_admin.extensions import CONTENT_API, CONTENT_CREATE, limiter
from storefront_admin.models import Template
from storefront_admin.monitoring import track_error, track_event
from storefront_admin.sanitize import (
    sanitize_template_inputs_strict,
    sanitize_template_update_inputs_strict,
)
from storefront_admin.utils import error_response, get_json_body, get_request_id
from storefront_admin.validation import clean_uuid, validate_image_updates, validate_template

logger = logging.getLogger(__name__)

templates_bp = Blueprint('templates', __name__)

UPDATE_COLUMNS = {
    'templateName': 'template_name',
    'templateImageIds': 'template_images',
    'templateHasWeb': 'template_has_web',
    'templateHasMobile': 'template_has_mobile',
    'isActive': 'is_active',
}


@templates_bp.route('', methods=['GET'])
@limiter.limit(CONTENT_API)
@login_required
def list_templates():
    """
    List templates, newest first

    GET /api/dashboard/templates
    """
    try:
        templates = Template.query.order_by(Template.created_at.desc()).all()
    except SQLAlchemyError as e:
        logger.exception('Failed to list templates')
        track_error(e, 'list_templates', {'request_id': get_request_id()})
        return error_response('Failed to load templates', 500)

    return jsonify({
        'success': True,
        'templates': [template.to_dict() for template in templates],
        'total': len(templates),
    }), 200


@templates_bp.route('', methods=['POST'])
@limiter.limit(CONTENT_CREATE)
@login_required
def create_template():
    """
    Create a template

    POST /api/dashboard/templates
    Body: {
        "templateName": "Boutique",
        "templateImageIds": ["templates/boutique_1"],
        "templateHasWeb": true,
        "templateHasMobile": false
    }
    """
    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_template_inputs_strict(data)
    errors = validate_template(sanitized)
    if errors:
        logger.warning('Template validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'template_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    template = Template(
        template_name=sanitized['templateName'],
        template_images=sanitized['templateImageIds'],
        template_has_web=sanitized['templateHasWeb'],
        template_has_mobile=sanitized['templateHasMobile'],
    )

    try:
        db.session.add(template)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to create template')
        track_error(e, 'create_template', {'request_id': get_request_id()})
        return error_response('Failed to add template', 500)

    logger.info('Template %s created by %s', template.template_id, current_user.id)
    track_event('database', 'template_created', {'template_id': template.template_id})

    return jsonify({
        'success': True,
        'message': 'Template added successfully',
        'template': template.to_dict()
    }), 201


@templates_bp.route('/<template_id>', methods=['PUT'])
@limiter.limit(CONTENT_API)
@login_required
def update_template(template_id):
    """
    Update a template; only the fields sent are changed

    PUT /api/dashboard/templates/<template_id>
    Body: {"templateName": "Boutique 2", "isActive": false}
    """
    cleaned_id = clean_uuid(template_id)
    if cleaned_id is None:
        return error_response('Invalid template ID format', 400)

    data = get_json_body()
    if data is None:
        return error_response('Invalid JSON in request body', 400)

    sanitized = sanitize_template_update_inputs_strict(data)

    template = db.session.get(Template, cleaned_id)
    if template is None:
        return error_response('Template not found', 404)

    # availability is checked against the stored flag when only one is sent
    if 'templateHasWeb' in sanitized or 'templateHasMobile' in sanitized:
        sanitized.setdefault('templateHasWeb', template.template_has_web)
        sanitized.setdefault('templateHasMobile', template.template_has_mobile)

    errors = validate_template(sanitized, partial=True)
    if errors:
        logger.warning('Template update validation failed: %s (request %s)',
                       ', '.join(sorted(errors)), get_request_id())
        track_event('validation', 'template_update_validation_failed',
                    {'fields': sorted(errors)}, level='warning')
        return error_response('Validation failed', 400, errors)

    images_to_delete = []
    if 'templateImageIds' in sanitized:
        image_changes = validate_image_updates(sanitized['templateImageIds'], template.template_images)
        images_to_delete = image_changes['images_to_delete']

    for field, column in UPDATE_COLUMNS.items():
        if field in sanitized:
            setattr(template, column, sanitized[field])
    template.touch()

    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to update template %s', cleaned_id)
        track_error(e, 'update_template', {'template_id': cleaned_id})
        return error_response('Failed to update template', 500)

    logger.info('Template %s updated by %s', cleaned_id, current_user.id)
    track_event('database', 'template_updated', {'template_id': cleaned_id})

    return jsonify({
        'success': True,
        'message': 'Template updated successfully',
        'template': template.to_dict(),
        'imagesToDelete': images_to_delete,
    }), 200


@templates_bp.route('/<template_id>', methods=['DELETE'])
@limiter.limit(CONTENT_API)
@login_required
def delete_template(template_id):
    """
    Delete an inactive, unsold template that no application uses

    DELETE /api/dashboard/templates/<template_id>
    """
    cleaned_id = clean_uuid(template_id)
    if cleaned_id is None:
        return error_response('Invalid template ID format', 400)

    template = db.session.get(Template, cleaned_id)
    if template is None:
        return error_response('Template not found', 404)

    if template.is_active:
        return error_response('Cannot delete active template. Please deactivate the template first.', 400)

    if (template.sales_count or 0) > 0:
        return error_response('Cannot delete template with existing sales', 400)

    application_count = template.applications.count()
    if application_count:
        logger.warning('Template %s still used by %d applications', cleaned_id, application_count)
        return error_response('Template is used by existing applications', 409)

    images = list(template.template_images or [])
    try:
        db.session.delete(template)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Failed to delete template %s', cleaned_id)
        track_error(e, 'delete_template', {'template_id': cleaned_id})
        return error_response('Failed to delete template', 500)

    logger.info('Template %s deleted by %s', cleaned_id, current_user.id)
    track_event('database', 'template_deleted', {'template_id': cleaned_id})

    return jsonify({
        'success': True,
        'message': 'Template deleted successfully',
        'templateId': cleaned_id,
        'imagesToDelete': images,
    }), 200
