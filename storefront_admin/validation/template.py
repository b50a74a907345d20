"""Template schema"""
from .common import check_name, is_valid_asset_id

RESERVED_NAMES = ('admin', 'root', 'system', 'test', 'template', 'default')
FLAG_FIELDS = ('templateHasWeb', 'templateHasMobile')


def _check_images(image_ids, required):
    if image_ids is None and not required:
        return None
    if not isinstance(image_ids, list):
        return 'Template images are required'
    if required and not image_ids:
        return 'At least one template image is required'
    if len(image_ids) > 10:
        return 'Maximum 10 images allowed'
    for image_id in image_ids:
        if not isinstance(image_id, str) or len(image_id) > 200:
            return 'Template image ID is too long'
        if not is_valid_asset_id(image_id):
            return 'Invalid template image format'
    return None


def validate_template(data, partial=False):
    """
    Validate a template record

    Args:
        data (dict): Sanitized template fields
        partial (bool): Update mode, only the provided fields are checked

    Returns:
        dict: Field name -> error message
    """
    errors = {}

    if partial:
        provided = [key for key, value in data.items() if value not in (None, '')]
        if not provided:
            errors['general'] = 'At least one field must be provided for update'
            return errors

    if not partial or 'templateName' in data:
        message = check_name(data.get('templateName'), 'Template name', 3, 100, RESERVED_NAMES)
        if message:
            errors['templateName'] = message

    if not partial or 'templateImageIds' in data:
        message = _check_images(data.get('templateImageIds'), required=not partial)
        if message:
            errors['templateImageIds'] = message

    for field in FLAG_FIELDS:
        if (not partial or field in data) and not isinstance(data.get(field), bool):
            errors[field] = 'Availability must be true or false'

    if not partial or any(field in data for field in FLAG_FIELDS):
        if not any(data.get(field) is True for field in FLAG_FIELDS):
            errors['platforms'] = (
                'Template must be available for at least one platform (Web or Mobile)'
            )

    if partial and 'isActive' in data and not isinstance(data['isActive'], bool):
        errors['isActive'] = 'Active status must be true or false'

    return errors
