"""
Application schema

Runs on sanitized records and returns a field -> message map; an empty
map means the record can be stored.
"""
import re

from .common import (
    HAS_ALNUM, check_name, check_url, clean_uuid, is_integer, is_number,
    is_valid_asset_id,
)

CATEGORIES = ('web', 'mobile')
RESERVED_NAMES = ('admin', 'root', 'system', 'test', 'app', 'application', 'default')
UPDATABLE_FIELDS = (
    'name', 'link', 'admin', 'description', 'category', 'level', 'fee',
    'rent', 'imageUrls', 'otherVersions', 'isActive',
)

_VERSION_PATTERN = re.compile(r'^[a-zA-Z0-9._\-/:?=&%#]+$')


def _check_images(images):
    if not isinstance(images, list) or not images:
        return 'At least one image is required'
    if len(images) > 10:
        return 'Cannot upload more than 10 images'
    if not all(is_valid_asset_id(image) for image in images):
        return 'Invalid image format'
    return None


def _check_fee(fee, whole):
    if not is_number(fee):
        return 'Opening fee must be a valid number'
    if fee < 1:
        return 'Opening fee must be at least 1'
    if fee > 100000:
        return 'Opening fee cannot exceed 100,000'
    if whole and not is_integer(fee):
        return 'Opening fee must be a whole number'
    return None


def _check_rent(rent, whole):
    if not is_number(rent):
        return 'Monthly rent must be a valid number'
    if rent < 0:
        return 'Monthly rent cannot be negative'
    if rent > 50000:
        return 'Monthly rent cannot exceed 50,000'
    if whole and not is_integer(rent):
        return 'Monthly rent must be a whole number'
    return None


def _check_level(level):
    if not is_number(level):
        return 'Application level must be a valid number'
    if not is_integer(level):
        return 'Application level must be a whole number'
    if not 1 <= level <= 4:
        return 'Application level must be between 1 and 4'
    return None


def _check_description(description):
    if description is None or description == '':
        return None
    if not isinstance(description, str):
        return 'Description must be a string'
    if len(description) > 1000:
        return 'Description must not exceed 1000 characters'
    if not description.strip():
        return 'Description cannot contain only spaces'
    return None


def _check_other_versions(versions):
    if versions is None:
        return None
    if not isinstance(versions, list):
        return 'Other versions must be a list'
    if len(versions) > 5:
        return 'Cannot have more than 5 other versions'
    for version in versions:
        if not isinstance(version, str) or not _VERSION_PATTERN.match(version) \
                or not HAS_ALNUM.search(version):
            return 'Invalid version format'
    return None


def validate_application(data, partial=False):
    """
    Validate an application record

    Args:
        data (dict): Sanitized application fields
        partial (bool): Update mode, only the provided fields are checked

    Returns:
        dict: Field name -> error message
    """
    errors = {}

    def present(field):
        return not partial or field in data

    if partial and not any(field in data for field in UPDATABLE_FIELDS):
        errors['general'] = 'At least one field must be provided for update'
        return errors

    checks = {
        'name': lambda: check_name(data.get('name'), 'Application name', 3, 100, RESERVED_NAMES),
        'link': lambda: check_url(data.get('link'), 'Application link'),
        'admin': lambda: check_url(data.get('admin'), 'Admin link', required=not partial),
        'description': lambda: _check_description(data.get('description')),
        'fee': lambda: _check_fee(data.get('fee'), whole=not partial),
        'rent': lambda: _check_rent(data.get('rent'), whole=not partial),
        'level': lambda: _check_level(data.get('level')),
        'imageUrls': lambda: _check_images(data.get('imageUrls')),
    }
    for field, check in checks.items():
        if present(field):
            message = check()
            if message:
                errors[field] = message

    if present('category') and data.get('category') not in CATEGORIES:
        errors['category'] = 'Category must be either "web" or "mobile"'

    if not partial and clean_uuid(data.get('templateId')) is None:
        errors['templateId'] = 'Template ID must be a valid UUID'

    if partial:
        if 'otherVersions' in data:
            message = _check_other_versions(data['otherVersions'])
            if message:
                errors['otherVersions'] = message
        if 'isActive' in data and not isinstance(data['isActive'], bool):
            errors['isActive'] = 'Application status must be true or false'

    return errors
