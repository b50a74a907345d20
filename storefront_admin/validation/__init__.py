"""Schema validation run on sanitized records"""
from .application import validate_application
from .auth import validate_login, validate_registration
from .common import (
    clean_url,
    clean_url_optional,
    clean_uuid,
    is_valid_url,
    is_valid_url_or_empty,
    validate_asset_ids,
    validate_email,
    validate_image_updates,
    validate_uuid,
)
from .platform import validate_platform
from .template import validate_template

__all__ = [
    'clean_url',
    'clean_url_optional',
    'clean_uuid',
    'is_valid_url',
    'is_valid_url_or_empty',
    'validate_application',
    'validate_asset_ids',
    'validate_email',
    'validate_image_updates',
    'validate_login',
    'validate_platform',
    'validate_registration',
    'validate_template',
    'validate_uuid',
]
