"""
Validation utilities shared by the entity schemas
"""
import re
from urllib.parse import urlsplit

UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE
)
EMPTY_UUIDS = (
    '00000000-0000-0000-0000-000000000000',
    'ffffffff-ffff-ffff-ffff-ffffffffffff',
)

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
NAME_PATTERN = re.compile(r'^[a-zA-Z0-9._\s-]+$')
ASSET_ID_PATTERN = re.compile(r'^[a-zA-Z0-9._/-]+$')
URL_SHAPE_PATTERN = re.compile(r'^(https?://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?$')
HAS_ALNUM = re.compile(r'[a-zA-Z0-9]')


def validate_email(email):
    """
    Validate email format

    Args:
        email (str): Email address to validate

    Returns:
        bool: True if valid, False otherwise
    """
    if not email or not isinstance(email, str):
        return False
    return bool(EMAIL_PATTERN.match(email))


def validate_uuid(uuid_string):
    """
    Validate UUID format (versions 1 to 5)

    Args:
        uuid_string (str): UUID string to validate

    Returns:
        bool: True if valid UUID, False otherwise
    """
    if not uuid_string or not isinstance(uuid_string, str):
        return False
    return bool(UUID_PATTERN.match(uuid_string))


def clean_uuid(uuid_string):
    """
    Normalize a UUID

    Args:
        uuid_string (str): Raw UUID

    Returns:
        str: Lower-cased UUID, or None if invalid, nil or max
    """
    if not uuid_string or not isinstance(uuid_string, str):
        return None

    cleaned = uuid_string.strip().lower()
    if not validate_uuid(cleaned) or cleaned in EMPTY_UUIDS:
        return None
    return cleaned


def is_valid_url(url):
    """
    Check that a URL parses, assuming https:// when no scheme is given

    Args:
        url (str): URL to check

    Returns:
        bool: True if the URL has a usable host
    """
    if not url or not isinstance(url, str):
        return False

    has_scheme = url.lower().startswith(('http://', 'https://'))
    if not has_scheme and '://' in url:
        return False

    candidate = url if has_scheme else f'https://{url}'
    try:
        parts = urlsplit(candidate)
        hostname = parts.hostname
    except ValueError:
        return False

    return parts.scheme in ('http', 'https') and bool(hostname) and ' ' not in candidate


def is_valid_url_or_empty(url):
    """Same as is_valid_url, but an empty value counts as valid"""
    if not url or not isinstance(url, str) or not url.strip():
        return True
    return is_valid_url(url)


def clean_url(url):
    """
    Trim and validate a URL

    Returns:
        str: Trimmed URL, or None if invalid
    """
    if not url or not isinstance(url, str):
        return None

    cleaned = url.strip()
    return cleaned if is_valid_url(cleaned) else None


def clean_url_optional(url):
    """Trim and validate an optional URL; empty and invalid both give None"""
    if not url or not isinstance(url, str) or not url.strip():
        return None
    return clean_url(url)


def is_valid_asset_id(value):
    """An image-host public id: allowed characters and at least one alphanumeric"""
    return (
        isinstance(value, str)
        and bool(ASSET_ID_PATTERN.match(value))
        and bool(HAS_ALNUM.search(value))
    )


def validate_asset_ids(asset_ids):
    """
    Keep the well-formed image ids of a list

    Args:
        asset_ids (list): Candidate image ids

    Returns:
        list: Valid ids, in their original order
    """
    if not isinstance(asset_ids, list):
        return []
    return [asset_id for asset_id in asset_ids if is_valid_asset_id(asset_id)]


def validate_image_updates(image_ids, old_image_ids=None):
    """
    Compare a new image list with the stored one

    Args:
        image_ids (list): Image ids submitted with the update
        old_image_ids (list): Image ids currently stored

    Returns:
        dict: valid_images, images_to_delete and has_changes
    """
    old_image_ids = old_image_ids if isinstance(old_image_ids, list) else []
    valid_images = validate_asset_ids(image_ids)
    images_to_delete = [old for old in old_image_ids if old not in valid_images]

    return {
        'valid_images': valid_images,
        'images_to_delete': images_to_delete,
        'has_changes': len(valid_images) != len(old_image_ids) or bool(images_to_delete),
    }


def is_integer(value):
    """True for ints and integral floats, never for bools"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == value and value not in (float('inf'), float('-inf'))


def check_name(value, label, min_length, max_length, reserved=(), must_start_with_letter=True):
    """
    Validate a name/title field

    Args:
        value: Sanitized value
        label (str): Human label used in messages, e.g. "Template name"
        min_length (int): Minimum length
        max_length (int): Maximum length
        reserved (tuple): Lower-case names that are not allowed
        must_start_with_letter (bool): Require a leading letter

    Returns:
        str: Error message, or None if valid
    """
    if not isinstance(value, str) or not value.strip():
        return f'{label} is required'
    if len(value) < min_length:
        return f'{label} must be at least {min_length} characters'
    if len(value) > max_length:
        return f'{label} must not exceed {max_length} characters'
    if not NAME_PATTERN.match(value):
        return f'{label} can only contain letters, numbers, spaces, and ._-'
    if must_start_with_letter and not re.match(r'[a-zA-Z]', value):
        return f'{label} must start with a letter'
    if re.search(r'\s{2,}', value):
        return f'{label} cannot contain multiple consecutive spaces'
    if value.strip().lower() in reserved:
        return f'This {label.lower()} is not allowed'
    return None


def check_url(value, label, required=True):
    """
    Validate a URL field

    Returns:
        str: Error message, or None if valid
    """
    if value is None or value == '':
        return f'{label} is required' if required else None
    if not isinstance(value, str):
        return f'{label} must be a string'
    if len(value) < 3:
        return f'{label} must be at least 3 characters'
    if len(value) > 500:
        return f'{label} must not exceed 500 characters'
    if not URL_SHAPE_PATTERN.match(value) or not is_valid_url(value):
        return f'Invalid {label.lower()} URL format'
    return None
