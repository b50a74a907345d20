"""
Payment platform schema

Electronic platforms need an account name and number; cash platforms
have neither.
"""
import re

from .common import NAME_PATTERN, check_name

UPDATABLE_FIELDS = (
    'platformName', 'isCashPayment', 'accountName', 'accountNumber',
    'description', 'isActive',
)

_ACCOUNT_NUMBER_PATTERN = re.compile(r'^[0-9+]+$')


def _check_account_name(value, required):
    if value is None or value == '':
        return 'Account name is required for electronic platforms' if required else None
    if not isinstance(value, str):
        return 'Account name must be a string'
    if len(value) < 3:
        return 'Account name must be at least 3 characters'
    if len(value) > 255:
        return 'Account name must not exceed 255 characters'
    if not NAME_PATTERN.match(value):
        return 'Account name can only contain letters, numbers, spaces, and ._-'
    return None


def _check_account_number(value, required):
    if value is None or value == '':
        return 'Account number is required for electronic platforms' if required else None
    if not isinstance(value, str):
        return 'Account number must be a string'
    if len(value) < 3:
        return 'Account number must be at least 3 characters'
    if len(value) > 20:
        return 'Account number must not exceed 20 characters'
    if not _ACCOUNT_NUMBER_PATTERN.match(value):
        return 'Account number can only contain digits and + sign'
    if not re.search(r'\d', value):
        return 'Account number must contain at least one digit'
    return None


def validate_platform(data, partial=False):
    """
    Validate a payment platform record

    Args:
        data (dict): Sanitized platform fields
        partial (bool): Update mode, only the provided fields are checked

    Returns:
        dict: Field name -> error message
    """
    errors = {}

    if partial:
        provided = [key for key in UPDATABLE_FIELDS
                    if key in data and data[key] is not None and data[key] != '']
        if not provided:
            errors['general'] = 'At least one field must be provided for update'
            return errors

    if not partial or 'platformName' in data:
        message = check_name(data.get('platformName'), 'Platform name', 3, 50)
        if message:
            errors['platformName'] = message

    is_cash = data.get('isCashPayment') is True
    if not is_cash:
        if not partial or 'accountName' in data:
            message = _check_account_name(data.get('accountName'), required=not partial)
            if message:
                errors['accountName'] = message
        if not partial or 'accountNumber' in data:
            message = _check_account_number(data.get('accountNumber'), required=not partial)
            if message:
                errors['accountNumber'] = message

    description = data.get('description')
    if isinstance(description, str) and len(description) > 500:
        errors['description'] = 'Description must not exceed 500 characters'

    if partial and 'isActive' in data and not isinstance(data['isActive'], bool):
        errors['isActive'] = 'Platform status must be a boolean value'

    return errors
