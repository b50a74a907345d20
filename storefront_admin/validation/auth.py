"""
Registration and login schemas
"""
import re
from datetime import date

from .common import EMAIL_PATTERN, NAME_PATTERN

DISPOSABLE_DOMAINS = frozenset([
    'tempmail.com', 'throwawaymail.com', 'tempmail.net', 'test.com',
    'guerrillamail.com', '10minutemail.com', 'mailinator.com', 'maildrop.cc',
    'temp-mail.org', 'yopmail.com', 'trashmail.com', 'getnada.com',
    'fakeinbox.com', 'sharklasers.com', 'grr.la', 'spambox.us',
    'mailnesia.com', 'mintemail.com', 'mytrashmail.com', 'anonymbox.com',
    'dispostable.com', 'mail-temporaire.fr', 'spam4.me', 'tempinbox.com',
    'getairmail.com', 'throwam.com', 'filzmail.com', 'tmailinator.com',
    'guerrillamailblock.com', 'notmailinator.com', 'vomoto.com',
    'spamgourmet.com', 'mailtemp.net', 'mohmal.com', 'mt2015.com',
    'armyspy.com', 'cuvox.de', 'dayrep.com', 'einrot.com', 'fleckens.hu',
    'gustr.com', 'jourrapide.com', 'rhyta.com', 'superrito.com',
    'teleworm.us', 'dropmail.me', 'emailondeck.com', 'incognitomail.com',
    'jetable.org', 'mytemp.email',
])

COMMON_PASSWORDS = (
    'password', '123456', '123456789', '12345678', 'qwerty', 'abc123',
    'password123', '1234567', '12345', '111111', 'admin', 'letmein',
    'welcome', 'monkey', 'dragon', 'master', 'sunshine', 'princess',
    'login', 'solo',
)

RESERVED_USERNAMES = ('admin', 'root', 'system', 'moderator')

PHONE_PATTERN = re.compile(r'^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,4}[-\s.]?[0-9]{1,9}$')
SPECIAL_CHAR_PATTERN = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
REPEATED_CHAR_PATTERN = re.compile(r'(.)\1{2,}')

MIN_AGE = 13
MAX_AGE = 120
EARLIEST_BIRTH_DATE = date(1900, 1, 1)


def calculate_age(birth_date, today=None):
    """
    Age in whole years, counting a birthday only once it has passed

    Args:
        birth_date (date): Date of birth
        today (date): Reference date, defaults to today

    Returns:
        int: Age in years
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def check_email(email):
    if not isinstance(email, str) or not email:
        return 'Email is required'
    if not EMAIL_PATTERN.match(email):
        return 'Invalid email format'
    if len(email) > 255:
        return 'Email must not exceed 255 characters'
    if email.split('@')[1].lower() in DISPOSABLE_DOMAINS:
        return 'Please use a valid email domain'
    return None


def check_password(password):
    """Base password rules shared by registration and login"""
    if not isinstance(password, str) or not password:
        return 'Password is required'
    if len(password) < 8:
        return 'Password must be at least 8 characters'
    if len(password) > 128:
        return 'Password must not exceed 128 characters'
    if not re.search(r'\d', password):
        return 'Password must contain at least one number'
    if not re.search(r'[A-Z]', password):
        return 'Password must contain at least one uppercase letter'
    if not re.search(r'[a-z]', password):
        return 'Password must contain at least one lowercase letter'
    if not SPECIAL_CHAR_PATTERN.search(password):
        return 'Password must contain at least one special character'
    lowered = password.lower()
    if any(word in lowered for word in COMMON_PASSWORDS):
        return 'Password contains common words that are not allowed'
    return None


def _check_username(username):
    if not isinstance(username, str) or not username:
        return 'Username is required'
    if len(username) < 3:
        return 'Username must be at least 3 characters'
    if len(username) > 50:
        return 'Username must not exceed 50 characters'
    if not NAME_PATTERN.match(username):
        return 'Username can only contain letters, numbers, spaces, and ._-'
    if not re.match(r'[a-zA-Z]', username):
        return 'Username must start with a letter'
    if REPEATED_CHAR_PATTERN.search(username):
        return 'Username cannot contain repeating characters (e.g., aaa)'
    if username.lower() in RESERVED_USERNAMES:
        return 'This username is not allowed'
    return None


def _check_phone(phone):
    if not isinstance(phone, str) or not phone.strip():
        return 'Phone number is required'
    phone = phone.strip()
    if not PHONE_PATTERN.match(phone):
        return 'Invalid phone number format'
    digits = re.sub(r'\D', '', phone)
    if not 6 <= len(digits) <= 15:
        return 'Phone number must be valid'
    return None


def _parse_date(value):
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    return None


def _check_date_of_birth(value, today=None):
    if value is None or value == '':
        return 'Date of birth is required'
    birth_date = _parse_date(value)
    if birth_date is None:
        return 'Invalid date of birth'
    today = today or date.today()
    if birth_date > today:
        return 'Date of birth cannot be in the future'
    if birth_date < EARLIEST_BIRTH_DATE:
        return 'Invalid date of birth'
    age = calculate_age(birth_date, today)
    if age < MIN_AGE:
        return f'You must be at least {MIN_AGE} years old'
    if age > MAX_AGE:
        return 'Invalid age'
    return None


def validate_registration(data, today=None):
    """
    Validate a registration record

    Args:
        data (dict): Sanitized registration fields
        today (date): Reference date for the age checks

    Returns:
        dict: Field name -> error message
    """
    errors = {}

    checks = (
        ('username', _check_username(data.get('username'))),
        ('email', check_email(data.get('email'))),
        ('phone', _check_phone(data.get('phone'))),
        ('password', check_password(data.get('password'))),
        ('dateOfBirth', _check_date_of_birth(data.get('dateOfBirth'), today)),
    )
    for field, message in checks:
        if message:
            errors[field] = message

    password = data.get('password')
    username = data.get('username')
    if 'password' not in errors and isinstance(username, str) and username \
            and username.lower() in password.lower():
        errors['password'] = 'Password cannot contain your username'

    confirm = data.get('confirmPassword')
    if not confirm:
        errors['confirmPassword'] = 'Please confirm your password'
    elif confirm != password:
        errors['confirmPassword'] = 'Passwords must match'

    if data.get('terms') is not True:
        errors['terms'] = 'You must accept the terms and conditions'

    return errors


def validate_login(data):
    """
    Validate a login record

    Returns:
        dict: Field name -> error message
    """
    errors = {}

    message = check_email(data.get('email'))
    if message:
        errors['email'] = message

    message = check_password(data.get('password'))
    if message:
        errors['password'] = message

    return errors
