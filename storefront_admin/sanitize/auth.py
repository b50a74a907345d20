"""
Registration and login sanitizers

Emails keep every character a valid address may contain (``+``, ``%``);
the format check belongs to validation. Passwords only lose control
characters and are never trimmed.
"""
from .fields import DateValue, EmailText, Flag, NameText, PasswordText, PhoneText
from .records import FieldSet

REGISTRATION_FIELDS = FieldSet('registration', {
    'username': NameText(max_length=50),
    'email': EmailText(max_length=255),
    'phone': PhoneText(max_length=20),
    'password': PasswordText(max_length=128),
    'confirmPassword': PasswordText(max_length=128),
    'dateOfBirth': DateValue(),
    'terms': Flag(),
})

LOGIN_FIELDS = FieldSet('login', {
    'email': EmailText(max_length=255),
    'password': PasswordText(max_length=128),
})


def sanitize_registration_inputs(form_data):
    return REGISTRATION_FIELDS.sanitize(form_data)


def sanitize_registration_inputs_strict(form_data):
    return REGISTRATION_FIELDS.sanitize_strict(form_data)


def sanitize_login_inputs(form_data):
    return LOGIN_FIELDS.sanitize(form_data)


def sanitize_login_inputs_strict(form_data):
    return LOGIN_FIELDS.sanitize_strict(form_data)
