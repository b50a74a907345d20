"""Input sanitization: allow-list cleanup applied before schema validation"""
from .application import (
    sanitize_application_inputs,
    sanitize_application_inputs_strict,
    sanitize_application_update_inputs,
    sanitize_application_update_inputs_strict,
)
from .auth import (
    sanitize_login_inputs,
    sanitize_login_inputs_strict,
    sanitize_registration_inputs,
    sanitize_registration_inputs_strict,
)
from .filters import sanitize_application_filters, sanitize_order_filters
from .patterns import find_suspicious
from .platform import (
    sanitize_platform_inputs,
    sanitize_platform_inputs_strict,
    sanitize_platform_update_inputs,
    sanitize_platform_update_inputs_strict,
)
from .records import FieldSet
from .template import (
    sanitize_template_inputs,
    sanitize_template_inputs_strict,
    sanitize_template_update_inputs,
    sanitize_template_update_inputs_strict,
)

__all__ = [
    'FieldSet',
    'find_suspicious',
    'sanitize_application_filters',
    'sanitize_application_inputs',
    'sanitize_application_inputs_strict',
    'sanitize_application_update_inputs',
    'sanitize_application_update_inputs_strict',
    'sanitize_login_inputs',
    'sanitize_login_inputs_strict',
    'sanitize_order_filters',
    'sanitize_platform_inputs',
    'sanitize_platform_inputs_strict',
    'sanitize_platform_update_inputs',
    'sanitize_platform_update_inputs_strict',
    'sanitize_registration_inputs',
    'sanitize_registration_inputs_strict',
    'sanitize_template_inputs',
    'sanitize_template_inputs_strict',
    'sanitize_template_update_inputs',
    'sanitize_template_update_inputs_strict',
]
