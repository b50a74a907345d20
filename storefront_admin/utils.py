"""
Request helpers shared by the blueprints
"""
import logging

from flask import jsonify, request

logger = logging.getLogger(__name__)


def get_request_id():
    """Request ID set by RequestIdMiddleware, or None outside a request"""
    return request.environ.get('request_id')


def get_json_body():
    """
    Parse the request body as a JSON object

    Returns:
        dict: Parsed body, or None if the body is not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning('Invalid JSON body on %s %s (request %s)',
                       request.method, request.path, get_request_id())
        return None
    return data


def error_response(message, status_code, errors=None):
    """
    Build a JSON error response

    Args:
        message (str): Human readable message
        status_code (int): HTTP status
        errors (dict): Field name -> message, for validation failures

    Returns:
        tuple: (response, status_code)
    """
    body = {'success': False, 'error': message}
    if errors:
        body['errors'] = errors
    return jsonify(body), status_code


def mask_email(email):
    """Shorten an email for log lines: jo***@example.com"""
    if not email or '@' not in email:
        return '[invalid]'
    local, domain = email.split('@', 1)
    return f'{local[:2]}***@{domain}'


def contains_pattern(term):
    """
    Build a LIKE pattern matching ``term`` anywhere, wildcards escaped

    Use with ``ilike(pattern, escape='\\\\')``.
    """
    escaped = term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'
