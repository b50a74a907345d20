"""
Suspicious-content detection

Detection only: a match is logged and the value is left untouched. The
real defenses are the character allow-lists in the field rules and bound
parameters in every database query.
"""
import logging
import re

logger = logging.getLogger(__name__)

SUSPICIOUS_PATTERNS = tuple(re.compile(pattern, re.IGNORECASE) for pattern in (
    r'<script',
    r'javascript:',
    r'vbscript:',
    r'on\w+\s*=',
    r'data:text/html',
    r'\.\./',
    r'\x00',
    r'union\s+select',
    r'drop\s+table',
    r"';\s*--",
    r'eval\s*\(',
    r'document\.',
    r'window\.',
    r'expression\s*\(',
))


def find_suspicious(text):
    """
    List the suspicious patterns found in a string

    Args:
        text (str): Value to inspect

    Returns:
        list: Matching pattern sources, empty when the value looks clean
    """
    if not isinstance(text, str):
        return []
    return [pattern.pattern for pattern in SUSPICIOUS_PATTERNS if pattern.search(text)]


def scan_record(record, rules, entity):
    """
    Log a warning for every suspicious value in a sanitized record

    Args:
        record (dict): Sanitized field set
        rules (dict): Field name to rule, used to skip unscanned fields
        entity (str): Entity name for the log line

    Returns:
        list: (field, pattern) pairs that matched
    """
    hits = []
    for name, value in record.items():
        rule = rules.get(name)
        if rule is None:
            continue
        for suffix, text in rule.scannable(value):
            for pattern in find_suspicious(text):
                field = f'{name}{suffix}'
                logger.warning(
                    'Suspicious content detected in %s field %s (pattern %r)',
                    entity, field, pattern
                )
                hits.append((field, pattern))
    return hits
