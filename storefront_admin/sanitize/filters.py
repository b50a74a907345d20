"""
List-page filter sanitizers

Filters arrive from search forms and query strings. Unknown filter keys
are dropped; for orders each dropped key is logged as a security event.
"""
import logging
from collections.abc import Mapping

from .fields import SearchText

logger = logging.getLogger(__name__)

PAYMENT_STATUSES = ('paid', 'unpaid', 'refunded', 'failed')
APPLICATION_CATEGORIES = ('mobile', 'web')
APPLICATION_LEVELS = ('1', '2', '3', '4', '5')
ACTIVE_STATES = ('true', 'false')

MAX_SEARCH_LENGTH = 100
MAX_FILTER_VALUES = 10
MIN_SEARCH_LENGTH = 2

_search = SearchText(max_length=MAX_SEARCH_LENGTH)


def _clean_search(value):
    """Return a bounded search term, or None when it is too short to use"""
    if not isinstance(value, str) or not value.strip():
        return None
    term = _search.bound(_search.clean(value))
    return term if len(term) >= MIN_SEARCH_LENGTH else None


def _clean_choices(values, allowed):
    """Keep the allowed entries of a list of strings"""
    if not isinstance(values, list):
        return None
    trimmed = [value.strip() for value in values
               if isinstance(value, str) and value.strip()]
    return [value for value in trimmed[:MAX_FILTER_VALUES] if value in allowed]


def sanitize_order_filters(filters):
    """
    Sanitize the order list filters

    Args:
        filters (dict): ``order_client`` search term and
            ``order_payment_status`` list

    Returns:
        dict: Usable filters only; unusable ones are omitted
    """
    if not isinstance(filters, Mapping):
        return {}

    validated = {}
    for key, value in filters.items():
        if key == 'order_client':
            term = _clean_search(value)
            if term is not None:
                validated[key] = term
        elif key == 'order_payment_status':
            statuses = _clean_choices(value, PAYMENT_STATUSES)
            if statuses is not None:
                validated[key] = statuses
        else:
            logger.warning('Order filter on disallowed field %r ignored (security event)', key)

    return validated


def sanitize_application_filters(filters):
    """
    Sanitize the application list filters

    Args:
        filters (dict): ``application_name`` search term plus
            ``category``, ``level`` and ``status`` lists

    Returns:
        dict: Usable filters only
    """
    if not isinstance(filters, Mapping):
        return {}

    allowed_values = {
        'category': APPLICATION_CATEGORIES,
        'level': APPLICATION_LEVELS,
        'status': ACTIVE_STATES,
    }

    validated = {}
    for key, value in filters.items():
        if key == 'application_name':
            term = _clean_search(value)
            if term is not None:
                validated[key] = term
        elif key in allowed_values:
            values = _clean_choices(value, allowed_values[key])
            if values is not None:
                validated[key] = values

    return validated
