"""
Error monitoring through Sentry

sentry_sdk is only initialised when SENTRY_DSN is set; without it the
breadcrumb and capture calls below are no-ops.
"""
import logging

import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

logger = logging.getLogger(__name__)

LEVELS = ('debug', 'info', 'warning', 'error', 'fatal')


def init_monitoring(app):
    dsn = app.config.get('SENTRY_DSN')
    if not dsn:
        if not app.config.get('TESTING'):
            logger.warning('SENTRY_DSN is not set -- error monitoring is disabled.')
        return

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FlaskIntegration()],
        traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 0.1),
        send_default_pii=False,
    )


def track_event(category, action, data=None, level='info'):
    """
    Record a breadcrumb for the current request

    Args:
        category (str): auth, database, api, validation...
        action (str): Short event name, e.g. "template_created"
        data (dict): Extra context, must not contain secrets
        level (str): One of LEVELS
    """
    if level not in LEVELS:
        level = 'info'
    sentry_sdk.add_breadcrumb(
        category=category,
        message=action,
        level=level,
        data=data or {},
    )


def track_error(error, action, extra=None):
    """
    Send an exception to Sentry with the action that raised it

    Args:
        error (Exception): The exception
        action (str): Where it happened, e.g. "create_template"
        extra (dict): Extra context
    """
    sentry_sdk.capture_exception(
        error,
        tags={'action': action},
        extras=extra or {},
    )
