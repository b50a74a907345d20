"""
Shared Flask extension instances.

Created as a separate module to avoid circular imports when blueprints
need the limiter before the app exists. Storage and the on/off switch
come from RATELIMIT_STORAGE_URI and RATELIMIT_ENABLED in the app config.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import current_user

# Limits applied per route with @limiter.limit(...)
AUTHENTICATED_API = '120 per minute'
AUTH_ENDPOINTS = '20 per 15 minutes'
CONTENT_API = '30 per 2 minutes'
CONTENT_CREATE = '10 per 5 minutes'


def rate_limit_key():
    """Signed-in users are limited per account, everyone else per address"""
    if current_user and current_user.is_authenticated:
        return f'user:{current_user.get_id()}'
    return get_remote_address()


# Limiter is created without an app; init_app() is called in create_app().
limiter = Limiter(
    key_func=rate_limit_key,
    default_limits=[AUTHENTICATED_API],
)
