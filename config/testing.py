"""
Testing configuration for the storefront admin API
"""
import os

from config.settings import Config


class TestingConfig(Config):
    """Testing configuration with isolated database and safe defaults"""

    TESTING = True
    DEBUG = False
    SECRET_KEY = 'test-secret-key'

    # Use in-memory SQLite for fast tests
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'TEST_DATABASE_URL',
        'sqlite:///:memory:'
    )
    SQLALCHEMY_ENGINE_OPTIONS = {}

    SESSION_COOKIE_SECURE = False

    # Disable rate limiting in tests
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = 'memory://'

    # No error reporting from tests
    SENTRY_DSN = None

    # Logging
    LOG_LEVEL = 'WARNING'

    CORS_ORIGINS = ['http://localhost:5173', 'http://localhost:3000']
