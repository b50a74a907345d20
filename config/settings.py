"""
Configuration settings for different environments
"""
import logging
import os
import secrets
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _require_in_production(var_name, default):
    """Return env var value. Outside development, warn loudly if still using default."""
    value = os.environ.get(var_name, '')
    if value:
        return value
    env = os.environ.get('FLASK_ENV', 'development')
    if env not in ('development', 'testing'):
        logging.getLogger(__name__).warning(
            '%s is using an insecure default. Set it via environment variable!', var_name
        )
    return default


def _database_url():
    url = os.environ.get('DATABASE_URL') or 'postgresql://localhost/storefront_admin'
    # Fix postgres:// to postgresql:// for SQLAlchemy 2.x
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    """Base configuration"""
    SECRET_KEY = _require_in_production('SECRET_KEY', 'dev-only-' + secrets.token_hex(16))

    # Database
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }

    # Security
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # API
    API_PREFIX = os.environ.get('API_PREFIX', '/api')
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB, JSON bodies only

    # Rate limiting (Flask-Limiter reads these keys)
    RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'true').lower() in ['true', 'on', '1']
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI') or os.environ.get('REDIS_URL') or 'memory://'
    RATELIMIT_HEADERS_ENABLED = True

    # Monitoring
    SENTRY_DSN = os.environ.get('SENTRY_DSN')
    SENTRY_TRACES_SAMPLE_RATE = float(os.environ.get('SENTRY_TRACES_SAMPLE_RATE', 0.1))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    # Enforce HTTPS
    SESSION_COOKIE_SECURE = True

    # Production-specific settings
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 20,
        'max_overflow': 40,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
