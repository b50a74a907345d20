import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_login import LoginManager
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
login_manager = LoginManager()

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    from config import config
    app.config.from_object(config[config_name])

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    logging.getLogger('storefront_admin').setLevel(app.config['LOG_LEVEL'])

    from storefront_admin.monitoring import init_monitoring
    init_monitoring(app)

    # Initialize extensions
    from storefront_admin.extensions import limiter
    db.init_app(app)
    login_manager.init_app(app)
    limiter.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    from storefront_admin.middleware import RequestIdMiddleware
    app.wsgi_app = RequestIdMiddleware(app.wsgi_app)

    from storefront_admin.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'success': False, 'error': 'Authentication required'}), 401

    _register_error_handlers(app)

    # Register blueprints
    from storefront_admin.blueprints.auth import auth_bp
    from storefront_admin.blueprints.applications import applications_bp
    from storefront_admin.blueprints.templates import templates_bp
    from storefront_admin.blueprints.platforms import platforms_bp
    from storefront_admin.blueprints.orders import orders_bp

    api_prefix = app.config['API_PREFIX']
    dashboard_prefix = f'{api_prefix}/dashboard'
    app.register_blueprint(auth_bp, url_prefix=f'{api_prefix}/auth')
    app.register_blueprint(applications_bp, url_prefix=f'{dashboard_prefix}/applications')
    app.register_blueprint(templates_bp, url_prefix=f'{dashboard_prefix}/templates')
    app.register_blueprint(platforms_bp, url_prefix=f'{dashboard_prefix}/platforms')
    app.register_blueprint(orders_bp, url_prefix=f'{dashboard_prefix}/orders')

    # Health check endpoint
    @app.route('/health')
    def health():
        return {'status': 'healthy', 'service': 'storefront-admin'}, 200

    return app


def _register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({'success': False, 'error': 'Invalid request'}), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'success': False, 'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'error': 'Method not allowed'}), 405

    @app.errorhandler(429)
    def ratelimit_handler(e):
        # Flask-Limiter sets e.description to the limit that was hit
        retry_after = dict(e.get_headers()).get('Retry-After')
        retry_after_seconds = int(retry_after) if retry_after else 60
        logger.warning('Rate limit exceeded: %s', e.description)
        return jsonify({
            'success': False,
            'error': 'Too many requests. Please try again later.',
            'retry_after': retry_after_seconds,
        }), 429

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({'success': False, 'error': 'An unexpected error occurred'}), 500
