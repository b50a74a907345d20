"""
Pytest configuration and fixtures for the storefront admin tests
"""
import os
from datetime import date

import pytest

from storefront_admin import create_app, db
from storefront_admin.models import Application, Order, Platform, Template, User

ADMIN_EMAIL = 'jane.admin@example.com'
ADMIN_PASSWORD = 'Str0ng!Pass#42'


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing"""
    os.environ['FLASK_ENV'] = 'testing'
    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(autouse=True)
def app_context(app):
    """Fresh app context per test, emptying every table afterwards"""
    with app.app_context():
        yield
        db.session.rollback()
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        db.session.remove()


@pytest.fixture(scope='function')
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def admin_user(app):
    """Create a dashboard user"""
    user = User(
        username='Jane Admin',
        email=ADMIN_EMAIL,
        phone='+237690000000',
        date_of_birth=date(1990, 4, 12),
    )
    user.set_password(ADMIN_PASSWORD)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_client(client, admin_user):
    """Test client with a logged-in session"""
    response = client.post('/api/auth/login', json={
        'email': ADMIN_EMAIL,
        'password': ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    return client


@pytest.fixture
def template_factory(app):
    """Factory for creating templates"""
    def _create_template(**kwargs):
        defaults = {
            'template_name': 'Boutique',
            'template_images': ['templates/boutique_1'],
            'template_has_web': True,
            'template_has_mobile': False,
        }
        defaults.update(kwargs)

        template = Template(**defaults)
        db.session.add(template)
        db.session.commit()
        return template

    return _create_template


@pytest.fixture
def test_template(template_factory):
    return template_factory()


@pytest.fixture
def application_factory(app, test_template):
    """Factory for creating applications on the test template"""
    def _create_application(**kwargs):
        defaults = {
            'application_name': 'Shop Pro',
            'application_link': 'https://shop.example.com',
            'application_admin_link': 'https://admin.shop.example.com',
            'application_description': 'Online shop',
            'application_category': 'web',
            'application_fee': 50000,
            'application_rent': 5000,
            'application_images': ['apps/shop_1'],
            'application_template_id': test_template.template_id,
            'application_level': 2,
        }
        defaults.update(kwargs)

        application = Application(**defaults)
        db.session.add(application)
        db.session.commit()
        return application

    return _create_application


@pytest.fixture
def test_application(application_factory):
    return application_factory()


@pytest.fixture
def platform_factory(app):
    """Factory for creating payment platforms"""
    def _create_platform(**kwargs):
        defaults = {
            'platform_name': 'Orange Money',
            'is_cash_payment': False,
            'account_name': 'Storefront Ltd',
            'account_number': '+237690000000',
            'description': 'Mobile money',
        }
        defaults.update(kwargs)

        platform = Platform(**defaults)
        db.session.add(platform)
        db.session.commit()
        return platform

    return _create_platform


@pytest.fixture
def order_factory(app, test_application):
    """Factory for creating orders on the test application"""
    def _create_order(**kwargs):
        defaults = {
            'order_application_id': test_application.application_id,
            'order_client': ['John Client', 'john@example.com', '+237677000000'],
            'order_price': 50000,
            'order_rent': 5000,
            'order_payment_status': 'unpaid',
            'platform_name': 'Orange Money',
            'platform_account_name': 'Storefront Ltd',
            'platform_account_number': '237690000012',
        }
        defaults.update(kwargs)

        order = Order(**defaults)
        db.session.add(order)
        db.session.commit()
        return order

    return _create_order
