"""SQLAlchemy models package"""
from .user import User
from .template import Template
from .application import Application
from .platform import Platform
from .order import Order

__all__ = [
    'User',
    'Template',
    'Application',
    'Platform',
    'Order',
]
