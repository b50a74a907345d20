"""Admin user model"""
from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from storefront_admin import db
from .base import BaseModel, generate_uuid


class User(BaseModel, UserMixin):
    """
    Dashboard user
    Includes Flask-Login integration
    """
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    username = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    phone = db.Column(db.String(20), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    date_of_birth = db.Column(db.Date)
    last_login_at = db.Column(db.DateTime(timezone=True))

    def __repr__(self):
        return f'<User {self.email}>'

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Verify password against hash"""
        return check_password_hash(self.password_hash, password)

    def to_dict(self, include_sensitive=False):
        """Convert to dictionary, the password hash is never included"""
        data = super().to_dict(exclude=['password_hash'])
        if not include_sensitive:
            data.pop('date_of_birth', None)
            data.pop('phone', None)
        return data
