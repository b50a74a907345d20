"""Payment platform model"""
from storefront_admin import db
from .base import BaseModel, generate_uuid


class Platform(BaseModel):
    """
    A way clients pay for orders: a mobile-money or bank account, or cash
    Cash platforms carry no account name or number
    """
    __tablename__ = 'platforms'

    platform_id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    platform_name = db.Column(db.String(50), nullable=False, unique=True)
    is_cash_payment = db.Column(db.Boolean, nullable=False, default=False)
    account_name = db.Column(db.String(255))
    account_number = db.Column(db.String(20))
    description = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def __repr__(self):
        return f'<Platform {self.platform_name}>'
