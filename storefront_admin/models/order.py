"""Order model"""
from storefront_admin import db
from .base import generate_uuid, utcnow

PAYMENT_STATUSES = ('paid', 'unpaid', 'refunded', 'failed')


def mask_account_number(account_number):
    """
    Hide the middle of an account number

    Args:
        account_number (str): Raw account number

    Returns:
        str: First three and last two characters around ***, or None
    """
    if not account_number:
        return None
    return f'{account_number[:3]}***{account_number[-2:]}'


class Order(db.Model):
    __tablename__ = 'orders'

    order_id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    order_application_id = db.Column(
        db.String(36), db.ForeignKey('applications.application_id'), nullable=False, index=True
    )
    order_client = db.Column(db.JSON, nullable=False, default=list)  # [name, email, phone, ...]
    order_price = db.Column(db.Float, nullable=False, default=0)
    order_rent = db.Column(db.Float, nullable=False, default=0)
    order_payment_status = db.Column(db.String(20), nullable=False, default='unpaid', index=True)
    platform_name = db.Column(db.String(50))
    platform_account_name = db.Column(db.String(255))
    platform_account_number = db.Column(db.String(20))

    order_created = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    order_updated = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    order_paid_at = db.Column(db.DateTime(timezone=True))
    order_cancelled_at = db.Column(db.DateTime(timezone=True))

    __table_args__ = (
        db.CheckConstraint(
            "order_payment_status IN ('paid', 'unpaid', 'refunded', 'failed')",
            name='check_order_payment_status'
        ),
    )

    application = db.relationship('Application', back_populates='orders')

    def __repr__(self):
        return f'<Order {self.order_id} ({self.order_payment_status})>'

    def set_status(self, status):
        """Change payment status; paid stamps order_paid_at, failed stamps order_cancelled_at"""
        now = utcnow()
        self.order_payment_status = status
        if status == 'paid':
            self.order_paid_at = now
        elif status == 'failed':
            self.order_cancelled_at = now
        self.order_updated = now

    def to_dict(self):
        application = self.application
        status = self.order_payment_status
        return {
            'order_id': self.order_id,
            'order_application_id': self.order_application_id,
            'order_client': (self.order_client or [])[:4],
            'order_price': max(0, self.order_price or 0),
            'order_rent': max(0, self.order_rent or 0),
            'order_payment_status': status if status in PAYMENT_STATUSES else 'unpaid',
            'platform_name': self.platform_name or '[Unknown Platform]',
            'platform_account_name': self.platform_account_name or None,
            'platform_account_number': mask_account_number(self.platform_account_number),
            'application_name': (application.application_name if application else '[No Name]')[:200],
            'application_category': application.application_category if application else 'web',
            'application_images': (application.application_images or [])[:10] if application else [],
            'order_created': self.order_created.isoformat() if self.order_created else None,
            'order_updated': self.order_updated.isoformat() if self.order_updated else None,
            'order_paid_at': self.order_paid_at.isoformat() if self.order_paid_at else None,
            'order_cancelled_at': self.order_cancelled_at.isoformat() if self.order_cancelled_at else None,
        }
