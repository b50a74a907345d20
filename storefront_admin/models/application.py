"""Application model: a sellable storefront built on a template"""
from storefront_admin import db
from .base import BaseModel, generate_uuid


class Application(BaseModel):
    __tablename__ = 'applications'

    application_id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    application_name = db.Column(db.String(100), nullable=False)
    application_link = db.Column(db.String(500), nullable=False)
    application_admin_link = db.Column(db.String(500))
    application_description = db.Column(db.Text)
    application_category = db.Column(db.String(10), nullable=False)  # web, mobile
    application_fee = db.Column(db.Float, nullable=False, default=0)
    application_rent = db.Column(db.Float, nullable=False, default=0)
    application_images = db.Column(db.JSON, nullable=False, default=list)
    application_other_versions = db.Column(db.JSON)
    application_template_id = db.Column(
        db.String(36), db.ForeignKey('templates.template_id'), nullable=False, index=True
    )
    application_level = db.Column(db.Integer, nullable=False, default=1)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    sales_count = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.CheckConstraint("application_category IN ('web', 'mobile')", name='check_application_category'),
        db.CheckConstraint('application_level BETWEEN 1 AND 4', name='check_application_level'),
    )

    template = db.relationship('Template', back_populates='applications')
    orders = db.relationship('Order', back_populates='application', lazy='dynamic')

    def __repr__(self):
        return f'<Application {self.application_name} ({self.application_category})>'

    def to_dict(self, exclude=None):
        data = super().to_dict(exclude=exclude)
        if self.template is not None:
            data['template_name'] = self.template.template_name
        return data
