"""Storefront template model"""
from storefront_admin import db
from .base import BaseModel, generate_uuid


class Template(BaseModel):
    __tablename__ = 'templates'

    template_id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    template_name = db.Column(db.String(100), nullable=False)
    template_images = db.Column(db.JSON, nullable=False, default=list)
    template_has_web = db.Column(db.Boolean, nullable=False, default=True)
    template_has_mobile = db.Column(db.Boolean, nullable=False, default=False)
    sales_count = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    applications = db.relationship('Application', back_populates='template', lazy='dynamic')

    def __repr__(self):
        return f'<Template {self.template_name}>'
