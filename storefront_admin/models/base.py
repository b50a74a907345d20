"""
Base model with common fields and methods
"""
import uuid
from datetime import date, datetime, timezone

from storefront_admin import db


def generate_uuid():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    """Abstract base model with timestamp columns"""
    __abstract__ = True

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self, exclude=None):
        """
        Convert model to dictionary

        Args:
            exclude (list): List of fields to exclude

        Returns:
            dict: Model as dictionary
        """
        exclude = exclude or []
        data = {}

        for column in self.__table__.columns:
            if column.name not in exclude:
                value = getattr(self, column.name)

                if isinstance(value, (datetime, date)):
                    value = value.isoformat()

                data[column.name] = value

        return data

    def touch(self):
        """Bump updated_at without changing any other column"""
        self.updated_at = utcnow()
