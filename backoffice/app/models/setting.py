"""
Key/value settings model.
"""

from sqlalchemy import Column, String, Text
from backoffice.app.db.session import Base

COMMISSION_PERCENT_KEY = "commission_percent"


class Setting(Base):
    """A single configuration entry. The key is the primary identifier."""
    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(Text)

    def __repr__(self):
        return f"<Setting(key='{self.key}', value='{self.value}')>"
