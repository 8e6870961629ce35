"""
Customer database model.
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.sql import func
from backoffice.app.db.session import Base


class Customer(Base):
    """
    Customer owning deposit/withdraw transactions.

    Email uniqueness is enforced by the store; a duplicate surfaces
    as an integrity error on insert or update.
    """
    __tablename__ = "customers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    email = Column(String, unique=True)
    phone = Column(String)
    note = Column(Text)
    created_at = Column(Text, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}', email='{self.email}')>"
