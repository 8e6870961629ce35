"""
Transaction database model and its conceptual enumerations.
"""

import enum
from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey
from sqlalchemy.sql import func
from backoffice.app.db.session import Base


class TransactionType(str, enum.Enum):
    """Kinds of money movement. Not enforced by the store."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class TransactionStatus(str, enum.Enum):
    """Review states of a transaction. Not enforced by the store."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Transaction(Base):
    """
    Deposit or withdraw request of a customer.

    customer_id is a weak reference: SQLite foreign-key enforcement is off,
    so deleting a customer leaves its transactions in place. type and status
    are plain strings; callers may store values outside the enums above.
    """
    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"))
    type = Column(String)
    amount = Column(Float)
    status = Column(String)
    created_at = Column(Text, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Transaction(id={self.id}, customer_id={self.customer_id}, type='{self.type}', status='{self.status}')>"
