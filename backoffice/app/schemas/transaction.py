"""
Transaction Pydantic schemas.

Type and status are free strings: the store accepts any value and the
endpoints do not restrict them to the TransactionType/TransactionStatus enums.
"""

from pydantic import BaseModel, Field
from typing import Optional, List


class TransactionCreate(BaseModel):
    """
    Schema for creating a transaction.

    customer_id, type and amount are required by the endpoint; they are
    optional here so a missing field and a falsy one produce the same error.
    """
    customer_id: Optional[int] = Field(None, description="Owning customer")
    type: Optional[str] = Field(None, description="deposit or withdraw")
    amount: Optional[float] = Field(None, description="Monetary amount")
    status: Optional[str] = Field(None, description="Defaults to pending")


class TransactionStatusUpdate(BaseModel):
    """Schema for PUT /api/transactions/{id}. Only status is mutable."""
    status: Optional[str] = None


class TransactionResponse(BaseModel):
    """Transaction row joined with its customer's name and email."""
    id: int
    customer_id: Optional[int]
    type: Optional[str]
    amount: Optional[float]
    status: Optional[str]
    created_at: Optional[str] = Field(None, description="SQLite CURRENT_TIMESTAMP text, e.g. 2024-01-31 12:00:00")
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None


class TransactionListResponse(BaseModel):
    transactions: List[TransactionResponse]
