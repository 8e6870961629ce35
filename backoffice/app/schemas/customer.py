"""
Customer Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List


class CustomerWrite(BaseModel):
    """
    Schema for creating or overwriting a customer.

    Used by POST and PUT; a PUT replaces all four fields, so an omitted
    field is written as null.
    """
    name: Optional[str] = Field(None, description="Customer name")
    email: Optional[str] = Field(None, description="Unique email address")
    phone: Optional[str] = None
    note: Optional[str] = None


class CustomerResponse(BaseModel):
    """Schema for customer response."""
    id: int
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    note: Optional[str]
    created_at: Optional[str] = Field(None, description="SQLite CURRENT_TIMESTAMP text, e.g. 2024-01-31 12:00:00")

    class Config:
        from_attributes = True


class CustomerListResponse(BaseModel):
    customers: List[CustomerResponse]
