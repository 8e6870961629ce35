"""
Settings and commission report schemas.
"""

from pydantic import BaseModel, Field
from typing import Dict, Optional


class SettingsResponse(BaseModel):
    """All settings as a flat key -> value mapping."""
    settings: Dict[str, Optional[str]]


class CommissionSummary(BaseModel):
    """
    Commission report over approved transactions.

    Recomputed from the store on every request.
    """
    percent: float = Field(..., description="commission_percent setting, 0 when missing")
    total_deposit: float
    total_withdraw: float
    commission_on_deposits: float
    summary_date: str = Field(..., description="UTC ISO-8601 time of the computation")
