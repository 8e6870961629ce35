"""
Response schemas shared by the resource endpoints.
"""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Identifier of a newly inserted row."""
    id: int


class OkResponse(BaseModel):
    ok: bool = True
