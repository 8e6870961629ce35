"""
Settings and commission report API endpoints.
"""

import json
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from backoffice.app.core.dependencies import get_current_admin, get_store
from backoffice.app.db.store import Store
from backoffice.app.models.setting import Setting
from backoffice.app.schemas.common import OkResponse
from backoffice.app.schemas.settings import SettingsResponse, CommissionSummary
from backoffice.app.services.commission import CommissionService

router = APIRouter(tags=["Settings"], dependencies=[Depends(get_current_admin)])


def stringify_setting(value: Any) -> str:
    """Strings are stored as-is; anything else as its JSON text (5 -> "5", true -> "true")."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@router.get("/settings", response_model=SettingsResponse)
async def get_settings(store: Store = Depends(get_store)):
    rows = await store.fetch_all(select(Setting.key, Setting.value))
    return SettingsResponse(settings={row["key"]: row["value"] for row in rows})


@router.post("/settings", response_model=OkResponse)
async def update_settings(
    entries: Optional[Dict[str, Any]] = Body(default=None),
    store: Store = Depends(get_store)
):
    """
    Upsert every key of the body.

    Each key is one atomic INSERT ... ON CONFLICT DO UPDATE statement.
    The batch as a whole is not atomic: a failure leaves earlier keys written.
    """
    for key, raw_value in (entries or {}).items():
        value = stringify_setting(raw_value)
        statement = (
            sqlite_insert(Setting.__table__)
            .values(key=key, value=value)
            .on_conflict_do_update(index_elements=[Setting.key], set_={"value": value})
        )
        await store.run(statement)
    return OkResponse()


@router.get("/commission-summary", response_model=CommissionSummary)
async def commission_summary(store: Store = Depends(get_store)):
    """Commission on approved deposits plus approved deposit/withdraw totals."""
    return await CommissionService.get_summary(store)
