"""
Data access helpers.

A single Store wraps the async engine and exposes three helpers:
run (write, returns affected-row info), fetch_all and fetch_one.
Statements are SQLAlchemy constructs, so every value is sent as a
bound parameter.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from sqlalchemy import MetaData
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql import Executable
from backoffice.app.core.exceptions import StoreConstraintError, StoreError
from backoffice.app.db.session import create_engine

logger = logging.getLogger("backoffice.store")


# sqlite3 raises OverflowError at bind time for ints wider than 64 bits
DRIVER_ERRORS = (SQLAlchemyError, OverflowError)


def _driver_message(exc: Exception) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


@dataclass
class RunResult:
    """Affected-row info for a write statement."""
    last_id: Optional[int]
    row_count: int


class Store:
    """
    Access object for the relational store.

    Built once at startup and handed to request handlers through the
    get_store dependency. Each helper runs its statement on its own
    connection; there is no transaction spanning several calls.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "Store":
        return cls(create_engine(database_url, echo=echo))

    async def create_all(self, metadata: MetaData) -> None:
        """Create missing tables. Existing tables are left untouched."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def run(self, statement: Executable) -> RunResult:
        """
        Execute a write statement and commit it.

        Raises:
            StoreConstraintError: the store rejected the statement
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                last_id = result.lastrowid if result.is_insert else None
                return RunResult(last_id=last_id, row_count=result.rowcount)
        except DRIVER_ERRORS as exc:
            logger.warning("Write rejected by store: %s", _driver_message(exc))
            raise StoreConstraintError(_driver_message(exc)) from exc

    async def fetch_all(self, statement: Executable) -> List[Dict[str, Any]]:
        """Execute a query and return every row as a dict."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                return [dict(row) for row in result.mappings().all()]
        except DRIVER_ERRORS as exc:
            raise StoreError() from exc

    async def fetch_one(self, statement: Executable) -> Optional[Dict[str, Any]]:
        """Execute a query and return the first row as a dict, or None."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                row = result.mappings().first()
                return dict(row) if row is not None else None
        except DRIVER_ERRORS as exc:
            raise StoreError() from exc

    async def dispose(self) -> None:
        await self.engine.dispose()
