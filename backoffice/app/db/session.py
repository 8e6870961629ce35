"""
Database engine configuration.

This module handles async engine creation using SQLAlchemy with aiosqlite
for the file-backed SQLite store.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import declarative_base

# Create declarative base for models
Base = declarative_base()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for the given database URL.

    SQLite connections are used from the event loop's worker thread,
    so the same-thread check is disabled.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_async_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        future=True,
    )
