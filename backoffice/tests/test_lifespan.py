"""
Tests for application startup and shutdown.

The HTTP client fixtures bypass the lifespan, so these enter it directly.
"""

import logging

import pytest
from sqlalchemy import select

from backoffice.app.core.config import settings
from backoffice.app.core.exceptions import StoreFatalError
from backoffice.app.main import app, lifespan
from backoffice.app.models.admin import Admin


@pytest.mark.asyncio
async def test_startup_aborts_when_store_cannot_initialize(tmp_path, monkeypatch):
    monkeypatch.setattr(
        settings, "database_url", f"sqlite+aiosqlite:///{tmp_path}/missing/dir/app.db"
    )

    with pytest.raises(StoreFatalError):
        async with lifespan(app):
            pytest.fail("the service must not start serving")

    assert getattr(app.state, "store", None) is None


@pytest.mark.asyncio
async def test_startup_bootstraps_file_store(tmp_path, monkeypatch):
    db_file = tmp_path / "app.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_file}")

    try:
        async with lifespan(app):
            store = app.state.store
            admin = await store.fetch_one(select(Admin.username))
            assert admin == {"username": settings.default_admin_username}
        assert db_file.exists()
    finally:
        del app.state.store


@pytest.mark.asyncio
async def test_startup_warns_about_generated_secret(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path}/app.db")
    monkeypatch.setattr(settings, "_secret_key_generated", True)

    try:
        with caplog.at_level(logging.WARNING, logger="backoffice"):
            async with lifespan(app):
                pass
    finally:
        del app.state.store

    assert any("SECRET_KEY is not set" in record.getMessage() for record in caplog.records)
