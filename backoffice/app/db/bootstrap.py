"""
Database bootstrap.

Creates missing tables and seeds the default commission setting and the
default admin account. Every step is safe to run on each startup.
"""

import logging
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from backoffice.app.core.config import settings
from backoffice.app.core.exceptions import AppException, StoreFatalError
from backoffice.app.core.security import get_password_hash
from backoffice.app.db.session import Base
from backoffice.app.db.store import Store

# Register models with Base before create_all
from backoffice.app.models.admin import Admin
from backoffice.app.models.customer import Customer  # noqa: F401
from backoffice.app.models.transaction import Transaction  # noqa: F401
from backoffice.app.models.setting import Setting, COMMISSION_PERCENT_KEY

logger = logging.getLogger("backoffice.bootstrap")


async def seed_commission_setting(store: Store) -> None:
    existing = await store.fetch_one(
        select(Setting.value).where(Setting.key == COMMISSION_PERCENT_KEY)
    )
    if existing is None:
        await store.run(
            insert(Setting).values(key=COMMISSION_PERCENT_KEY, value=settings.default_commission_percent)
        )
        logger.info("Seeded %s=%s", COMMISSION_PERCENT_KEY, settings.default_commission_percent)


async def seed_default_admin(store: Store) -> None:
    existing = await store.fetch_one(
        select(Admin.id).where(Admin.username == settings.default_admin_username)
    )
    if existing is None:
        await store.run(
            insert(Admin).values(
                username=settings.default_admin_username,
                password_hash=get_password_hash(settings.default_admin_password),
                display_name=settings.default_admin_display_name,
            )
        )
        logger.warning(
            "Default admin created: username=%s. Change its password immediately.",
            settings.default_admin_username,
        )


async def init_db(store: Store) -> None:
    """
    Bring the store to a usable state.

    1. Creates the admins, customers, transactions and settings tables if absent.
    2. Seeds commission_percent when missing.
    3. Seeds the default admin when missing.

    Raises:
        StoreFatalError: the store could not be reached or initialized
    """
    try:
        await store.create_all(Base.metadata)
        await seed_commission_setting(store)
        await seed_default_admin(store)
    except (SQLAlchemyError, AppException, OSError) as exc:
        logger.critical("Database initialization failed: %s", exc)
        raise StoreFatalError(f"Database initialization failed: {exc}") from exc
