"""
Commission report service.

Aggregates approved transactions and scales deposits by the
commission_percent setting. READ-ONLY: nothing is cached or written.
"""

import logging
import re
from datetime import datetime, timezone
from sqlalchemy import select, func

from backoffice.app.db.store import Store
from backoffice.app.models.setting import Setting, COMMISSION_PERCENT_KEY
from backoffice.app.models.transaction import Transaction, TransactionStatus, TransactionType
from backoffice.app.schemas.settings import CommissionSummary

logger = logging.getLogger("backoffice.commission")


# Leading decimal number; trailing text such as "%" is ignored
NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_percent(raw) -> float:
    """
    Interpret a stored percent value by its leading number ("5%" -> 5.0).

    Missing values, or values that do not start with a number, count as 0.
    """
    if raw is None:
        return 0.0
    match = NUMBER_PREFIX.match(str(raw))
    if match is None:
        logger.warning("Ignoring unparsable %s value %r", COMMISSION_PERCENT_KEY, raw)
        return 0.0
    return float(match.group(1))


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-01-31T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CommissionService:

    @staticmethod
    async def approved_total(store: Store, transaction_type: TransactionType) -> float:
        """Sum of amounts of approved transactions of one type (0 when none)."""
        query = select(func.sum(Transaction.amount).label("total")).where(
            Transaction.type == transaction_type.value,
            Transaction.status == TransactionStatus.APPROVED.value
        )
        row = await store.fetch_one(query)
        total = row["total"] if row else None
        return float(total) if total else 0.0

    @staticmethod
    async def get_summary(store: Store) -> CommissionSummary:
        """Compute the commission summary."""

        # 1. Commission percent
        setting = await store.fetch_one(
            select(Setting.value).where(Setting.key == COMMISSION_PERCENT_KEY)
        )
        percent = parse_percent(setting["value"] if setting else None)

        # 2. Approved totals
        total_deposit = await CommissionService.approved_total(store, TransactionType.DEPOSIT)
        total_withdraw = await CommissionService.approved_total(store, TransactionType.WITHDRAW)

        return CommissionSummary(
            percent=percent,
            total_deposit=total_deposit,
            total_withdraw=total_withdraw,
            commission_on_deposits=total_deposit * percent / 100,
            summary_date=utc_timestamp()
        )
