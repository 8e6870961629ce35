"""
Transaction API endpoints.

Deposits and withdrawals. Only the status of a transaction changes after
creation; no balance or business rule is applied when it does.
"""

import math
from fastapi import APIRouter, Depends
from sqlalchemy import select, insert, update, delete
from backoffice.app.core.dependencies import get_current_admin, get_store
from backoffice.app.core.exceptions import ValidationError
from backoffice.app.db.store import Store
from backoffice.app.models.customer import Customer
from backoffice.app.models.transaction import Transaction, TransactionStatus
from backoffice.app.schemas.common import CreatedResponse, OkResponse
from backoffice.app.schemas.transaction import (
    TransactionCreate, TransactionStatusUpdate, TransactionListResponse
)

router = APIRouter(
    prefix="/transactions",
    tags=["Transactions"],
    dependencies=[Depends(get_current_admin)]
)


@router.get("", response_model=TransactionListResponse)
async def list_transactions(store: Store = Depends(get_store)):
    """
    List all transactions, newest first, with the owning customer's
    name and email (null when the customer no longer exists).
    """
    query = (
        select(
            Transaction.__table__,
            Customer.name.label("customer_name"),
            Customer.email.label("customer_email")
        )
        .select_from(
            Transaction.__table__.outerjoin(
                Customer.__table__, Transaction.customer_id == Customer.id
            )
        )
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
    )
    rows = await store.fetch_all(query)
    return {"transactions": rows}


@router.post("", response_model=CreatedResponse)
async def create_transaction(
    transaction_data: TransactionCreate,
    store: Store = Depends(get_store)
):
    """
    Record a transaction.

    customer_id, type and amount must be present and non-zero/non-empty
    (a NaN amount counts as missing). Neither the customer nor the
    type/status values are checked.
    """
    amount = transaction_data.amount
    if (
        not transaction_data.customer_id
        or not transaction_data.type
        or not amount
        or math.isnan(amount)
    ):
        raise ValidationError("customer_id, type, amount required")

    result = await store.run(
        insert(Transaction).values(
            customer_id=transaction_data.customer_id,
            type=transaction_data.type,
            amount=transaction_data.amount,
            status=transaction_data.status or TransactionStatus.PENDING.value
        )
    )
    return CreatedResponse(id=result.last_id)


@router.put("/{transaction_id}", response_model=OkResponse)
async def update_transaction_status(
    transaction_id: int,
    status_data: TransactionStatusUpdate,
    store: Store = Depends(get_store)
):
    """Overwrite the status of a transaction."""
    await store.run(
        update(Transaction)
        .where(Transaction.id == transaction_id)
        .values(status=status_data.status)
    )
    return OkResponse()


@router.delete("/{transaction_id}", response_model=OkResponse)
async def delete_transaction(
    transaction_id: int,
    store: Store = Depends(get_store)
):
    await store.run(delete(Transaction).where(Transaction.id == transaction_id))
    return OkResponse()
