"""
Customer API endpoints.

Plain CRUD over the customers table. Updates and deletes do not check
that the row exists, and deleting a customer leaves its transactions.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import select, insert, update, delete
from backoffice.app.core.dependencies import get_current_admin, get_store
from backoffice.app.db.store import Store
from backoffice.app.models.customer import Customer
from backoffice.app.schemas.common import CreatedResponse, OkResponse
from backoffice.app.schemas.customer import CustomerWrite, CustomerListResponse

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    dependencies=[Depends(get_current_admin)]
)


@router.get("", response_model=CustomerListResponse)
async def list_customers(store: Store = Depends(get_store)):
    """List all customers, most recently created first."""
    rows = await store.fetch_all(
        select(Customer.__table__).order_by(Customer.id.desc())
    )
    return {"customers": rows}


@router.post("", response_model=CreatedResponse)
async def create_customer(
    customer_data: CustomerWrite,
    store: Store = Depends(get_store)
):
    """
    Create a customer.

    A duplicate email is rejected by the store and reported as 400.
    """
    result = await store.run(insert(Customer).values(**customer_data.model_dump()))
    return CreatedResponse(id=result.last_id)


@router.put("/{customer_id}", response_model=OkResponse)
async def update_customer(
    customer_id: int,
    customer_data: CustomerWrite,
    store: Store = Depends(get_store)
):
    """Overwrite name, email, phone and note of a customer."""
    await store.run(
        update(Customer)
        .where(Customer.id == customer_id)
        .values(**customer_data.model_dump())
    )
    return OkResponse()


@router.delete("/{customer_id}", response_model=OkResponse)
async def delete_customer(
    customer_id: int,
    store: Store = Depends(get_store)
):
    await store.run(delete(Customer).where(Customer.id == customer_id))
    return OkResponse()
