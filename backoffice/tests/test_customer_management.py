"""
Integration tests for Customer Management.
"""

import re

import pytest
from sqlalchemy import select, func

from backoffice.app.models.customer import Customer
from backoffice.app.models.transaction import Transaction


async def create_customer(client, headers, **fields):
    payload = {"name": "Somchai", "email": "somchai@example.com", "phone": "0812345678", "note": ""}
    payload.update(fields)
    response = await client.post("/api/customers", json=payload, headers=headers)
    assert response.status_code == 200
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_and_list_customers_newest_first(client, auth_headers):
    ids = [
        await create_customer(client, auth_headers, name=f"Customer {i}", email=f"c{i}@example.com")
        for i in range(3)
    ]

    response = await client.get("/api/customers", headers=auth_headers)
    assert response.status_code == 200
    customers = response.json()["customers"]
    assert [c["id"] for c in customers] == sorted(ids, reverse=True)
    assert customers[0]["name"] == "Customer 2"
    assert customers[0]["created_at"] is not None


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(client, auth_headers, store):
    await create_customer(client, auth_headers, email="dup@example.com")

    response = await client.post(
        "/api/customers",
        json={"name": "Other", "email": "dup@example.com", "phone": "1", "note": ""},
        headers=auth_headers
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "ERR_STORE_CONSTRAINT"
    assert "UNIQUE" in body["message"]

    row = await store.fetch_one(
        select(func.count(Customer.id).label("n")).where(Customer.email == "dup@example.com")
    )
    assert row["n"] == 1


@pytest.mark.asyncio
async def test_update_round_trip(client, auth_headers):
    customer_id = await create_customer(client, auth_headers)

    response = await client.put(
        f"/api/customers/{customer_id}",
        json={"name": "Somchai J.", "email": "new@example.com", "phone": "099", "note": "vip"},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    customers = (await client.get("/api/customers", headers=auth_headers)).json()["customers"]
    assert len(customers) == 1
    assert customers[0]["name"] == "Somchai J."
    assert customers[0]["email"] == "new@example.com"
    assert customers[0]["phone"] == "099"
    assert customers[0]["note"] == "vip"


@pytest.mark.asyncio
async def test_update_overwrites_omitted_fields(client, auth_headers):
    customer_id = await create_customer(client, auth_headers, note="keep me?")

    await client.put(
        f"/api/customers/{customer_id}",
        json={"name": "Only name", "email": "somchai@example.com"},
        headers=auth_headers
    )
    customer = (await client.get("/api/customers", headers=auth_headers)).json()["customers"][0]
    assert customer["note"] is None
    assert customer["phone"] is None


@pytest.mark.asyncio
async def test_update_to_taken_email_is_rejected(client, auth_headers):
    await create_customer(client, auth_headers, email="a@example.com")
    second = await create_customer(client, auth_headers, email="b@example.com")

    response = await client.put(
        f"/api/customers/{second}",
        json={"name": "B", "email": "a@example.com", "phone": "", "note": ""},
        headers=auth_headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_missing_customer_is_a_no_op(client, auth_headers):
    response = await client.put(
        "/api/customers/999",
        json={"name": "Nobody", "email": "nobody@example.com", "phone": "", "note": ""},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_delete_missing_customer_is_a_no_op(client, auth_headers):
    response = await client.delete("/api/customers/12345", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_delete_leaves_transactions_behind(client, auth_headers, store):
    customer_id = await create_customer(client, auth_headers)
    await client.post(
        "/api/transactions",
        json={"customer_id": customer_id, "type": "deposit", "amount": 100},
        headers=auth_headers
    )

    response = await client.delete(f"/api/customers/{customer_id}", headers=auth_headers)
    assert response.status_code == 200
    assert (await client.get("/api/customers", headers=auth_headers)).json()["customers"] == []

    orphans = await store.fetch_all(select(Transaction.__table__).where(Transaction.customer_id == customer_id))
    assert len(orphans) == 1

    listed = (await client.get("/api/transactions", headers=auth_headers)).json()["transactions"]
    assert listed[0]["customer_name"] is None
    assert listed[0]["customer_email"] is None


@pytest.mark.asyncio
async def test_non_numeric_id_is_a_validation_error(client, auth_headers):
    response = await client.delete("/api/customers/abc", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error_code"] == "ERR_VALIDATION"


@pytest.mark.asyncio
async def test_oversized_id_is_a_client_error(client, auth_headers):
    response = await client.delete("/api/customers/99999999999999999999", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error_code"] == "ERR_STORE_CONSTRAINT"

    response = await client.put(
        "/api/customers/99999999999999999999",
        json={"name": "Big", "email": "big@example.com", "phone": "", "note": ""},
        headers=auth_headers
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_created_at_is_store_timestamp_text(client, auth_headers):
    await create_customer(client, auth_headers)

    customer = (await client.get("/api/customers", headers=auth_headers)).json()["customers"][0]
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", customer["created_at"])
