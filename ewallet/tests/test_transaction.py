"""
ewallet/tests/test_transaction.py

Integration tests for /api/transaction.
"""

from datetime import date
from decimal import Decimal

import pytest

from ewallet.services import transaction as tx_service
from ewallet import data_generator


def test_get_by_account(client, test_db, generated_data):
    """
    GET /api/transaction/{user}/{account} matches the per-account query.
    """
    user_id = generated_data["user_id"]
    for account_id in generated_data["account_ids"]:
        resp = client.get(f"/api/transaction/{user_id}/{account_id}")
        assert resp.status_code == 200
        expected = tx_service.get_transactions_by_account_id(account_id, test_db)
        assert len(resp.json()) == len(expected)
        assert {t["id"] for t in resp.json()} == {t.id for t in expected}


def test_get_all_accounts_of_user(client, test_db, generated_data):
    """
    account_id=0 lists the transactions of every account the user owns.
    """
    user_id = generated_data["user_id"]
    resp = client.get(f"/api/transaction/{user_id}/0")
    assert resp.status_code == 200

    expected = tx_service.get_transactions_by_user_id(user_id, test_db)
    per_account = sum(
        len(tx_service.get_transactions_by_account_id(a, test_db))
        for a in generated_data["account_ids"]
    )
    assert len(resp.json()) == len(expected) == per_account


def test_get_unknown_user_is_empty(client, generated_data):
    resp = client.get("/api/transaction/999999/0")
    assert resp.status_code == 200
    assert resp.json() == []


def test_add_transaction(client, test_db, generated_data):
    account_id = generated_data["account_ids"][0]
    body = data_generator.generate_transaction_create(account_id)
    resp = client.post("/api/transaction/", json=body.model_dump(mode="json"))
    assert resp.status_code == 200, resp.text

    created = resp.json()
    assert tx_service.exists_by_id(created["id"], test_db)
    assert created["account_id"] == account_id
    assert Decimal(created["value"]) == Decimal("-42.50")

    fetched = client.get(f"/api/transaction/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["category"] == "Food"


def test_add_transaction_unknown_account(client, generated_data):
    body = data_generator.generate_transaction_create(999999)
    resp = client.post("/api/transaction/", json=body.model_dump(mode="json"))
    assert resp.status_code == 404


def test_add_transaction_rejects_three_decimals(client, generated_data):
    body = data_generator.generate_transaction_create(generated_data["account_ids"][0])
    payload = body.model_dump(mode="json")
    payload["value"] = "1.005"
    resp = client.post("/api/transaction/", json=payload)
    assert resp.status_code == 422


@pytest.mark.parametrize("value", ["1E-7", "1E+20", "NaN", "Infinity"])
def test_add_transaction_rejects_exponent_and_non_finite_values(client, test_db, generated_data, value):
    """
    Exponent notation is held to the same 2-decimal / 18-digit limits,
    nothing is stored and listing the user's transactions keeps working.
    """
    user_id = generated_data["user_id"]
    before = len(tx_service.get_transactions_by_user_id(user_id, test_db))

    payload = data_generator.generate_transaction_create(generated_data["account_ids"][0]).model_dump(mode="json")
    payload["value"] = value
    resp = client.post("/api/transaction/", json=payload)
    assert resp.status_code == 422

    assert len(tx_service.get_transactions_by_user_id(user_id, test_db)) == before
    assert client.get(f"/api/transaction/{user_id}/0").status_code == 200


def test_update_transaction(client, test_db, generated_data):
    """
    PUT copies category, date, note and value; the account stays put.
    """
    account_id = generated_data["account_ids"][1]
    tx = tx_service.get_transactions_by_account_id(account_id, test_db)[0]
    body = data_generator.generate_transaction_update(tx)
    body.category = "Health"
    body.date = date(2020, 1, 1)
    body.note = "testNote"
    body.value = Decimal("-987.65")

    resp = client.put(f"/api/transaction/{tx.id}", json=body.model_dump(mode="json"))
    assert resp.status_code == 200, resp.text

    test_db.expire_all()
    stored = tx_service.get_transaction_by_id(tx.id, test_db)
    assert stored.category == "Health"
    assert stored.note == "testNote"
    assert stored.value == Decimal("-987.65")
    assert stored.date == date(2020, 1, 1)
    assert stored.account_id == account_id


def test_update_unknown_transaction(client, test_db, generated_data):
    tx = tx_service.get_transactions_by_account_id(generated_data["account_ids"][0], test_db)[0]
    body = data_generator.generate_transaction_update(tx)
    resp = client.put("/api/transaction/999999", json=body.model_dump(mode="json"))
    assert resp.status_code == 404


def test_delete_transaction(client, test_db, generated_data):
    tx_id = tx_service.get_transactions_by_account_id(generated_data["account_ids"][0], test_db)[0].id
    resp = client.delete(f"/api/transaction/{tx_id}")
    assert resp.status_code == 204

    assert not tx_service.exists_by_id(tx_id, test_db)
    assert client.get(f"/api/transaction/{tx_id}").status_code == 404
