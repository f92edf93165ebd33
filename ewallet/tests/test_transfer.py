"""
ewallet/tests/test_transfer.py

Integration tests for /api/transfer: each endpoint is called through the
TestClient and the result is checked against the database state.
"""

from datetime import date
from decimal import Decimal

import pytest

from ewallet.services import transfer as transfer_service
from ewallet import data_generator


def test_get_from(client, test_db, generated_data):
    """
    GET /api/transfer/from/{id} returns as many transfers as the
    database holds with that account on the 'from' side.
    """
    for account_id in generated_data["account_ids"]:
        resp = client.get(f"/api/transfer/from/{account_id}")
        assert resp.status_code == 200
        transfer_list = transfer_service.get_transfers_from(account_id, test_db)
        assert len(resp.json()) == len(transfer_list)
        assert all(t["from_account_id"] == account_id for t in resp.json())


def test_get_to(client, test_db, generated_data):
    for account_id in generated_data["account_ids"]:
        resp = client.get(f"/api/transfer/to/{account_id}")
        assert resp.status_code == 200
        transfer_list = transfer_service.get_transfers_to(account_id, test_db)
        assert len(resp.json()) == len(transfer_list)


def test_get_from_unknown_account_is_empty(client, generated_data):
    resp = client.get("/api/transfer/from/999999")
    assert resp.status_code == 200
    assert resp.json() == []


def test_add_transfer(client, test_db, generated_data):
    """
    POST /api/transfer stores the transfer.
    """
    account_ids = generated_data["account_ids"]
    body = data_generator.generate_transfer_create(account_ids[0], account_ids[1])
    resp = client.post("/api/transfer/", json=body.model_dump(mode="json"))
    assert resp.status_code == 200, resp.text

    created = resp.json()
    assert transfer_service.exists_by_id(created["id"], test_db)
    assert created["from_account_id"] == account_ids[0]
    assert created["to_account_id"] == account_ids[1]
    assert Decimal(created["value"]) == body.value


def test_add_transfer_to_same_account_rejected(client, generated_data):
    account_id = generated_data["account_ids"][0]
    body = data_generator.generate_transfer_create(account_id, account_id)
    resp = client.post("/api/transfer/", json=body.model_dump(mode="json"))
    assert resp.status_code == 400


def test_add_transfer_unknown_account(client, generated_data):
    body = data_generator.generate_transfer_create(generated_data["account_ids"][0], 999999)
    resp = client.post("/api/transfer/", json=body.model_dump(mode="json"))
    assert resp.status_code == 404


def test_add_transfer_rejects_non_positive_value(client, generated_data):
    account_ids = generated_data["account_ids"]
    body = data_generator.generate_transfer_create(account_ids[0], account_ids[1]).model_dump(mode="json")
    body["value"] = "0"
    resp = client.post("/api/transfer/", json=body)
    assert resp.status_code == 422


@pytest.mark.parametrize("value", ["1E-7", "1E+20"])
def test_add_transfer_rejects_exponent_values(client, test_db, generated_data, value):
    account_ids = generated_data["account_ids"]
    before = len(transfer_service.get_transfers_from(account_ids[0], test_db))

    body = data_generator.generate_transfer_create(account_ids[0], account_ids[1]).model_dump(mode="json")
    body["value"] = value
    resp = client.post("/api/transfer/", json=body)
    assert resp.status_code == 422

    assert len(transfer_service.get_transfers_from(account_ids[0], test_db)) == before
    assert client.get(f"/api/transfer/from/{account_ids[0]}").status_code == 200


def test_update_transfer(client, test_db, generated_data):
    """
    PUT /api/transfer/{id} overwrites note, value and date; the stored row reflects each.
    """
    note = "testNote"
    transfer = transfer_service.get_transfers_from(generated_data["account_ids"][0], test_db)[0]
    body = data_generator.generate_transfer_update(transfer)
    body.note = note
    body.value = Decimal("1234.56")
    body.date = date(2020, 1, 1)

    resp = client.put(f"/api/transfer/{transfer.id}", json=body.model_dump(mode="json"))
    assert resp.status_code == 200, resp.text

    test_db.expire_all()
    stored = transfer_service.get_transfer_by_id(transfer.id, test_db)
    assert stored.note == note
    assert stored.value == Decimal("1234.56")
    assert stored.date == date(2020, 1, 1)
    assert stored.from_account_id == transfer.from_account_id


def test_update_unknown_transfer(client, test_db, generated_data):
    transfer = transfer_service.get_transfers_from(generated_data["account_ids"][0], test_db)[0]
    body = data_generator.generate_transfer_update(transfer)
    resp = client.put("/api/transfer/999999", json=body.model_dump(mode="json"))
    assert resp.status_code == 404


def test_delete_transfer(client, test_db, generated_data):
    """
    DELETE /api/transfer/{id} removes the transfer.
    """
    transfer_id = transfer_service.get_transfers_from(generated_data["account_ids"][0], test_db)[0].id
    resp = client.delete(f"/api/transfer/{transfer_id}")
    assert resp.status_code == 204

    assert not transfer_service.exists_by_id(transfer_id, test_db)
    assert client.delete(f"/api/transfer/{transfer_id}").status_code == 404
