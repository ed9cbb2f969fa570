from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from src.app import app


def test_process_receipt_returns_id_and_stores_points(client, store, target_payload):
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 200
    receipt_id = resp.json()["id"]
    uuid.UUID(receipt_id)
    assert store.get_points(receipt_id) == (12, True)


def test_process_then_lookup(client, target_payload):
    receipt_id = client.post("/receipts/process", json=target_payload).json()["id"]
    resp = client.get(f"/receipts/{receipt_id}/points")
    assert resp.status_code == 200
    assert resp.json() == {"points": 12}


def test_each_submission_gets_a_new_id(client, target_payload):
    first = client.post("/receipts/process", json=target_payload).json()["id"]
    second = client.post("/receipts/process", json=target_payload).json()["id"]
    assert first != second


@pytest.mark.parametrize("body", [b"Invalid JSON", b"", b"[1, 2]", b"\xff\xfe"])
def test_undecodable_payload(client, store, body):
    resp = client.post("/receipts/process", content=body)
    assert resp.status_code == 400
    assert resp.text == "Invalid receipt format. Please verify input."
    assert len(store) == 0


@pytest.mark.parametrize("field,value", [
    ("retailer", 42),
    ("total", 35.35),
    ("items", {"shortDescription": "x", "price": "1.00"}),
    ("items", ["Mountain Dew"]),
])
def test_wrong_field_type_is_a_format_error(client, target_payload, field, value):
    target_payload[field] = value
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert resp.text == "Invalid receipt format. Please verify input."


def test_missing_fields_fail_validation(client, store):
    resp = client.post("/receipts/process", json={"retailer": "Test Retailer"})
    assert resp.status_code == 400
    assert resp.json() == {
        "message": "Validation Failed",
        "errors": [
            "PurchaseDate is required.",
            "PurchaseTime is required.",
            "Total is required.",
            "At least one item is required.",
        ],
    }
    assert len(store) == 0


def test_invalid_fields_fail_validation(client):
    payload = {
        "retailer": "Test Retailer",
        "total": " invalid total",
        "items": [{"shortDescription": "Item 1", "price": " invalid price"}],
    }
    resp = client.post("/receipts/process", json=payload)
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert "Total must be a decimal value with two decimal places." in errors
    assert "Item 1 Price must be a decimal value with two decimal places." in errors


def test_null_fields_count_as_missing(client, target_payload):
    target_payload["retailer"] = None
    target_payload["items"] = None
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert "Retailer is required." in errors
    assert "At least one item is required." in errors


def test_unknown_fields_are_ignored(client, target_payload):
    target_payload["cashier"] = "Sam"
    assert client.post("/receipts/process", json=target_payload).status_code == 200


def test_unknown_receipt_id(client):
    resp = client.get("/receipts/non-existent-id/points")
    assert resp.status_code == 404
    assert resp.text == "Receipt not found."


def test_saved_receipt_id(client, store, target_receipt):
    store.save("test-id", target_receipt, 10)
    resp = client.get("/receipts/test-id/points")
    assert resp.status_code == 200
    assert resp.json() == {"points": 10}


@pytest.mark.parametrize("path", ["/invalid-url", "/receipts/abc", "/receipts/abc/score", "/orders/abc/points"])
def test_malformed_lookup_path(client, store, monkeypatch, path):
    monkeypatch.setattr(store, "get_points", lambda _id: pytest.fail("store consulted"))
    resp = client.get(path)
    assert resp.status_code == 400
    assert resp.text == "Invalid URL format. Use /receipts/{id}/points."


def test_health_reports_stored_count(client, target_payload):
    client.post("/receipts/process", json=target_payload)
    resp = client.get("/health")
    assert resp.json() == {"status": "ok", "receipts": 1}


def test_lifespan_creates_store(target_payload):
    with TestClient(app) as client:
        receipt_id = client.post("/receipts/process", json=target_payload).json()["id"]
        assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 12}


def test_null_body_fails_validation(client, store):
    resp = client.post("/receipts/process", content=b"null")
    assert resp.status_code == 400
    assert resp.json()["errors"] == [
        "Retailer is required.",
        "PurchaseDate is required.",
        "PurchaseTime is required.",
        "Total is required.",
        "At least one item is required.",
    ]
    assert len(store) == 0


def test_null_item_fails_validation(client, target_payload):
    target_payload["items"] = [None]
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert resp.json() == {
        "message": "Validation Failed",
        "errors": [
            "Item 1 is missing a ShortDescription.",
            "Item 1 is missing a Price.",
        ],
    }


def test_non_ascii_description_scores_by_bytes(client, target_payload):
    target_payload["items"] = [{"shortDescription": "Crème", "price": "10.00"}]
    receipt_id = client.post("/receipts/process", json=target_payload).json()["id"]
    # 6 retailer + 2 description + 6 odd day
    assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 14}
