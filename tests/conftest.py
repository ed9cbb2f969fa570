from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from src.app import app, get_store
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt
from src.storage.memory import InMemoryReceiptStore

TARGET_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
    ],
    "total": "35.35",
}


@pytest.fixture
def target_payload():
    return copy.deepcopy(TARGET_PAYLOAD)


@pytest.fixture
def target_receipt():
    return Receipt(
        retailer="Target",
        purchase_date="2022-01-01",
        purchase_time="13:01",
        total="35.35",
        items=(ReceiptItem(short_description="Mountain Dew 12PK", price="6.49"),),
    )


@pytest.fixture
def store():
    return InMemoryReceiptStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
