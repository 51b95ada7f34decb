"""Shared test fixtures for aero_erp tests."""

import itertools
from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_now():
    """A fixed normalization time."""
    return datetime(2026, 1, 15, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: TEST-1, TEST-2, ..."""
    counter = itertools.count(1)
    return lambda: f"TEST-{next(counter)}"


@pytest.fixture
def bilingual_row():
    """A spreadsheet row exported with Chinese headers and formatted numbers."""
    return {
        "SKU编码": "A1",
        "中文名称": "蓝牙耳机",
        "售价": "$29.99",
        "库存": "5",
    }


@pytest.fixture
def backup_record():
    """A record as written by the dashboard's own JSON backup."""
    return {
        "id": "PROD-1718000000000",
        "sku": "EB-PRO-01",
        "name": "Wireless Earbuds Pro",
        "description": "ANC earbuds",
        "price": 39.99,
        "currency": "USD",
        "stock": 420,
        "category": "Audio",
        "status": "Active",
        "imageUrl": "https://img.example.com/eb.png",
        "marketplaces": ["Amazon US", "TikTok Shop"],
        "lastUpdated": "2024-05-01T00:00:00.000Z",
        "supplier": "Shenzhen Audio Co.",
        "note": "",
        "unitWeight": 0.12,
        "boxLength": 50,
        "boxWidth": 40,
        "boxHeight": 30,
        "boxWeight": 12,
        "itemsPerBox": 100,
        "restockCartons": 8,
        "inboundId": "FBA17ABCDE",
        "dailySales": 14,
        "financials": {
            "costOfGoods": 45,
            "shippingCost": 1.2,
            "otherCost": 0.3,
            "sellingPrice": 39.99,
            "platformFee": 6,
            "adCost": 4,
        },
        "logistics": {
            "method": "Air",
            "carrier": "DHL",
            "trackingNo": "1234567890",
            "status": "In Transit",
            "shippingRate": 38,
        },
    }


@pytest.fixture
def backup_payload(backup_record, bilingual_row):
    """A wrapped export with metadata next to the product list."""
    return {
        "version": "7.3",
        "exportedAt": "2026-01-01",
        "products": [backup_record, bilingual_row],
    }
