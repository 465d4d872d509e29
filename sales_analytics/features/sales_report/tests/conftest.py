"""Test fixtures for the sales report module."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from sales_analytics.core.config import get_settings
from sales_analytics.features.sales_report.strategies import AnalysisOptions, default_options
from sales_analytics.main import app


def make_seller(seller_id: str, first_name: str = "Test", last_name: str = "Seller") -> dict[str, Any]:
    """Build a raw seller entry."""
    return {"id": seller_id, "first_name": first_name, "last_name": last_name}


def make_item(
    sku: str,
    quantity: int = 1,
    sale_price: float = 100.0,
    discount: float = 0,
) -> dict[str, Any]:
    """Build a raw line item."""
    return {"sku": sku, "discount": discount, "quantity": quantity, "sale_price": sale_price}


def make_record(seller_id: str, *items: dict[str, Any]) -> dict[str, Any]:
    """Build a raw purchase record."""
    return {
        "seller_id": seller_id,
        "items": list(items),
        "total_amount": 0,
        "total_discount": 0,
    }


@pytest.fixture
def sample_dataset() -> dict[str, Any]:
    """Three sellers, three products, three receipts.

    Expected totals:
        seller_1: revenue 265.00, cost 130.00, profit 135.00, 2 receipts
        seller_2: revenue 427.50, cost 300.00, profit 127.50, 1 receipt
        seller_3: no receipts
    """
    return {
        "customers": [{"id": "customer_1", "first_name": "Ivan", "last_name": "Petrov"}],
        "sellers": [
            make_seller("seller_1", "Alexey", "Smirnov"),
            make_seller("seller_2", "Maria", "Ivanova"),
            make_seller("seller_3", "Dmitry", "Kuznetsov"),
        ],
        "products": [
            {"sku": "SKU_001", "purchase_price": 40.0, "sale_price": 100.0},
            {"sku": "SKU_002", "purchase_price": 12.5, "sale_price": 25.0},
            {"sku": "SKU_003", "purchase_price": 300.0, "sale_price": 450.0},
        ],
        "purchase_records": [
            make_record(
                "seller_1",
                make_item("SKU_001", quantity=2, sale_price=100.0, discount=10),
                make_item("SKU_002", quantity=1, sale_price=25.0),
            ),
            make_record(
                "seller_2",
                make_item("SKU_003", quantity=1, sale_price=450.0, discount=5),
            ),
            make_record(
                "seller_1",
                make_item("SKU_002", quantity=3, sale_price=25.0, discount=20),
            ),
        ],
    }


@pytest.fixture
def equal_profit_dataset() -> dict[str, Any]:
    """Five sellers with a profit of 1000.00 each."""
    seller_ids = [f"seller_{i}" for i in range(1, 6)]
    return {
        "sellers": [make_seller(seller_id) for seller_id in seller_ids],
        "products": [{"sku": "FREE", "purchase_price": 0, "sale_price": 1000}],
        "purchase_records": [
            make_record(seller_id, make_item("FREE", quantity=1, sale_price=1000))
            for seller_id in seller_ids
        ],
    }


@pytest.fixture
def options() -> AnalysisOptions:
    """Reference revenue and bonus strategies."""
    return default_options()


@pytest.fixture
def clear_settings_cache():
    """Reset cached settings before and after a test that changes env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
