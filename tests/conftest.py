from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.models.schemas import Category, Transaction, TransactionType
from main import app


@pytest.fixture
def categories():
    return [
        Category(id=1, name="Ăn uống"),
        Category(id=2, name="Di chuyển"),
        Category(id=3, name="Nhà ở"),
        Category(id=4, name="Lương"),
    ]


@pytest.fixture
def make_tx():
    counter = {"next_id": 1}

    def _make(amount, category_id=1, type_=TransactionType.EXPENSE):
        tx = Transaction(id=counter["next_id"], amount=Decimal(str(amount)), category_id=category_id, type=type_)
        counter["next_id"] += 1
        return tx

    return _make


@pytest.fixture
def fake_client():
    # Stands in for GeminiClient: anything with an async send(prompt)
    client = AsyncMock()
    client.send.return_value = "1. Nấu ăn ở nhà."
    return client


@pytest.fixture(scope="function")
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
