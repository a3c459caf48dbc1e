import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_balance_gateway
from app.main import app
from app.providers.stripe_gateway import ProviderSuccess

BALANCE = {
    "object": "balance",
    "available": [{"amount": 12500, "currency": "usd", "source_types": {"card": 12500}}],
    "pending": [{"amount": 300, "currency": "usd", "source_types": {"card": 300}}],
    "livemode": False,
}

TRANSACTIONS = {
    "object": "list",
    "url": "/v1/balance_transactions",
    "has_more": True,
    "data": [
        {"id": "txn_1", "object": "balance_transaction", "amount": 1000, "currency": "usd", "type": "charge"},
        {"id": "txn_2", "object": "balance_transaction", "amount": -250, "currency": "usd", "type": "refund"},
    ],
}


class FakeGateway:
    """Records calls and replays canned results, or raises ``error`` if set."""

    def __init__(self):
        self.balance_result = ProviderSuccess(BALANCE)
        self.transactions_result = ProviderSuccess(TRANSACTIONS)
        self.error = None
        self.balance_calls = 0
        self.list_calls = []

    def get_balance(self):
        self.balance_calls += 1
        if self.error is not None:
            raise self.error
        return self.balance_result

    def list_balance_transactions(self, options):
        self.list_calls.append(options)
        if self.error is not None:
            raise self.error
        return self.transactions_result


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_balance_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
