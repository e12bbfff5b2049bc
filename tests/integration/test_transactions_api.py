"""
Integration tests for the transactions API.

These tests verify:
1. Recording and deleting transactions moves wallet balances
2. Listing filters and ordering
3. Validation errors and not-found responses
4. Stored records with zero or negative amounts are served as given
"""

import json
from decimal import Decimal

import pytest
from httpx import AsyncClient

from trakr.infrastructure.storage import DatabaseRecordStore


async def wallet_balance(client: AsyncClient, wallet_id: str) -> Decimal:
    response = await client.get(f"/v1/wallets/{wallet_id}")
    assert response.status_code == 200
    return Decimal(response.json()["balance"])


class TestCreateTransaction:
    """Tests for POST /v1/transactions."""

    @pytest.mark.asyncio
    async def test_create_returns_201(self, client: AsyncClient, grocery_expense: dict):
        response = await client.post("/v1/transactions", json=grocery_expense)

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["amount"]) == 50
        assert data["category"] == "food"
        assert data["category_name"] == "Food & Dining"
        assert data["tags"] == ["essential"]
        assert data["id"]

    @pytest.mark.asyncio
    async def test_expense_lowers_wallet_balance(self, client: AsyncClient, grocery_expense: dict):
        await client.post("/v1/transactions", json=grocery_expense)

        assert await wallet_balance(client, "cash") == 450

    @pytest.mark.asyncio
    async def test_income_raises_wallet_balance(self, client: AsyncClient, salary_income: dict):
        await client.post("/v1/transactions", json=salary_income)

        assert await wallet_balance(client, "bank") == 6000

    @pytest.mark.asyncio
    async def test_unknown_category_is_kept(self, client: AsyncClient, grocery_expense: dict):
        response = await client.post(
            "/v1/transactions",
            json={**grocery_expense, "category": "pets"},
        )

        assert response.status_code == 201
        assert response.json()["category_name"] == "pets"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "override",
        [
            {"amount": 0},
            {"amount": -10},
            {"type": "refund"},
            {"category": "   "},
            {"date": "not-a-date"},
        ],
    )
    async def test_invalid_body_returns_422(
        self,
        client: AsyncClient,
        grocery_expense: dict,
        override: dict,
    ):
        response = await client.post("/v1/transactions", json={**grocery_expense, **override})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_response_has_request_id_header(self, client: AsyncClient, grocery_expense: dict):
        response = await client.post(
            "/v1/transactions",
            json=grocery_expense,
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers.get("X-Request-ID") == "req-123"


class TestListTransactions:
    """Tests for GET /v1/transactions."""

    @pytest.mark.asyncio
    async def test_empty_list(self, client: AsyncClient):
        response = await client.get("/v1/transactions")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_newest_entry_first(
        self,
        client: AsyncClient,
        grocery_expense: dict,
        salary_income: dict,
    ):
        first = (await client.post("/v1/transactions", json=grocery_expense)).json()
        second = (await client.post("/v1/transactions", json=salary_income)).json()

        response = await client.get("/v1/transactions")

        assert [tx["id"] for tx in response.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_filters(
        self,
        client: AsyncClient,
        grocery_expense: dict,
        salary_income: dict,
    ):
        await client.post("/v1/transactions", json=grocery_expense)
        await client.post("/v1/transactions", json=salary_income)
        await client.post(
            "/v1/transactions",
            json={**grocery_expense, "date": "2024-02-20T10:00:00", "category": "shopping"},
        )

        by_type = await client.get("/v1/transactions", params={"type": "income"})
        by_category = await client.get("/v1/transactions", params={"category": "shopping"})
        by_wallet = await client.get("/v1/transactions", params={"wallet_id": "cash"})
        by_date = await client.get(
            "/v1/transactions",
            params={"start": "2024-03-01", "end": "2024-03-31"},
        )

        assert [tx["category"] for tx in by_type.json()] == ["salary"]
        assert [tx["category"] for tx in by_category.json()] == ["shopping"]
        assert len(by_wallet.json()) == 2
        assert sorted(tx["category"] for tx in by_date.json()) == ["food", "salary"]

    @pytest.mark.asyncio
    async def test_unknown_type_filter_returns_422(self, client: AsyncClient):
        response = await client.get("/v1/transactions", params={"type": "refund"})

        assert response.status_code == 422


class TestGetAndDeleteTransaction:
    """Tests for GET and DELETE /v1/transactions/{id}."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, client: AsyncClient, grocery_expense: dict):
        created = (await client.post("/v1/transactions", json=grocery_expense)).json()

        response = await client.get(f"/v1/transactions/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_delete_reverts_wallet_balance(self, client: AsyncClient, grocery_expense: dict):
        created = (await client.post("/v1/transactions", json=grocery_expense)).json()

        response = await client.delete(f"/v1/transactions/{created['id']}")

        assert response.status_code == 204
        assert await wallet_balance(client, "cash") == 500
        assert (await client.get("/v1/transactions")).json() == []

    @pytest.mark.asyncio
    async def test_missing_transaction_returns_404(self, client: AsyncClient):
        get_response = await client.get("/v1/transactions/missing")
        delete_response = await client.delete("/v1/transactions/missing")

        assert get_response.status_code == 404
        assert get_response.json()["error"] == "TRANSACTION_NOT_FOUND"
        assert delete_response.status_code == 404


class TestStoredNonPositiveAmounts:
    """Stored records are served as given even when the entry rules would reject them."""

    @staticmethod
    def stored_expense(tx_id: str, amount: str) -> dict:
        return {
            "id": tx_id,
            "amount": amount,
            "date": "2024-03-12T10:00:00",
            "category": "food",
            "type": "expense",
            "paymentMethod": "Cash",
            "tags": [],
            "walletId": None,
        }

    @pytest.mark.asyncio
    async def test_zero_amount_is_listed(
        self,
        client: AsyncClient,
        record_store: DatabaseRecordStore,
    ):
        await record_store.set("transactions", json.dumps([self.stored_expense("z", "0")]))

        response = await client.get("/v1/transactions")

        assert response.status_code == 200
        [transaction] = response.json()
        assert transaction["id"] == "z"
        assert Decimal(transaction["amount"]) == 0

    @pytest.mark.asyncio
    async def test_negative_total_reaches_summary_and_budgets(
        self,
        client: AsyncClient,
        record_store: DatabaseRecordStore,
    ):
        await record_store.set(
            "transactions",
            json.dumps([
                self.stored_expense("refund", "-30"),
                self.stored_expense("z", "0"),
            ]),
        )
        await client.post(
            "/v1/budgets",
            json={
                "category": "food",
                "amount": 200,
                "period": "monthly",
                "start_date": "2024-03-01",
            },
        )

        summary = await client.get("/v1/summary")
        budgets = await client.get("/v1/budgets")

        assert summary.status_code == 200
        assert Decimal(summary.json()["total_expense"]) == -30
        assert summary.json()["most_spent_category"]["name"] == "None"

        assert budgets.status_code == 200
        progress = budgets.json()[0]["progress"]
        assert Decimal(progress["total_spent"]) == -30
        assert Decimal(progress["remaining"]) == 230
        assert progress["over_budget"] is False
