"""
Integration tests for the streaks API.

These tests verify:
1. A new streak starts at one day
2. Check-ins continue, reset or leave the streak unchanged
3. The target is signalled on the check-in that reaches it
"""

import json
from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from trakr.infrastructure.repositories import STREAKS_KEY
from trakr.infrastructure.storage import DatabaseRecordStore


async def store_streak(
    store: DatabaseRecordStore,
    current_streak: int,
    last_checked: date,
    target_days: int = 7,
) -> str:
    history = [last_checked - timedelta(days=n) for n in range(current_streak - 1, -1, -1)]
    await store.set(
        STREAKS_KEY,
        json.dumps([
            {
                "id": "s1",
                "name": "No Impulse Spending",
                "currentStreak": current_streak,
                "lastCheckedDate": last_checked.isoformat(),
                "targetDays": target_days,
                "history": [day.isoformat() for day in history],
            }
        ]),
    )
    return "s1"


class TestCreateStreak:
    """Tests for POST /v1/streaks."""

    @pytest.mark.asyncio
    async def test_new_streak_counts_today(self, client: AsyncClient):
        response = await client.post("/v1/streaks", json={"name": "Cook at home", "target_days": 5})

        assert response.status_code == 201
        data = response.json()
        assert data["current_streak"] == 1
        assert data["last_checked_date"] == date.today().isoformat()
        assert data["history"] == [date.today().isoformat()]
        assert data["target_reached"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "target_days": 5},
            {"name": "Walk", "target_days": 0},
            {"name": "Walk", "target_days": 400},
        ],
    )
    async def test_invalid_body_returns_422(self, client: AsyncClient, body: dict):
        response = await client.post("/v1/streaks", json=body)

        assert response.status_code == 422


class TestCheckIn:
    """Tests for POST /v1/streaks/{id}/check-in."""

    @pytest.mark.asyncio
    async def test_same_day_is_unchanged(self, client: AsyncClient):
        created = (await client.post("/v1/streaks", json={"name": "Walk", "target_days": 5})).json()

        response = await client.post(f"/v1/streaks/{created['id']}/check-in")

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "already_checked_in"
        assert data["streak"]["current_streak"] == 1
        assert data["streak"]["history"] == [date.today().isoformat()]

    @pytest.mark.asyncio
    async def test_next_day_continues_and_reaches_target(
        self,
        client: AsyncClient,
        record_store: DatabaseRecordStore,
    ):
        streak_id = await store_streak(record_store, 6, date.today() - timedelta(days=1))

        response = await client.post(f"/v1/streaks/{streak_id}/check-in")

        data = response.json()
        assert data["outcome"] == "continued"
        assert data["gap_days"] == 1
        assert data["target_reached"] is True
        assert data["streak"]["current_streak"] == 7
        assert data["streak"]["history"][-1] == date.today().isoformat()
        assert len(data["streak"]["history"]) == 7

    @pytest.mark.asyncio
    async def test_missed_day_resets(self, client: AsyncClient, record_store: DatabaseRecordStore):
        streak_id = await store_streak(record_store, 4, date.today() - timedelta(days=3))

        response = await client.post(f"/v1/streaks/{streak_id}/check-in")

        data = response.json()
        assert data["outcome"] == "reset"
        assert data["gap_days"] == 3
        assert data["target_reached"] is False
        assert data["streak"]["current_streak"] == 1
        assert len(data["streak"]["history"]) == 5

    @pytest.mark.asyncio
    async def test_check_in_is_persisted(self, client: AsyncClient, record_store: DatabaseRecordStore):
        streak_id = await store_streak(record_store, 2, date.today() - timedelta(days=1))

        await client.post(f"/v1/streaks/{streak_id}/check-in")

        [streak] = (await client.get("/v1/streaks")).json()
        assert streak["current_streak"] == 3
        assert streak["last_checked_date"] == date.today().isoformat()

    @pytest.mark.asyncio
    async def test_missing_streak_returns_404(self, client: AsyncClient):
        response = await client.post("/v1/streaks/missing/check-in")

        assert response.status_code == 404
        assert response.json()["error"] == "STREAK_NOT_FOUND"


class TestDeleteStreak:

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient):
        created = (await client.post("/v1/streaks", json={"name": "Walk", "target_days": 5})).json()

        response = await client.delete(f"/v1/streaks/{created['id']}")

        assert response.status_code == 204
        assert (await client.get("/v1/streaks")).json() == []
