"""Integration tests for Points API endpoints"""

import pytest
from httpx import AsyncClient

SPEND_URL = "/api/points/spend"

REFERENCE_TRANSACTIONS = [
    {"payer": "DANNON", "points": 300, "timestamp": "2020-10-31T10:00:00Z"},
    {"payer": "UNILEVER", "points": 200, "timestamp": "2020-10-31T11:00:00Z"},
    {"payer": "DANNON", "points": -200, "timestamp": "2020-10-31T15:00:00Z"},
    {"payer": "MILLER COORS", "points": 10000, "timestamp": "2020-11-01T14:00:00Z"},
    {"payer": "DANNON", "points": 1000, "timestamp": "2020-11-02T14:00:00Z"},
]


class TestPointsAPIIntegration:
    """Integration test suite for Points API endpoints"""

    @pytest.mark.asyncio
    async def test_spend_points_success(self, client: AsyncClient):
        """POST /points/spend with enough points returns 200 and balances"""
        # Act
        response = await client.post(
            SPEND_URL, json={"amount": 5000, "transactions": REFERENCE_TRANSACTIONS}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["balances"] == {"MILLER COORS": 5300, "DANNON": 1000, "UNILEVER": 0}
        assert list(data["balances"]) == ["MILLER COORS", "DANNON", "UNILEVER"]
        assert data["total_remaining"] == 6300
        assert data["total_spent"] == 5200

    @pytest.mark.asyncio
    async def test_requests_do_not_share_state(self, client: AsyncClient):
        """Each request builds its own ledger"""
        # Arrange
        payload = {"amount": 5000, "transactions": REFERENCE_TRANSACTIONS}

        # Act
        first = await client.post(SPEND_URL, json=payload)
        second = await client.post(SPEND_URL, json=payload)

        # Assert
        assert first.json()["balances"] == second.json()["balances"]

    @pytest.mark.asyncio
    async def test_spend_points_insufficient(self, client: AsyncClient):
        """POST /points/spend with more than earned returns 402"""
        # Act
        response = await client.post(
            SPEND_URL, json={"amount": 20000, "transactions": REFERENCE_TRANSACTIONS}
        )

        # Assert
        assert response.status_code == 402
        assert response.json()["error"]["code"] == "INSUFFICIENT_POINTS"
        assert response.json()["error"]["message"] == "Not enough points left"

    @pytest.mark.asyncio
    async def test_spend_points_empty_ledger(self, client: AsyncClient):
        """POST /points/spend with no earned points returns 400 EMPTY_LEDGER"""
        # Act
        response = await client.post(SPEND_URL, json={"amount": 10, "transactions": []})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "EMPTY_LEDGER"

    @pytest.mark.asyncio
    async def test_spend_points_validation_error(self, client: AsyncClient):
        """POST /points/spend with a non-positive amount returns 400"""
        # Act
        response = await client.post(
            SPEND_URL, json={"amount": 0, "transactions": REFERENCE_TRANSACTIONS}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_spend_points_rejects_empty_payer(self, client: AsyncClient):
        # Act
        response = await client.post(
            SPEND_URL,
            json={
                "amount": 1,
                "transactions": [{"payer": "", "points": 5, "timestamp": "2020-10-31T10:00:00"}],
            },
        )

        # Assert
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
