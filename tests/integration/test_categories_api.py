"""Integration tests for category suggestion endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_suggest(client: AsyncClient):
    response = await client.post(
        "/api/v1/categories/suggest",
        json={"description": "Monthly groceries", "merchant": "DMart Supermarket"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Groceries"
    assert data["suggestions"][0]["category"] == "Groceries"
    assert data["suggestions"][0]["confidence"] == pytest.approx(60.0)
    assert len(data["suggestions"]) <= 3


@pytest.mark.asyncio
async def test_suggest_empty(client: AsyncClient):
    response = await client.post("/api/v1/categories/suggest", json={})

    assert response.status_code == 200
    assert response.json() == {"category": "Others", "suggestions": []}


@pytest.mark.asyncio
async def test_record_selection_and_accuracy(client: AsyncClient, learning_log):
    response = await client.get("/api/v1/categories/accuracy")
    assert response.json() == {"accuracy": 0.0, "records_count": 0}

    response = await client.post(
        "/api/v1/categories/selections",
        json={"description": "Dinner", "merchant": "Barbeque Nation", "selected_category": "Dining Out"},
    )
    assert response.status_code == 201
    assert response.json() == {"recorded": True, "records_count": 1}
    assert learning_log.records()[0].selected_category == "Dining Out"

    response = await client.get("/api/v1/categories/accuracy")
    assert response.json() == {"accuracy": 85.0, "records_count": 1}


@pytest.mark.asyncio
async def test_record_blank_selection(client: AsyncClient, learning_log):
    response = await client.post(
        "/api/v1/categories/selections",
        json={"description": "x", "merchant": "y", "selected_category": "   "},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "CAT_001"
    assert len(learning_log) == 0


@pytest.mark.asyncio
async def test_record_unknown_selection(client: AsyncClient):
    response = await client.post(
        "/api/v1/categories/selections",
        json={
            "description": "x",
            "merchant": "y",
            "selected_category": "Yachts",
            "known_categories": ["Fuel", "Others"],
        },
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "CAT_002"
