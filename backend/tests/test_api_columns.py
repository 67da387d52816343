"""
Tests for Columns API endpoints.
"""

import pytest
from httpx import AsyncClient


async def create_column(client: AsyncClient, project_id: str, name: str, column_type: str) -> str:
    response = await client.post(
        f"/api/projects/{project_id}/columns", json={"name": name, "type": column_type}
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_column_starts_empty(test_client: AsyncClient, project_id: str):
    """Test POST /api/projects/{id}/columns creates an empty column."""
    response = await test_client.post(
        f"/api/projects/{project_id}/columns", json={"name": "Country", "type": "categorical"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Country"
    assert data["type"] == "categorical"
    assert data["projectId"] == project_id
    assert data["data"] == []
    assert data["merges"] == {}


@pytest.mark.asyncio
async def test_create_column_rejects_unknown_type(test_client: AsyncClient, project_id: str):
    response = await test_client.post(
        f"/api/projects/{project_id}/columns", json={"name": "Date", "type": "temporal"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_column_requires_name(test_client: AsyncClient, project_id: str):
    response = await test_client.post(
        f"/api/projects/{project_id}/columns", json={"name": "", "type": "numeric"}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Name is required"}


@pytest.mark.asyncio
async def test_create_column_in_missing_project(test_client: AsyncClient):
    response = await test_client.post(
        "/api/projects/missing/columns", json={"name": "Country", "type": "categorical"}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_numeric_data(test_client: AsyncClient, project_id: str):
    """Test PUT .../data parses numbers and coerces bad tokens to 0."""
    column_id = await create_column(test_client, project_id, "Sales", "numeric")

    response = await test_client.put(
        f"/api/projects/{project_id}/columns/{column_id}/data",
        json={"rawInput": "12, abc\n7"},
    )

    assert response.status_code == 200
    assert response.json()["data"] == [12, 0, 7]


@pytest.mark.asyncio
async def test_update_data_replaces_previous_values(test_client: AsyncClient, project_id: str):
    column_id = await create_column(test_client, project_id, "Country", "categorical")
    url = f"/api/projects/{project_id}/columns/{column_id}/data"

    await test_client.put(url, json={"rawInput": "USA, Canada"})
    response = await test_client.put(url, json={"rawInput": ""})

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_update_data_for_column_of_other_project(test_client: AsyncClient, project_id: str):
    """Test that a column id used under the wrong project is a 404."""
    column_id = await create_column(test_client, project_id, "Country", "categorical")
    other = (await test_client.post("/api/projects", json={"name": "Other"})).json()["id"]

    response = await test_client.put(
        f"/api/projects/{other}/columns/{column_id}/data", json={"rawInput": "x"}
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Column not found"}


@pytest.mark.asyncio
async def test_merge_and_frequencies(test_client: AsyncClient, project_id: str):
    """Test the Clean Data flow over HTTP."""
    column_id = await create_column(test_client, project_id, "Country", "categorical")
    base = f"/api/projects/{project_id}/columns/{column_id}"
    await test_client.put(f"{base}/data", json={"rawInput": "USA\nusa\nUSA\nCanada"})

    before = (await test_client.get(f"{base}/frequencies")).json()
    assert before == [
        {"term": "USA", "count": 2, "percentage": 50.0},
        {"term": "usa", "count": 1, "percentage": 25.0},
        {"term": "Canada", "count": 1, "percentage": 25.0},
    ]

    response = await test_client.post(
        f"{base}/merge", json={"originalTerms": ["usa", "USA"], "mergedTerm": "USA"}
    )
    assert response.status_code == 200
    assert response.json()["merges"] == {"usa": "USA", "USA": "USA"}

    after = (await test_client.get(f"{base}/frequencies")).json()
    assert after == [
        {"term": "USA", "count": 3, "percentage": 75.0},
        {"term": "Canada", "count": 1, "percentage": 25.0},
    ]


@pytest.mark.asyncio
async def test_merge_single_term_rejected(test_client: AsyncClient, project_id: str):
    """Test that merging fewer than two terms is a 400 and changes nothing."""
    column_id = await create_column(test_client, project_id, "Country", "categorical")
    base = f"/api/projects/{project_id}/columns/{column_id}"

    response = await test_client.post(
        f"{base}/merge", json={"originalTerms": ["usa"], "mergedTerm": "USA"}
    )

    assert response.status_code == 400
    assert "message" in response.json()
    detail = (await test_client.get(f"/api/projects/{project_id}")).json()
    assert detail["columns"][0]["merges"] == {}


@pytest.mark.asyncio
async def test_column_summary(test_client: AsyncClient, project_id: str):
    column_id = await create_column(test_client, project_id, "Sales", "numeric")
    base = f"/api/projects/{project_id}/columns/{column_id}"
    await test_client.put(f"{base}/data", json={"rawInput": "10, 20, 60"})

    response = await test_client.get(f"{base}/summary")

    assert response.status_code == 200
    assert response.json() == {"rowCount": 3, "min": 10.0, "max": 60.0, "mean": 30.0}


@pytest.mark.asyncio
async def test_delete_column(test_client: AsyncClient, project_id: str):
    """Test DELETE removes the column from its project."""
    column_id = await create_column(test_client, project_id, "Country", "categorical")

    response = await test_client.delete(f"/api/projects/{project_id}/columns/{column_id}")
    assert response.status_code == 204

    detail = (await test_client.get(f"/api/projects/{project_id}")).json()
    assert detail["columns"] == []

    again = await test_client.delete(f"/api/projects/{project_id}/columns/{column_id}")
    assert again.status_code == 404
