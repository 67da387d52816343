"""
Shared pytest fixtures for the DataCanvas test suite.
"""

import pytest
import uuid
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from app.main import app
from app.models.schemas import CategoricalColumn, NumericColumn
from app.services.column_service import ColumnService
from app.services.data_store import DataStore, data_store


@pytest.fixture
def data_store_instance() -> DataStore:
    """Provide an empty, isolated DataStore."""
    return DataStore()


@pytest.fixture
def column_service_instance(data_store_instance: DataStore) -> ColumnService:
    """Provide a ColumnService bound to the isolated store."""
    return ColumnService(data_store_instance)


def make_categorical(data, merges=None, name="Country") -> CategoricalColumn:
    return CategoricalColumn(
        id=str(uuid.uuid4()),
        project_id="project-1",
        name=name,
        data=list(data),
        merges=dict(merges or {}),
    )


def make_numeric(data, name="Sales") -> NumericColumn:
    return NumericColumn(
        id=str(uuid.uuid4()),
        project_id="project-1",
        name=name,
        data=list(data),
    )


@pytest.fixture
def country_column() -> CategoricalColumn:
    """Categorical column with a case alias and a single Canada."""
    return make_categorical(["USA", "usa", "USA", "Canada"])


@pytest.fixture
async def test_client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for the FastAPI app, starting from an empty store."""
    data_store.clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    data_store.clear()


@pytest.fixture
async def project_id(test_client: AsyncClient) -> str:
    """Create a project through the API and return its id."""
    response = await test_client.post("/api/projects", json={"name": "Survey"})
    return response.json()["id"]
