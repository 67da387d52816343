"""
Projects API Endpoints

Handles project management and chart suggestions for a project.
"""

from fastapi import APIRouter, Query, Response
from typing import List, Optional

from ..models.schemas import (
    ChartSuggestions,
    ColumnType,
    Project,
    ProjectCreate,
    ProjectDetail,
)
from ..services.column_service import column_service
from ..services.data_store import data_store


router = APIRouter(prefix="/projects", tags=["Projects"])


def init_demo_project():
    """Seed a demo project when the store is empty."""
    if data_store.list_projects():
        return

    demo = column_service.create_project(
        "Demo Sales Data",
        "Example project with categorical and numeric data",
    )

    region = column_service.create_column(demo.id, "Region", ColumnType.CATEGORICAL)
    column_service.ingest_raw_input(
        demo.id,
        region.id,
        "North, North, South, East, West, North, East, East, West, South, South-East, North-West",
    )

    sales = column_service.create_column(demo.id, "Sales (k$)", ColumnType.NUMERIC)
    column_service.ingest_raw_input(
        demo.id,
        sales.id,
        "120, 150, 90, 200, 110, 130, 210, 190, 115, 95, 80, 140",
    )


@router.get("", response_model=List[Project])
async def list_projects():
    """List all projects, newest first."""
    return data_store.list_projects()


@router.post("", response_model=Project, status_code=201)
async def create_project(project: ProjectCreate):
    """Create a new, empty project."""
    return column_service.create_project(project.name, project.description)


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: str):
    """Get a project together with its columns."""
    return column_service.get_project_detail(project_id)


@router.delete("/{project_id}", status_code=204)
async def delete_project(project_id: str):
    """Delete a project and all its columns."""
    column_service.delete_project(project_id)
    return Response(status_code=204)


@router.get("/{project_id}/charts", response_model=ChartSuggestions)
async def get_chart_suggestions(
    project_id: str,
    active_column_id: Optional[str] = Query(default=None, alias="activeColumnId"),
):
    """Suggest charts for the project's columns."""
    return column_service.project_charts(project_id, active_column_id)
