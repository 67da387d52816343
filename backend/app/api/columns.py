"""
Columns API Endpoints

Handles column creation, raw data ingestion, term merging and the
frequency/summary views of a single column.
"""

from fastapi import APIRouter, Response
from typing import List

from ..models.schemas import (
    Column,
    ColumnCreate,
    ColumnDataUpdate,
    ColumnSummary,
    MergeTermsRequest,
    TermFrequency,
)
from ..services.column_service import column_service


router = APIRouter(prefix="/projects/{project_id}/columns", tags=["Columns"])


@router.post("", response_model=Column, status_code=201)
async def create_column(project_id: str, column: ColumnCreate):
    """Add an empty column to a project."""
    return column_service.create_column(project_id, column.name, column.type)


@router.put("/{column_id}/data", response_model=Column)
async def update_column_data(project_id: str, column_id: str, update: ColumnDataUpdate):
    """
    Replace the column's data with values parsed from pasted text.

    Values are separated by commas or newlines. In numeric columns a value
    that is not a number is stored as 0.
    """
    return column_service.ingest_raw_input(project_id, column_id, update.raw_input)


@router.post("/{column_id}/merge", response_model=Column)
async def merge_terms(project_id: str, column_id: str, request: MergeTermsRequest):
    """Merge two or more aliases of a categorical column into one term."""
    return column_service.merge_terms(
        project_id, column_id, request.original_terms, request.merged_term
    )


@router.delete("/{column_id}", status_code=204)
async def delete_column(project_id: str, column_id: str):
    column_service.delete_column(project_id, column_id)
    return Response(status_code=204)


@router.get("/{column_id}/frequencies", response_model=List[TermFrequency])
async def get_column_frequencies(project_id: str, column_id: str):
    """Term frequencies after merges, most frequent first."""
    return column_service.column_frequencies(project_id, column_id)


@router.get("/{column_id}/summary", response_model=ColumnSummary)
async def get_column_summary(project_id: str, column_id: str):
    return column_service.column_summary(project_id, column_id)
