"""
Column Service

Runs the ingestion, merge and aggregation operations against the data store.
Every write follows the same shape: fetch the column snapshot, compute a new
column value, store it. Missing projects/columns raise NotFoundError.
"""

import logging
from typing import List, Optional

from ..core.config import settings
from ..core.errors import InvalidMergeRequest, NotFoundError
from ..models.schemas import (
    CategoricalColumn,
    ChartSuggestions,
    Column,
    ColumnSummary,
    ColumnType,
    Project,
    ProjectDetail,
    TermFrequency,
)
from .chart_selector import select_charts
from .data_store import DataStore, data_store
from .frequency import frequencies, summarize
from .merge_registry import MergeRegistry
from .value_parser import parse

logger = logging.getLogger("datacanvas.column_service")


class ColumnService:
    """Project/column operations on top of a DataStore."""

    def __init__(self, store: DataStore, top_terms_limit: int = 10):
        self.store = store
        self.top_terms_limit = top_terms_limit

    # ============ Lookups ============

    def get_project(self, project_id: str) -> Project:
        project = self.store.get_project(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    def get_column(self, project_id: str, column_id: str) -> Column:
        """A column that belongs to the given project."""
        column = self.store.get_column(column_id)
        if column is None or column.project_id != project_id:
            raise NotFoundError("Column not found")
        return column

    def get_project_detail(self, project_id: str) -> ProjectDetail:
        project = self.get_project(project_id)
        columns = self.store.get_project_columns(project_id)
        return ProjectDetail(**project.model_dump(), columns=columns)

    # ============ Projects ============

    def create_project(self, name: str, description: Optional[str] = None) -> Project:
        project = self.store.create_project(name, description)
        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    def delete_project(self, project_id: str) -> None:
        self.get_project(project_id)
        self.store.delete_project(project_id)

    # ============ Columns ============

    def create_column(self, project_id: str, name: str, column_type: ColumnType) -> Column:
        self.get_project(project_id)
        column = self.store.create_column(project_id, name, column_type)
        logger.info("Created %s column %s in project %s", column_type.value, column.id, project_id)
        return column

    def delete_column(self, project_id: str, column_id: str) -> None:
        self.get_column(project_id, column_id)
        self.store.delete_column(column_id)

    def ingest_raw_input(self, project_id: str, column_id: str, raw_input: str) -> Column:
        """Replace a column's data with the values parsed from raw text."""
        column = self.get_column(project_id, column_id)
        parsed = parse(raw_input, column.type)

        updated = column.model_copy(update={"data": parsed.values})
        self.store.put_column(updated)

        logger.info(
            "Ingested %d values into column %s (%d coerced to 0)",
            len(parsed.values), column_id, parsed.coerced_count,
        )
        return updated

    def merge_terms(
        self,
        project_id: str,
        column_id: str,
        original_terms: List[str],
        merged_term: str,
    ) -> Column:
        """Register ``original_terms`` as aliases of ``merged_term``."""
        column = self.get_column(project_id, column_id)
        if not isinstance(column, CategoricalColumn):
            raise InvalidMergeRequest("Only categorical columns can be merged")

        registry = MergeRegistry(column.merges).register_merge(original_terms, merged_term)

        updated = column.model_copy(update={"merges": registry.as_dict()})
        self.store.put_column(updated)

        logger.info(
            "Merged %d terms into %r for column %s",
            len(set(original_terms)), merged_term, column_id,
        )
        return updated

    # ============ Derived views ============

    def column_frequencies(self, project_id: str, column_id: str) -> List[TermFrequency]:
        """Term frequencies of a categorical column; numeric columns have none."""
        column = self.get_column(project_id, column_id)
        if not isinstance(column, CategoricalColumn):
            return []
        return frequencies(column)

    def column_summary(self, project_id: str, column_id: str) -> ColumnSummary:
        return summarize(self.get_column(project_id, column_id))

    def project_charts(self, project_id: str, active_column_id: Optional[str] = None) -> ChartSuggestions:
        self.get_project(project_id)
        columns = self.store.get_project_columns(project_id)
        return select_charts(columns, active_column_id, limit=self.top_terms_limit)


column_service = ColumnService(data_store, top_terms_limit=settings.TOP_TERMS_LIMIT)
