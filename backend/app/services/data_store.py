"""
Data Storage Service

In-memory store for projects and their columns.
Records are frozen pydantic models, so a caller can never mutate a stored
record in place: updates go through ``put_column`` with a new value and the
last writer wins.
"""

import logging
import threading
import time
import uuid
from typing import Dict, List, Optional

from ..models.schemas import (
    CategoricalColumn,
    Column,
    ColumnType,
    NumericColumn,
    Project,
)

logger = logging.getLogger("datacanvas.data_store")


class DataStore:
    """
    Thread-safe in-memory store keyed by id.
    Deleting a project cascades to all of its columns.
    """

    def __init__(self):
        # Thread lock for concurrent access
        self._lock = threading.RLock()

        self._projects: Dict[str, Project] = {}
        self._columns: Dict[str, Column] = {}

    # ============ Project Operations ============

    def create_project(self, name: str, description: Optional[str] = None) -> Project:
        """Create a new project record."""
        with self._lock:
            project = Project(
                id=str(uuid.uuid4()),
                name=name,
                description=description or None,
                created_at=int(time.time() * 1000),
            )
            self._projects[project.id] = project
            return project

    def get_project(self, project_id: str) -> Optional[Project]:
        """Get a project by ID."""
        with self._lock:
            return self._projects.get(project_id)

    def list_projects(self) -> List[Project]:
        """List all projects, newest first."""
        with self._lock:
            # Reversed insertion order first so equal timestamps also list newest first
            projects = list(reversed(list(self._projects.values())))
            return sorted(projects, key=lambda p: p.created_at, reverse=True)

    def delete_project(self, project_id: str) -> bool:
        """Delete a project and all of its columns."""
        with self._lock:
            if project_id not in self._projects:
                return False

            del self._projects[project_id]

            column_ids = [c.id for c in self._columns.values() if c.project_id == project_id]
            for column_id in column_ids:
                del self._columns[column_id]

            logger.info("Deleted project %s with %d columns", project_id, len(column_ids))
            return True

    # ============ Column Operations ============

    def create_column(self, project_id: str, name: str, column_type: ColumnType) -> Column:
        """Create an empty column under a project."""
        with self._lock:
            column_cls = CategoricalColumn if column_type == ColumnType.CATEGORICAL else NumericColumn
            column = column_cls(id=str(uuid.uuid4()), project_id=project_id, name=name)
            self._columns[column.id] = column
            return column

    def get_column(self, column_id: str) -> Optional[Column]:
        """Get a column by ID."""
        with self._lock:
            return self._columns.get(column_id)

    def get_project_columns(self, project_id: str) -> List[Column]:
        """Columns of a project, in creation order."""
        with self._lock:
            return [c for c in self._columns.values() if c.project_id == project_id]

    def put_column(self, column: Column) -> Column:
        """Store a new value for a column, replacing the previous record."""
        with self._lock:
            self._columns[column.id] = column
            return column

    def delete_column(self, column_id: str) -> bool:
        """Delete a single column."""
        with self._lock:
            if column_id not in self._columns:
                return False
            del self._columns[column_id]
            return True

    def clear(self) -> None:
        """Drop every project and column."""
        with self._lock:
            self._projects.clear()
            self._columns.clear()


# Global data store instance
data_store = DataStore()
