"""
Pydantic models for projects, columns and the derived views built from them.

Columns are a tagged variant discriminated on ``type``: a categorical column
holds strings plus its merge registry, a numeric column holds floats. Records
are frozen; a change always produces a new record via ``model_copy``.
The wire format is camelCase.
"""

import enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError
from pydantic.alias_generators import to_camel


class ColumnType(str, enum.Enum):
    """Declared type of a column's values."""
    CATEGORICAL = "categorical"
    NUMERIC = "numeric"


class ChartKind(str, enum.Enum):
    """Chart suggestions the selector can produce."""
    DISTRIBUTION = "distribution"
    SEQUENCE = "sequence"
    GROUPED_AVERAGE = "grouped_average"
    SCATTER = "scatter"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ─── Stored records ──────────────────────────────────────────────────

class Project(FrozenModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: int  # epoch milliseconds


class _ColumnBase(FrozenModel):
    id: str
    project_id: str
    name: str


class CategoricalColumn(_ColumnBase):
    type: Literal[ColumnType.CATEGORICAL] = ColumnType.CATEGORICAL
    data: List[str] = Field(default_factory=list)
    # raw value -> canonical value
    merges: Dict[str, str] = Field(default_factory=dict)


class NumericColumn(_ColumnBase):
    type: Literal[ColumnType.NUMERIC] = ColumnType.NUMERIC
    data: List[float] = Field(default_factory=list)
    # Always empty; kept so both variants share one wire shape
    merges: Dict[str, str] = Field(default_factory=dict)


Column = Annotated[Union[CategoricalColumn, NumericColumn], Field(discriminator="type")]


class ProjectDetail(Project):
    columns: List[Column] = Field(default_factory=list)


# ─── Requests ────────────────────────────────────────────────────────

def _require_name(value: str) -> str:
    if not value:
        raise PydanticCustomError("name_required", "Name is required")
    return value


class ProjectCreate(CamelModel):
    name: str = Field(..., description="Project name")
    description: Optional[str] = None

    check_name = field_validator("name")(_require_name)


class ColumnCreate(CamelModel):
    name: str = Field(..., description="Column name")
    type: ColumnType

    check_name = field_validator("name")(_require_name)


class ColumnDataUpdate(CamelModel):
    raw_input: str = Field(..., description="Values separated by commas or newlines")


class MergeTermsRequest(CamelModel):
    original_terms: List[str]
    merged_term: str


# ─── Derived views ───────────────────────────────────────────────────

class TermFrequency(CamelModel):
    term: str
    count: int
    percentage: float


class ColumnSummary(CamelModel):
    row_count: int
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None


class SequencePoint(CamelModel):
    index: int
    value: float


class GroupAverage(CamelModel):
    name: str
    avg: float


class ScatterPoint(CamelModel):
    x: float
    y: float


class DistributionChart(CamelModel):
    kind: Literal[ChartKind.DISTRIBUTION] = ChartKind.DISTRIBUTION
    title: str
    column_ids: List[str]
    data: List[TermFrequency]


class SequenceChart(CamelModel):
    kind: Literal[ChartKind.SEQUENCE] = ChartKind.SEQUENCE
    title: str
    column_ids: List[str]
    data: List[SequencePoint]


class GroupedAverageChart(CamelModel):
    kind: Literal[ChartKind.GROUPED_AVERAGE] = ChartKind.GROUPED_AVERAGE
    title: str
    column_ids: List[str]
    data: List[GroupAverage]


class ScatterChart(CamelModel):
    kind: Literal[ChartKind.SCATTER] = ChartKind.SCATTER
    title: str
    column_ids: List[str]
    data: List[ScatterPoint]


Chart = Annotated[
    Union[DistributionChart, SequenceChart, GroupedAverageChart, ScatterChart],
    Field(discriminator="kind"),
]


class ChartSuggestions(CamelModel):
    has_data: bool
    charts: List[Chart] = Field(default_factory=list)
