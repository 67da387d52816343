"""
Chart Selector

Suggests charts for a project from the shape of its columns. Each rule is
checked independently, so zero to four charts may come back:

1. distribution     - active column is categorical: top terms by frequency
2. sequence         - active column is numeric: values by 1-based position
3. grouped_average  - first categorical + first numeric column: mean per category
4. scatter          - first two numeric columns: positional (x, y) pairs

Only non-empty columns take part. Categorical values are resolved through
the column's merges before anything is counted or grouped.
"""

import logging
import math
from typing import List, Optional, Sequence

import pandas as pd

from ..models.schemas import (
    CategoricalColumn,
    ChartSuggestions,
    Column,
    DistributionChart,
    GroupAverage,
    GroupedAverageChart,
    NumericColumn,
    ScatterChart,
    ScatterPoint,
    SequenceChart,
    SequencePoint,
)
from .frequency import frequencies, resolved_values, top_terms

logger = logging.getLogger("datacanvas.chart_selector")

DEFAULT_TOP_LIMIT = 10


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like JavaScript's Math.round(value * 10**digits) / 10**digits."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def distribution_chart(column: CategoricalColumn, limit: int = DEFAULT_TOP_LIMIT) -> DistributionChart:
    return DistributionChart(
        title=f"{column.name} Distribution",
        column_ids=[column.id],
        data=top_terms(frequencies(column), limit),
    )


def sequence_chart(column: NumericColumn) -> SequenceChart:
    return SequenceChart(
        title=f"{column.name} Trends",
        column_ids=[column.id],
        data=[
            SequencePoint(index=position, value=value)
            for position, value in enumerate(column.data, start=1)
        ],
    )


def grouped_average_chart(
    category_column: CategoricalColumn,
    value_column: NumericColumn,
    limit: int = DEFAULT_TOP_LIMIT,
) -> GroupedAverageChart:
    """Mean of the numeric column per resolved category, highest first."""
    length = min(len(category_column.data), len(value_column.data))
    frame = pd.DataFrame({
        "name": resolved_values(category_column)[:length],
        "value": value_column.data[:length],
    })
    # sort=False keeps groups in first-occurrence order for the stable sort below
    grouped = frame.groupby("name", sort=False)["value"].agg(["sum", "count"])

    groups = [
        GroupAverage(name=name, avg=round_half_up(row["sum"] / row["count"]))
        for name, row in grouped.iterrows()
    ]
    groups.sort(key=lambda group: group.avg, reverse=True)

    return GroupedAverageChart(
        title=f"Average {value_column.name} by {category_column.name}",
        column_ids=[category_column.id, value_column.id],
        data=groups[:limit],
    )


def scatter_chart(x_column: NumericColumn, y_column: NumericColumn) -> ScatterChart:
    return ScatterChart(
        title=f"{x_column.name} vs {y_column.name}",
        column_ids=[x_column.id, y_column.id],
        data=[ScatterPoint(x=x, y=y) for x, y in zip(x_column.data, y_column.data)],
    )


def select_charts(
    columns: Sequence[Column],
    active_column_id: Optional[str] = None,
    limit: int = DEFAULT_TOP_LIMIT,
) -> ChartSuggestions:
    """Build every chart suggestion that applies to the given columns."""
    if all(not column.data for column in columns):
        return ChartSuggestions(has_data=False)

    active = next((c for c in columns if c.id == active_column_id), None)
    categorical = [c for c in columns if isinstance(c, CategoricalColumn) and c.data]
    numeric = [c for c in columns if isinstance(c, NumericColumn) and c.data]

    charts: List = []
    if isinstance(active, CategoricalColumn) and active.data:
        charts.append(distribution_chart(active, limit))
    if isinstance(active, NumericColumn) and active.data:
        charts.append(sequence_chart(active))
    if categorical and numeric:
        charts.append(grouped_average_chart(categorical[0], numeric[0], limit))
    if len(numeric) >= 2:
        charts.append(scatter_chart(numeric[0], numeric[1]))

    logger.debug(
        "Selected %d charts for %d columns: %s",
        len(charts), len(columns), [chart.kind.value for chart in charts],
    )
    return ChartSuggestions(has_data=True, charts=charts)
