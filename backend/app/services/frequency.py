"""
Frequency Aggregator

Value -> count distributions for categorical columns, computed after merge
resolution, plus a small per-column summary. Nothing here is stored; every
view is derived from the column snapshot it is given.
"""

from typing import Dict, Iterable, List

import pandas as pd

from ..models.schemas import (
    CategoricalColumn,
    Column,
    ColumnSummary,
    NumericColumn,
    TermFrequency,
)
from .merge_registry import MergeRegistry


def resolved_values(column: CategoricalColumn) -> List[str]:
    """The column's values with every alias replaced by its canonical term."""
    registry = MergeRegistry(column.merges)
    return [registry.resolve(value) for value in column.data]


def count_terms(values: Iterable[str]) -> Dict[str, int]:
    # dict keeps first-occurrence order, which the stable sort below relies on
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def frequencies(column: CategoricalColumn) -> List[TermFrequency]:
    """Distinct resolved terms, most frequent first.

    Ties keep the order in which the terms first appear in the data.
    """
    total = len(column.data)
    if total == 0:
        return []

    counts = count_terms(resolved_values(column))
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        TermFrequency(term=term, count=count, percentage=100 * count / total)
        for term, count in ordered
    ]


def top_terms(term_frequencies: List[TermFrequency], limit: int = 10) -> List[TermFrequency]:
    return term_frequencies[:limit]


def summarize(column: Column) -> ColumnSummary:
    """Row count for any column; min/max/mean for non-empty numeric columns."""
    summary = ColumnSummary(row_count=len(column.data))
    if not isinstance(column, NumericColumn) or not column.data:
        return summary

    stats = pd.Series(column.data, dtype="float64").agg(["min", "max", "mean"])
    summary.min = float(stats["min"])
    summary.max = float(stats["max"])
    summary.mean = float(stats["mean"])
    return summary
