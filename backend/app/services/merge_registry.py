"""
Merge Registry

Per-column mapping from a raw categorical value to its canonical value.
Resolution applies a single hop: if a canonical value has been merged again
later, values that pointed at it keep pointing at it.
"""

from typing import Dict, Iterable, Mapping, Optional

from ..core.errors import InvalidMergeRequest

MIN_MERGE_TERMS = 2


class MergeRegistry:
    """Read-only view over a column's merges; registering returns a new registry."""

    def __init__(self, merges: Optional[Mapping[str, str]] = None):
        self._merges: Dict[str, str] = dict(merges or {})

    def resolve(self, raw_value: str) -> str:
        return self._merges.get(raw_value, raw_value)

    def register_merge(self, terms: Iterable[str], target: str) -> "MergeRegistry":
        """Map every term to ``target``, overwriting earlier mappings.

        Raises InvalidMergeRequest when fewer than two distinct terms are
        given; the registry is left untouched in that case.
        """
        distinct = list(dict.fromkeys(terms))
        if len(distinct) < MIN_MERGE_TERMS:
            raise InvalidMergeRequest(
                f"Select at least {MIN_MERGE_TERMS} distinct terms to merge"
            )

        merges = dict(self._merges)
        for term in distinct:
            merges[term] = target
        return MergeRegistry(merges)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._merges)
