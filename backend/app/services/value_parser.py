"""
Value Parser

Turns a block of pasted text into the typed values of a column.
Tokens are separated by any run of commas or newlines.

Numeric tokens are read by their leading numeric prefix ("12kg" -> 12.0).
A token with no numeric prefix is coerced to 0 instead of being rejected;
the coercion is logged and reported back to the caller.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..models.schemas import ColumnType

logger = logging.getLogger("datacanvas.value_parser")

SEPARATOR_RE = re.compile(r"[\n,]+")
NUMERIC_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass
class ParsedValues:
    """Result of parsing raw input for one column."""
    column_type: ColumnType
    values: List[Union[str, float]] = field(default_factory=list)
    coerced_tokens: List[str] = field(default_factory=list)  # numeric tokens replaced by 0

    @property
    def coerced_count(self) -> int:
        return len(self.coerced_tokens)


def split_tokens(raw_input: str) -> List[str]:
    """Split on commas/newlines, strip each token and drop the empty ones."""
    tokens = (token.strip() for token in SEPARATOR_RE.split(raw_input))
    return [token for token in tokens if token]


def to_number(token: str) -> Optional[float]:
    """Read the leading numeric prefix of a token, or None if there is none."""
    match = NUMERIC_PREFIX_RE.match(token)
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse(raw_input: str, column_type: ColumnType) -> ParsedValues:
    """Parse raw text into the values of a column of the given type.

    The result always replaces a column's data; separator-only input yields
    an empty list, which clears the column.
    """
    tokens = split_tokens(raw_input)
    result = ParsedValues(column_type=column_type)

    if column_type == ColumnType.CATEGORICAL:
        result.values = tokens
        return result

    for token in tokens:
        number = to_number(token)
        if number is None:
            result.coerced_tokens.append(token)
            number = 0.0
        result.values.append(number)

    if result.coerced_tokens:
        logger.warning(
            "Coerced %d of %d non-numeric tokens to 0 (e.g. %r)",
            result.coerced_count,
            len(tokens),
            result.coerced_tokens[0],
        )
    return result
