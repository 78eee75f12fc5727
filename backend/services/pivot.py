"""
Series Pivot Transform - GroupedRow list -> chart-ready shapes.

Three shapes:
- SeriesResult:  labels + one value per label
- PivotResult:   labels x series matrix (dense, missing cells are 0)
- PairedResult:  labels + two aligned metrics

All functions are pure. They never sort or truncate unless the caller
asks for it explicitly, and they never emit None or NaN values.
Formatting ($1.2m, thousands separators) and colours belong to the
presentation helpers, not here.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from constants import MONTH_ABBREVIATIONS, UNKNOWN_LABEL
from services.metrics.base import GroupedRow


# =============================================================================
# RESULT SHAPES
# =============================================================================

@dataclass(frozen=True)
class SeriesResult:
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class Series:
    name: str
    values: List[float]


@dataclass(frozen=True)
class PivotResult:
    labels: List[str] = field(default_factory=list)
    series: List[Series] = field(default_factory=list)


@dataclass(frozen=True)
class PairedResult:
    labels: List[str] = field(default_factory=list)
    metric_a: List[float] = field(default_factory=list)
    metric_b: List[float] = field(default_factory=list)


# =============================================================================
# HELPERS
# =============================================================================

def to_label(key: Any) -> str:
    """Render a grouping key as a chart label."""
    if key is None or key == '':
        return UNKNOWN_LABEL
    return str(key)


def to_number(value: Any) -> float:
    """Coerce an aggregate to a finite number; None/NaN become 0."""
    if value is None:
        return 0
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        return 0
    return number


def month_label(year: int, month: int) -> str:
    """
    Monthly trend label.

    >>> month_label(2021, 3)
    'Mar 2021'
    """
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {int(year)}"


def _metric(row: GroupedRow, value: str) -> float:
    if value == 'count':
        return row.count
    if value == 'average':
        return to_number(row.average)
    raise ValueError(f"value must be 'count' or 'average', got {value!r}")


# =============================================================================
# SINGLE SERIES
# =============================================================================

def to_series(
    rows: Iterable[GroupedRow],
    value: str = 'average',
    label=None,
    sort_desc: bool = False,
    limit: Optional[int] = None,
) -> SeriesResult:
    """
    Map rows to labels/values, preserving row order.

    Args:
        rows: Grouped rows (already ordered by the query)
        value: 'average' or 'count'
        label: Optional callable(row) -> str; defaults to the first key
        sort_desc: Sort by value descending before truncating
        limit: Keep at most this many rows

    Returns:
        SeriesResult with len(labels) == len(values)
    """
    pairs = [
        (label(row) if label else to_label(row.key), _metric(row, value))
        for row in rows
    ]
    if sort_desc:
        pairs.sort(key=lambda pair: pair[1], reverse=True)
    if limit is not None:
        pairs = pairs[:limit]

    return SeriesResult(
        labels=[p[0] for p in pairs],
        values=[p[1] for p in pairs],
    )


# =============================================================================
# PIVOT TABLE
# =============================================================================

def to_pivot(
    rows: Iterable[GroupedRow],
    ranking: Optional[Sequence[Any]] = None,
) -> PivotResult:
    """
    Pivot two-key count rows into a dense labels x series matrix.

    Labels are the outer keys sorted alphabetically, or exactly the given
    ranking (in its order, including keys with no rows). Series are the
    inner keys sorted alphabetically. Rows whose outer key is not in the
    ranking are dropped.
    """
    cells: Dict[str, Dict[str, float]] = {}
    inner_keys = set()

    allowed = None
    if ranking is not None:
        allowed = {to_label(key) for key in ranking}

    for row in rows:
        outer = to_label(row.keys[0])
        inner = to_label(row.keys[1])
        if allowed is not None and outer not in allowed:
            continue
        bucket = cells.setdefault(outer, {})
        bucket[inner] = bucket.get(inner, 0) + row.count
        inner_keys.add(inner)

    if ranking is not None:
        labels = [to_label(key) for key in ranking]
    else:
        labels = sorted(cells)

    series = [
        Series(
            name=inner,
            values=[cells.get(outer, {}).get(inner, 0) for outer in labels],
        )
        for inner in sorted(inner_keys)
    ]
    return PivotResult(labels=labels, series=series)


# =============================================================================
# PAIRED METRICS
# =============================================================================

def to_paired(
    rows: Iterable[GroupedRow],
    min_count: Optional[int] = None,
    top_k: Optional[int] = None,
) -> PairedResult:
    """
    Pair average (metric_a) with count (metric_b) per key.

    Steps: keep rows with count > min_count, sort by average descending
    (stable), truncate to top_k.
    """
    kept = [row for row in rows if min_count is None or row.count > min_count]
    kept.sort(key=lambda row: to_number(row.average), reverse=True)
    if top_k is not None:
        kept = kept[:top_k]

    return PairedResult(
        labels=[to_label(row.key) for row in kept],
        metric_a=[to_number(row.average) for row in kept],
        metric_b=[row.count for row in kept],
    )
