"""
Metric Base Module - Shared types for the aggregation layer.

Core components:
- MetricRequest: what to group, filter, order and limit
- GroupedRow: one aggregate result row
- MissingCategoryPolicy: per-metric null/empty category handling
- QueryFailure: typed wrapper for any database error

Usage:
    from services.metrics.base import MetricRequest, GroupedRow, QueryFailure
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from constants import GROUPABLE_COLUMNS, CATEGORY_COLUMNS, DATE_PART_COLUMNS, VALUE_COLUMNS


# =============================================================================
# ERRORS
# =============================================================================

class InvalidMetricRequest(ValueError):
    """Raised when a MetricRequest violates its invariants."""
    pass


class QueryFailure(Exception):
    """
    Raised when an aggregate query cannot be executed.

    The message is safe to return to clients; the underlying database
    error is kept on .cause for server-side logging only.
    """

    def __init__(self, metric: str, cause: Exception):
        super().__init__(f"Query failed for metric '{metric}'")
        self.metric = metric
        self.cause = cause


# =============================================================================
# ENUMS
# =============================================================================

class MissingCategoryPolicy(str, Enum):
    """How rows with a null or empty grouping category are treated."""
    EXCLUDE = 'exclude'
    LABEL_AS_UNKNOWN = 'label_as_unknown'


class OrderBy(str, Enum):
    """
    Result ordering.

    METRIC: average descending (count descending for count-only metrics)
    COUNT:  row count descending
    KEY:    grouping keys ascending
    """
    METRIC = 'metric'
    COUNT = 'count'
    KEY = 'key'


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class MetricRequest:
    """
    Everything needed to run one aggregate query.

    COUNT(*) is always selected; AVG(value_column) is added when
    value_column is set.
    """
    metric: str
    grouping_columns: Tuple[str, ...]
    value_column: Optional[str] = None

    # Equality filter (always a bound parameter)
    filter_column: Optional[str] = None
    filter_value: Optional[Any] = None

    # Restrict the outer grouping key to an externally ranked set
    outer_keys: Optional[Tuple[Any, ...]] = None

    on_missing_category: MissingCategoryPolicy = MissingCategoryPolicy.EXCLUDE
    order_by: OrderBy = OrderBy.METRIC
    limit: Optional[int] = None

    # Row predicates
    positive_values_only: bool = False
    values_required: bool = False
    after_year: Optional[int] = None      # EXTRACT(year) > after_year
    before_year: Optional[int] = None     # EXTRACT(year) < before_year

    # HAVING COUNT(*) > having_min_count
    having_min_count: Optional[int] = None

    # Average is stored in AED and must be converted for display
    currency: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'grouping_columns', tuple(self.grouping_columns))
        if self.outer_keys is not None:
            object.__setattr__(self, 'outer_keys', tuple(self.outer_keys))

        if not self.grouping_columns:
            raise InvalidMetricRequest(f"{self.metric}: grouping_columns must not be empty")
        if len(self.grouping_columns) > 2:
            raise InvalidMetricRequest(
                f"{self.metric}: at most 2 grouping columns, got {len(self.grouping_columns)}"
            )
        for column in self.grouping_columns:
            if column not in GROUPABLE_COLUMNS:
                raise InvalidMetricRequest(f"{self.metric}: column {column!r} is not groupable")

        if self.value_column is not None and self.value_column not in VALUE_COLUMNS:
            raise InvalidMetricRequest(f"{self.metric}: column {self.value_column!r} cannot be averaged")

        if self.filter_column is not None and self.filter_column not in CATEGORY_COLUMNS:
            raise InvalidMetricRequest(f"{self.metric}: column {self.filter_column!r} cannot be filtered")

        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit <= 0:
                raise InvalidMetricRequest(f"{self.metric}: limit must be a positive integer, got {self.limit!r}")

        value_flags = self.positive_values_only or self.values_required or self.currency
        if value_flags and self.value_column is None:
            raise InvalidMetricRequest(f"{self.metric}: value predicates require value_column")

    @property
    def has_date_key(self) -> bool:
        return any(column in DATE_PART_COLUMNS for column in self.grouping_columns)

    def with_changes(self, **changes) -> 'MetricRequest':
        """Return a copy with the given fields replaced (re-validated)."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class GroupedRow:
    """One aggregate row: key values plus count and optional average."""
    keys: Tuple[Any, ...]
    count: int
    average: Optional[float] = None

    @property
    def key(self) -> Any:
        return self.keys[0]
