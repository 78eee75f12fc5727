"""
Metric Services Package

Declarative metric definitions plus the types shared by the aggregation
layer and the pivot transform.

Usage:
    from services.metrics import get_metric, MetricRequest, QueryFailure
"""

from services.metrics.base import (
    GroupedRow,
    InvalidMetricRequest,
    MetricRequest,
    MissingCategoryPolicy,
    OrderBy,
    QueryFailure,
)
from services.metrics.registry import (
    METRIC_ORDER,
    METRIC_REGISTRY,
    get_metric,
    list_metrics,
)

__all__ = [
    'GroupedRow',
    'InvalidMetricRequest',
    'MetricRequest',
    'MissingCategoryPolicy',
    'OrderBy',
    'QueryFailure',
    'METRIC_ORDER',
    'METRIC_REGISTRY',
    'get_metric',
    'list_metrics',
]
