"""
Metric Registry - one declaration per dashboard metric.

Each entry fixes the grouping, the missing-category policy, ordering and
truncation for that metric, so the policy is visible in one place instead
of being spread across route handlers.

Limits and thresholds that come from configuration are applied by the
chart service with MetricRequest.with_changes().

Usage:
    from services.metrics.registry import get_metric

    request = get_metric('price_by_area').with_changes(limit=20)
"""

from typing import Dict, List

from services.metrics.base import MetricRequest, MissingCategoryPolicy, OrderBy

EXCLUDE = MissingCategoryPolicy.EXCLUDE
LABEL_AS_UNKNOWN = MissingCategoryPolicy.LABEL_AS_UNKNOWN


# =============================================================================
# METRIC DEFINITIONS
# =============================================================================

PROPERTY_USAGE_VALUES = MetricRequest(
    metric='property_usage_values',
    grouping_columns=('property_usage_en',),
    on_missing_category=EXCLUDE,
    order_by=OrderBy.KEY,
)

PRICE_BY_AREA = MetricRequest(
    metric='price_by_area',
    grouping_columns=('area_name_en',),
    value_column='actual_worth',
    filter_column='property_usage_en',
    on_missing_category=EXCLUDE,
    order_by=OrderBy.METRIC,
    positive_values_only=True,
    currency=True,
)

PRICE_BY_PROPERTY_TYPE = MetricRequest(
    metric='price_by_property_type',
    grouping_columns=('property_type_en',),
    value_column='actual_worth',
    on_missing_category=EXCLUDE,
    order_by=OrderBy.METRIC,
    positive_values_only=True,
    currency=True,
)

PRICE_TRENDS_YEARLY = MetricRequest(
    metric='price_trends_yearly',
    grouping_columns=('year',),
    value_column='actual_worth',
    on_missing_category=EXCLUDE,
    order_by=OrderBy.KEY,
    positive_values_only=True,
    currency=True,
)

PRICE_TRENDS_MONTHLY = MetricRequest(
    metric='price_trends_monthly',
    grouping_columns=('year', 'month'),
    value_column='actual_worth',
    on_missing_category=EXCLUDE,
    order_by=OrderBy.KEY,
    positive_values_only=True,
    currency=True,
)

MARKET_VOLUME = MetricRequest(
    metric='market_volume',
    grouping_columns=('year',),
    on_missing_category=EXCLUDE,
    order_by=OrderBy.KEY,
)

PROPERTY_USAGE_DISTRIBUTION = MetricRequest(
    metric='property_usage_distribution',
    grouping_columns=('property_usage_en',),
    on_missing_category=EXCLUDE,
    order_by=OrderBy.COUNT,
)

PROPERTY_TYPE_DISTRIBUTION = MetricRequest(
    metric='property_type_distribution',
    grouping_columns=('area_name_en', 'property_type_en'),
    on_missing_category=LABEL_AS_UNKNOWN,
    order_by=OrderBy.KEY,
)

TOP_AREAS_RANKING = MetricRequest(
    metric='top_areas_ranking',
    grouping_columns=('area_name_en',),
    on_missing_category=EXCLUDE,
    order_by=OrderBy.COUNT,
)

TOP_AREAS_PROPERTY_TYPES = MetricRequest(
    metric='top_areas_property_types',
    grouping_columns=('area_name_en', 'property_type_en'),
    on_missing_category=LABEL_AS_UNKNOWN,
    order_by=OrderBy.KEY,
)

AREA_PRICE_POPULARITY = MetricRequest(
    metric='area_price_popularity',
    grouping_columns=('area_name_en',),
    value_column='actual_worth',
    on_missing_category=LABEL_AS_UNKNOWN,
    order_by=OrderBy.METRIC,
    values_required=True,
    currency=True,
)

ROOM_TYPES = MetricRequest(
    metric='room_types',
    grouping_columns=('rooms_en',),
    on_missing_category=EXCLUDE,
    order_by=OrderBy.COUNT,
)


# =============================================================================
# REGISTRY
# =============================================================================

# Explicit order - the CLI lists metrics in this order
METRIC_ORDER = [
    'property_usage_values',
    'price_by_area',
    'price_by_property_type',
    'price_trends_yearly',
    'price_trends_monthly',
    'market_volume',
    'property_usage_distribution',
    'property_type_distribution',
    'top_areas_ranking',
    'top_areas_property_types',
    'area_price_popularity',
    'room_types',
]

METRIC_REGISTRY: Dict[str, MetricRequest] = {
    definition.metric: definition
    for definition in (
        PROPERTY_USAGE_VALUES,
        PRICE_BY_AREA,
        PRICE_BY_PROPERTY_TYPE,
        PRICE_TRENDS_YEARLY,
        PRICE_TRENDS_MONTHLY,
        MARKET_VOLUME,
        PROPERTY_USAGE_DISTRIBUTION,
        PROPERTY_TYPE_DISTRIBUTION,
        TOP_AREAS_RANKING,
        TOP_AREAS_PROPERTY_TYPES,
        AREA_PRICE_POPULARITY,
        ROOM_TYPES,
    )
}


def get_metric(metric_id: str) -> MetricRequest:
    """Look up a metric definition by id. Raises KeyError if unknown."""
    return METRIC_REGISTRY[metric_id]


def list_metrics() -> List[MetricRequest]:
    """All registered metrics in display order."""
    return [METRIC_REGISTRY[metric_id] for metric_id in METRIC_ORDER]
