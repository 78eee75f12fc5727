"""
Chart Service - one function per dashboard chart.

Each function picks its metric definitions from the registry, applies the
configured limits/thresholds, runs the query layer, pivots the rows and
returns the JSON payload the frontend expects. Every function returns
well-formed empty arrays when no rows match.

Raises QueryFailure (from the query layer) on any database error.
"""

import math
from datetime import date
from typing import Any, Dict, List, Optional

from flask import current_app

import constants
from services.aggregation import rank_keys, run_metric
from services.metrics.registry import get_metric
from services.pivot import PivotResult, month_label, to_paired, to_pivot, to_series
from utils.presentation import border_color, palette_color


def _setting(name: str):
    return current_app.config.get(name, getattr(constants, name))


def _rate() -> float:
    return _setting('AED_TO_USD_RATE')


def _series_payload(result) -> Dict[str, Any]:
    return {'labels': result.labels, 'data': result.values}


def build_datasets(pivot: PivotResult) -> List[Dict[str, Any]]:
    """Chart datasets for a pivot, coloured by series index."""
    datasets = []
    for index, series in enumerate(pivot.series):
        color = palette_color(index)
        datasets.append({
            'label': series.name,
            'data': series.values,
            'backgroundColor': color,
            'borderColor': border_color(color),
            'borderWidth': 1,
        })
    return datasets


def year_window(range_preset: Optional[str], today: Optional[date] = None):
    """
    Resolve a market-volume range preset to (after_year, before_year).

    None       -> no bounds beyond MIN_VOLUME_YEAR
    'all'      -> every complete year (current year dropped)
    '10'/'20'/'30' -> the last N complete years
    """
    after_year = _setting('MIN_VOLUME_YEAR')
    if range_preset is None:
        return after_year, None

    current_year = (today or date.today()).year
    last_complete_year = current_year - 1
    years = constants.YEAR_RANGE_PRESETS[range_preset]
    if years is not None:
        after_year = max(after_year, last_complete_year - years)
    return after_year, current_year


# =============================================================================
# SINGLE-SERIES CHARTS
# =============================================================================

def get_property_usages() -> List[str]:
    """Distinct non-empty property usage values, alphabetical."""
    rows = run_metric(get_metric('property_usage_values'))
    return [row.key for row in rows]


def get_price_by_area(property_usage: Optional[str] = None) -> Dict[str, Any]:
    """Average USD price for the top areas, optionally for one usage."""
    request = get_metric('price_by_area').with_changes(
        filter_value=property_usage,
        limit=_setting('PRICE_BY_AREA_LIMIT'),
    )
    return _series_payload(to_series(run_metric(request, _rate())))


def get_price_by_property_type() -> Dict[str, Any]:
    rows = run_metric(get_metric('price_by_property_type'), _rate())
    return _series_payload(to_series(rows))


def get_price_trends(period: str = 'yearly') -> Dict[str, Any]:
    """Average USD price per year ("2021") or month ("Mar 2021")."""
    if period == 'monthly':
        rows = run_metric(get_metric('price_trends_monthly'), _rate())
        result = to_series(rows, label=lambda row: month_label(*row.keys))
    else:
        rows = run_metric(get_metric('price_trends_yearly'), _rate())
        result = to_series(rows)

    payload = _series_payload(result)
    payload['period'] = period
    return payload


def get_market_volume(range_preset: Optional[str] = None, today: Optional[date] = None) -> Dict[str, Any]:
    """Transactions per year, optionally limited to recent complete years."""
    after_year, before_year = year_window(range_preset, today)
    request = get_metric('market_volume').with_changes(
        after_year=after_year,
        before_year=before_year,
    )
    return _series_payload(to_series(run_metric(request), value='count'))


def get_property_usage_distribution() -> Dict[str, Any]:
    rows = run_metric(get_metric('property_usage_distribution'))
    return _series_payload(to_series(rows, value='count'))


def get_room_types() -> Dict[str, Any]:
    rows = run_metric(get_metric('room_types'))
    return _series_payload(to_series(rows, value='count'))


# =============================================================================
# PIVOT CHARTS
# =============================================================================

def get_property_type_distribution() -> Dict[str, Any]:
    """Property type counts per area (areas alphabetical)."""
    pivot = to_pivot(run_metric(get_metric('property_type_distribution')))
    return {
        'labels': pivot.labels,
        'datasets': build_datasets(pivot),
    }


def get_top_areas_property_type_distribution() -> Dict[str, Any]:
    """
    Property type counts for the busiest areas.

    Two sequential queries: rank areas by transaction count, then count
    property types inside those areas. Labels keep the ranking order.
    """
    ranking_request = get_metric('top_areas_ranking').with_changes(
        limit=_setting('TOP_AREAS_LIMIT'),
    )
    top_areas = rank_keys(ranking_request)
    if not top_areas:
        return {'labels': [], 'datasets': [], 'topAreas': []}

    detail_request = get_metric('top_areas_property_types').with_changes(
        outer_keys=tuple(top_areas),
    )
    pivot = to_pivot(run_metric(detail_request), ranking=top_areas)
    return {
        'labels': pivot.labels,
        'datasets': build_datasets(pivot),
        'topAreas': pivot.labels,
    }


# =============================================================================
# PAIRED CHARTS
# =============================================================================

def get_area_price_popularity() -> Dict[str, Any]:
    """
    Heat ranking: average USD price and listing count per area.

    Areas with too few listings are dropped in SQL (HAVING), then the
    remaining areas are ranked by price and truncated.
    """
    request = get_metric('area_price_popularity').with_changes(
        having_min_count=_setting('HEAT_RANKING_MIN_LISTINGS'),
    )
    paired = to_paired(run_metric(request, _rate()), top_k=_setting('HEAT_RANKING_TOP_K'))

    data = []
    for area, avg_price, listings in zip(paired.labels, paired.metric_a, paired.metric_b):
        avg_price = round(avg_price, 2)
        data.append({
            'x': avg_price,
            'y': listings,
            'r': math.sqrt(listings) * 2,
            'area': area,
            'avgPrice': avg_price,
            'totalListings': listings,
        })

    return {'areas': paired.labels, 'data': data}
