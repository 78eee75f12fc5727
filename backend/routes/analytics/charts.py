"""
Chart Endpoints

One endpoint per dashboard chart. Handlers validate params, delegate to
services.chart_service and wrap the result; they contain no SQL and no
reshaping logic.

Endpoints:
- /property-usage - distinct property usage values (filter dropdown)
- /price-by-area - average price for the top areas
- /price-trends - average price per year or month
- /price-by-property-type - average price per property type
- /market-volume - transactions per year
- /property-usage-distribution - transactions per property usage
- /property-type-distribution - property types per area (stacked)
- /top-areas-property-type-distribution - property types for the busiest areas
- /area-price-popularity - heat ranking (average price + listings)
- /room-types - transactions per room type
"""

from routes.analytics import analytics_bp
from routes.analytics._route_utils import chart_response, route_logger
from api.contracts import (
    parse_params,
    PriceByAreaParams,
    PriceTrendsParams,
    MarketVolumeParams,
)
from services import chart_service
from utils.normalize import ValidationError, validation_error_response

logger = route_logger("charts")


@analytics_bp.route("/property-usage", methods=["GET"])
def property_usage():
    """Distinct non-empty property usage values, alphabetical."""
    return chart_response(logger, "/property-usage", chart_service.get_property_usages)


@analytics_bp.route("/price-by-area", methods=["GET"])
def price_by_area():
    """
    Average price (USD) for the top areas.

    Query params:
      - propertyUsage: optional, e.g. Residential
    """
    try:
        params = parse_params(PriceByAreaParams)
    except ValidationError as e:
        return validation_error_response(e)

    return chart_response(
        logger,
        "/price-by-area",
        lambda: chart_service.get_price_by_area(property_usage=params.property_usage),
        {"propertyUsage": params.property_usage},
    )


@analytics_bp.route("/price-trends", methods=["GET"])
def price_trends():
    """
    Average price (USD) over time.

    Query params:
      - period: yearly (default) or monthly
    """
    try:
        params = parse_params(PriceTrendsParams)
    except ValidationError as e:
        return validation_error_response(e)

    return chart_response(
        logger,
        "/price-trends",
        lambda: chart_service.get_price_trends(period=params.period),
        {"period": params.period},
    )


@analytics_bp.route("/price-by-property-type", methods=["GET"])
def price_by_property_type():
    return chart_response(logger, "/price-by-property-type", chart_service.get_price_by_property_type)


@analytics_bp.route("/market-volume", methods=["GET"])
def market_volume():
    """
    Transactions per year.

    Query params:
      - range: optional; all (complete years only) or 10/20/30 (last N complete years)
    """
    try:
        params = parse_params(MarketVolumeParams)
    except ValidationError as e:
        return validation_error_response(e)

    return chart_response(
        logger,
        "/market-volume",
        lambda: chart_service.get_market_volume(range_preset=params.year_range),
        {"range": params.year_range},
    )


@analytics_bp.route("/property-usage-distribution", methods=["GET"])
def property_usage_distribution():
    return chart_response(
        logger, "/property-usage-distribution", chart_service.get_property_usage_distribution
    )


@analytics_bp.route("/property-type-distribution", methods=["GET"])
def property_type_distribution():
    return chart_response(
        logger, "/property-type-distribution", chart_service.get_property_type_distribution
    )


@analytics_bp.route("/top-areas-property-type-distribution", methods=["GET"])
def top_areas_property_type_distribution():
    return chart_response(
        logger,
        "/top-areas-property-type-distribution",
        chart_service.get_top_areas_property_type_distribution,
    )


@analytics_bp.route("/area-price-popularity", methods=["GET"])
def area_price_popularity():
    return chart_response(logger, "/area-price-popularity", chart_service.get_area_price_popularity)


@analytics_bp.route("/room-types", methods=["GET"])
def room_types():
    return chart_response(logger, "/room-types", chart_service.get_room_types)
