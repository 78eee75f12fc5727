"""
Pydantic models for chart endpoints that take query params.

Endpoints:
- /price-by-area
- /price-trends
- /market-volume
"""

from typing import Literal, Optional

from pydantic import Field

from .base import BaseParamsModel


class PriceByAreaParams(BaseParamsModel):
    """Params for /price-by-area."""

    property_usage: Optional[str] = Field(
        default=None,
        alias='propertyUsage',
        description="Restrict to one property usage (e.g. Residential)"
    )


class PriceTrendsParams(BaseParamsModel):
    """Params for /price-trends."""

    period: Literal['yearly', 'monthly'] = Field(
        default='yearly',
        description="Trend granularity"
    )


class MarketVolumeParams(BaseParamsModel):
    """Params for /market-volume."""

    year_range: Optional[Literal['all', '10', '20', '30']] = Field(
        default=None,
        alias='range',
        description="Keep all complete years, or the last 10/20/30 complete years"
    )
