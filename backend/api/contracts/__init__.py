"""
Contract enforcement package.

Provides pydantic param models and the parse_params() boundary helper.
"""

from .pydantic_models import (
    BaseParamsModel,
    PriceByAreaParams,
    PriceTrendsParams,
    MarketVolumeParams,
)
from .validate import parse_params

__all__ = [
    'BaseParamsModel',
    'PriceByAreaParams',
    'PriceTrendsParams',
    'MarketVolumeParams',
    'parse_params',
]
