"""
Pydantic models for API param validation.

Usage:
    from api.contracts.pydantic_models import PriceTrendsParams

    params = PriceTrendsParams.model_validate(request.args.to_dict())
    params.period  # 'yearly' | 'monthly'
"""

from .base import BaseParamsModel
from .charts import PriceByAreaParams, PriceTrendsParams, MarketVolumeParams

__all__ = [
    'BaseParamsModel',
    'PriceByAreaParams',
    'PriceTrendsParams',
    'MarketVolumeParams',
]
