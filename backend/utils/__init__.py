"""
Utility modules for the backend.
"""
from .presentation import (
    palette_color,
    border_color,
    format_price,
    format_number,
)

__all__ = [
    'palette_color',
    'border_color',
    'format_price',
    'format_number',
]
