"""
Presentation helpers - colours and number formatting for renderers.

Kept apart from the pivot transform: data shaping never depends on these.
"""

from constants import PALETTE


def palette_color(index: int) -> str:
    """Colour for the series at position `index` (cycles the palette)."""
    return PALETTE[index % len(PALETTE)]


def border_color(color: str) -> str:
    """Opaque variant of a palette colour."""
    return color.replace('0.8)', '1)')


def format_price(price: float) -> str:
    """
    Abbreviate a USD price.

    >>> format_price(1234567)
    '$1.2m'
    >>> format_price(340000)
    '$340.0k'
    >>> format_price(950)
    '$950'
    """
    if price >= 1_000_000:
        return f"${price / 1_000_000:.1f}m"
    if price >= 1_000:
        return f"${price / 1_000:.1f}k"
    return f"${round(price):,}"


def format_number(num: float) -> str:
    """Thousands separators: 12345 -> '12,345'."""
    if float(num).is_integer():
        return f"{int(num):,}"
    return f"{num:,.2f}"
