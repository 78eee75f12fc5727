"""
Tests for utils/presentation.py - palette and price formatting.
"""

from constants import PALETTE
from utils.presentation import border_color, format_number, format_price, palette_color


def test_palette_has_ten_translucent_colors():
    assert len(PALETTE) == 10
    assert all(color.startswith("rgba(") and color.endswith("0.8)") for color in PALETTE)


def test_palette_cycles():
    assert palette_color(0) == PALETTE[0]
    assert palette_color(10) == PALETTE[0]
    assert palette_color(13) == PALETTE[3]


def test_border_color_is_opaque():
    assert border_color("rgba(255, 99, 132, 0.8)") == "rgba(255, 99, 132, 1)"


def test_format_price():
    assert format_price(1_234_567) == "$1.2m"
    assert format_price(340_000) == "$340.0k"
    assert format_price(950) == "$950"
    assert format_price(1_000_000) == "$1.0m"


def test_format_number():
    assert format_number(12345) == "12,345"
    assert format_number(12345.0) == "12,345"
    assert format_number(1234.5) == "1,234.50"
