"""
UI service - Streamlit rendering and display formatting.

The dashboard module is imported directly by the page so that the
formatters stay usable without a running Streamlit script.
"""

from .formatters import format_count, format_number, format_price, format_rating, format_stars

__all__ = [
    'format_count',
    'format_number',
    'format_price',
    'format_rating',
    'format_stars'
]
