"""
Display formatting for professional cards and stat tiles.
"""

import math


def format_stars(rating: float) -> str:
    """One star per rating point, halves rounded up"""
    return "★" * int(math.floor(rating + 0.5))


def format_number(value: float) -> str:
    """Drop a trailing .0 so 5.0 reads as 5"""
    return f"{value:g}"


def format_rating(rating: float, reviews: int) -> str:
    return f"{format_number(rating)} ({reviews} reviews)"


def format_price(price: int, price_unit: str, currency_symbol: str = "₹") -> str:
    return f"{currency_symbol}{price}/{price_unit}"


def format_count(count: int) -> str:
    """Thousands separators for the stat tiles"""
    return f"{count:,}"
