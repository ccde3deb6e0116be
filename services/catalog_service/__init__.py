"""
Catalog service - the read-only professional catalog and its search engine.
"""

from .models import Category, Location, Professional, FilterCriteria, CatalogStatistics
from .price_filter import parse_price_bound, matches_price_range
from .search_engine import CatalogSearchEngine, filter_catalog, matches_criteria, matches_query
from .catalog_data import SAMPLE_PROFESSIONALS, load_catalog, load_sample_catalog

__all__ = [
    'Category',
    'Location',
    'Professional',
    'FilterCriteria',
    'CatalogStatistics',
    'parse_price_bound',
    'matches_price_range',
    'CatalogSearchEngine',
    'filter_catalog',
    'matches_criteria',
    'matches_query',
    'SAMPLE_PROFESSIONALS',
    'load_catalog',
    'load_sample_catalog'
]
