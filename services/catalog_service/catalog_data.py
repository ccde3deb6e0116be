"""
Bundled sample catalog and the loader that turns raw records into Professionals.
"""

from typing import Any, Dict, Iterable, List, Tuple

from pydantic import ValidationError as PydanticValidationError

from services.catalog_service.models import Professional
from services.exceptions import CatalogLoadError
from utils.logging_config import get_logger, log_execution_time

logger = get_logger(__name__)


SAMPLE_PROFESSIONALS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Rajesh Kumar", "category": "Home Services", "subcategory": "Plumber",
     "location": "Mumbai", "price": 400, "priceUnit": "hour", "rating": 4.8, "reviews": 127,
     "image": "https://i.pravatar.cc/400?img=12"},
    {"id": 2, "name": "Priya Sharma", "category": "Technology", "subcategory": "Full Stack Developer",
     "location": "Bangalore", "price": 1500, "priceUnit": "hour", "rating": 4.9, "reviews": 89,
     "image": "https://i.pravatar.cc/400?img=47"},
    {"id": 3, "name": "Anita Desai", "category": "Design & Creative", "subcategory": "Graphic Designer",
     "location": "Delhi", "price": 800, "priceUnit": "hour", "rating": 4.7, "reviews": 64,
     "image": "https://i.pravatar.cc/400?img=45"},
    {"id": 4, "name": "Vikram Singh", "category": "Education", "subcategory": "Mathematics Tutor",
     "location": "Jaipur", "price": 500, "priceUnit": "hour", "rating": 4.6, "reviews": 203,
     "image": "https://i.pravatar.cc/400?img=33"},
    {"id": 5, "name": "Meera Nair", "category": "Health & Wellness", "subcategory": "Yoga Instructor",
     "location": "Chennai", "price": 600, "priceUnit": "session", "rating": 4.9, "reviews": 156,
     "image": "https://i.pravatar.cc/400?img=44"},
    {"id": 6, "name": "Arjun Reddy", "category": "Home Services", "subcategory": "Electrician",
     "location": "Hyderabad", "price": 350, "priceUnit": "hour", "rating": 4.5, "reviews": 98,
     "image": "https://i.pravatar.cc/400?img=59"},
    {"id": 7, "name": "Kavya Iyer", "category": "Design & Creative", "subcategory": "Interior Designer",
     "location": "Pune", "price": 25000, "priceUnit": "project", "rating": 4.8, "reviews": 42,
     "image": "https://i.pravatar.cc/400?img=32"},
    {"id": 8, "name": "Rohan Mehta", "category": "Technology", "subcategory": "Data Scientist",
     "location": "Gurgaon", "price": 2000, "priceUnit": "hour", "rating": 4.7, "reviews": 37,
     "image": "https://i.pravatar.cc/400?img=15"},
    {"id": 9, "name": "Sneha Patil", "category": "Education", "subcategory": "English Teacher",
     "location": "Pune", "price": 450, "priceUnit": "hour", "rating": 4.6, "reviews": 112,
     "image": "https://i.pravatar.cc/400?img=26"},
    {"id": 10, "name": "Amit Verma", "category": "Health & Wellness", "subcategory": "Personal Trainer",
     "location": "Delhi", "price": 1000, "priceUnit": "session", "rating": 4.8, "reviews": 78,
     "image": "https://i.pravatar.cc/400?img=53"},
    {"id": 11, "name": "Farah Khan", "category": "Home Services", "subcategory": "Carpenter",
     "location": "Bangalore", "price": 550, "priceUnit": "hour", "rating": 4.4, "reviews": 61,
     "image": "https://i.pravatar.cc/400?img=41"},
    {"id": 12, "name": "Suresh Pillai", "category": "Technology", "subcategory": "Mobile App Developer",
     "location": "Mumbai", "price": 1800, "priceUnit": "hour", "rating": 4.7, "reviews": 54,
     "image": "https://i.pravatar.cc/400?img=68"},
]


def load_catalog(records: Iterable[Any]) -> Tuple[Professional, ...]:
    """
    Validate raw catalog records and freeze them into an ordered tuple

    Args:
        records: dicts (camelCase or snake_case keys) or Professional instances

    Returns:
        Tuple of Professionals in the order supplied

    Raises:
        CatalogLoadError: if a record is invalid or an id repeats
    """
    professionals: List[Professional] = []
    seen_ids = set()

    with log_execution_time(logger, "catalog_load"):
        for position, record in enumerate(records):
            if isinstance(record, Professional):
                professional = record
            else:
                try:
                    professional = Professional.model_validate(record)
                except PydanticValidationError as e:
                    raise CatalogLoadError(f"Invalid catalog record at position {position}: {e}") from e

            if professional.id in seen_ids:
                raise CatalogLoadError(f"Duplicate professional id {professional.id!r}")
            seen_ids.add(professional.id)
            professionals.append(professional)

    logger.info(f"Loaded catalog with {len(professionals)} professionals")
    return tuple(professionals)


def load_sample_catalog() -> Tuple[Professional, ...]:
    """Load the bundled sample catalog"""
    return load_catalog(SAMPLE_PROFESSIONALS)
