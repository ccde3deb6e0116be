"""
Catalog search engine - filters the read-only professional catalog.

Filtering is derived on every read. Nothing here caches a filtered view,
so a count and a list rendered in the same pass always agree with the
criteria as they stand at that moment.
"""

from typing import Iterable, List, Optional, Tuple

from services.catalog_service.models import CatalogStatistics, FilterCriteria, Professional
from services.catalog_service.price_filter import matches_price_range
from services.exceptions import CatalogLookupError
from services.notification_service import Notification, NotificationCenter, NotificationKind
from utils.logging_config import get_logger, log_user_interaction


def matches_query(professional: Professional, query: str) -> bool:
    """Case-insensitive substring match on name, category, subcategory or location"""
    if not query:
        return True
    needle = query.lower()
    return any(
        needle in field_value.lower()
        for field_value in (
            professional.name,
            professional.category,
            professional.subcategory,
            professional.location,
        )
    )


def matches_criteria(professional: Professional, criteria: FilterCriteria) -> bool:
    """True when the professional satisfies every active filter"""
    if not matches_query(professional, criteria.query):
        return False
    if criteria.category and professional.category != criteria.category:
        return False
    if criteria.location and professional.location != criteria.location:
        return False
    return matches_price_range(professional.price, criteria.price_range)


def filter_catalog(catalog: Iterable[Professional], criteria: FilterCriteria) -> List[Professional]:
    """Stable filter: keeps catalog order"""
    return [professional for professional in catalog if matches_criteria(professional, criteria)]


class CatalogSearchEngine:
    """
    Holds the immutable catalog and the current filter criteria.

    Setters only record the new value; evaluate() does the work.
    """

    def __init__(self, catalog: Iterable[Professional], notifications: NotificationCenter,
                 category_count: int = 6, average_rating: float = 4.8):
        self._catalog: Tuple[Professional, ...] = tuple(catalog)
        self.notifications = notifications
        self.criteria = FilterCriteria()
        self.category_count = category_count
        self.average_rating = average_rating
        self.logger = get_logger(__name__)

    @property
    def catalog(self) -> Tuple[Professional, ...]:
        """The full, unfiltered catalog"""
        return self._catalog

    def set_query(self, value: str):
        self.criteria.query = value or ""

    def set_category(self, value: str):
        self.criteria.category = value or ""

    def set_location(self, value: str):
        self.criteria.location = value or ""

    def set_price_range(self, value: str):
        self.criteria.price_range = value or ""

    def reset_filters(self):
        """Put all four criteria back to their defaults"""
        self.criteria.reset()
        self.logger.debug("Filter criteria reset")

    def evaluate(self) -> List[Professional]:
        """Professionals matching the current criteria, in catalog order"""
        return filter_catalog(self._catalog, self.criteria)

    def statistics(self) -> CatalogStatistics:
        """
        Dashboard figures

        Only the count follows the filters; the category count and the
        average rating are the advertised figures from configuration.
        """
        return CatalogStatistics(
            count=len(self.evaluate()),
            category_count=self.category_count,
            average_rating=self.average_rating,
        )

    def find(self, professional_id) -> Optional[Professional]:
        """Look up a professional in the full catalog"""
        for professional in self._catalog:
            if professional.id == professional_id:
                return professional
        return None

    def get(self, professional_id) -> Professional:
        """
        Look up a professional that must exist

        Raises:
            CatalogLookupError: if the id is unknown
        """
        professional = self.find(professional_id)
        if professional is None:
            raise CatalogLookupError(professional_id)
        return professional

    def search(self) -> Notification:
        """Announce how many professionals the current criteria match"""
        count = len(self.evaluate())
        log_user_interaction(
            self.logger,
            "search",
            query_length=len(self.criteria.query),
            category=self.criteria.category,
            location=self.criteria.location,
            price_range=self.criteria.price_range,
            result_count=count,
        )
        return self.notifications.notify(f"Found {count} professionals", NotificationKind.SUCCESS)

    def hire(self, professional_id) -> Notification:
        """
        Acknowledge a hire request; nothing is booked or stored

        Raises:
            CatalogLookupError: if the id is not in the catalog
        """
        professional = self.get(professional_id)
        log_user_interaction(self.logger, "hire", professional_id=professional.id)
        return self.notifications.notify(f"Hiring {professional.name}", NotificationKind.INFO)
