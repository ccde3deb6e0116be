"""
Catalog service data models: professionals, filter criteria and statistics.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Service categories present in the catalog"""
    HOME_SERVICES = "Home Services"
    DESIGN_CREATIVE = "Design & Creative"
    TECHNOLOGY = "Technology"
    EDUCATION = "Education"
    HEALTH_WELLNESS = "Health & Wellness"


class Location(str, Enum):
    """Cities covered by the catalog"""
    MUMBAI = "Mumbai"
    BANGALORE = "Bangalore"
    DELHI = "Delhi"
    HYDERABAD = "Hyderabad"
    CHENNAI = "Chennai"
    PUNE = "Pune"
    GURGAON = "Gurgaon"
    JAIPUR = "Jaipur"


class Professional(BaseModel):
    """Catalog entry; immutable once loaded"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: Union[int, str]
    name: str = Field(min_length=1)
    category: Category
    subcategory: str = ""
    location: Location
    price: int = Field(ge=0)
    price_unit: str = Field(default="hour", alias="priceUnit")
    rating: float = Field(ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    image: str = ""


@dataclass
class FilterCriteria:
    """User-chosen constraints; empty string means no filter"""
    query: str = ""
    category: str = ""
    location: str = ""
    price_range: str = ""

    def reset(self):
        self.query = ""
        self.category = ""
        self.location = ""
        self.price_range = ""

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria()


@dataclass(frozen=True)
class CatalogStatistics:
    """Figures shown on the dashboard stat cards"""
    count: int
    category_count: int
    average_rating: float
