"""
Tests for catalog loading and validation
"""

import pytest
from services.catalog_service import Professional, SAMPLE_PROFESSIONALS, load_catalog, load_sample_catalog
from services.exceptions import CatalogLoadError


def valid_record(**overrides):
    record = {
        "id": 1,
        "name": "Raj",
        "category": "Home Services",
        "subcategory": "Plumber",
        "location": "Mumbai",
        "price": 400,
        "priceUnit": "hour",
        "rating": 4.5,
        "reviews": 12,
        "image": "https://example.com/raj.jpg",
    }
    record.update(overrides)
    return record


class TestLoadCatalog:
    """Test catalog validation"""
    
    def test_sample_catalog_loads(self):
        catalog = load_sample_catalog()
        
        assert isinstance(catalog, tuple)
        assert len(catalog) == len(SAMPLE_PROFESSIONALS)
        assert len({p.id for p in catalog}) == len(catalog)
    
    def test_preserves_order(self):
        catalog = load_catalog([valid_record(id=3), valid_record(id=1), valid_record(id=2)])
        assert [p.id for p in catalog] == [3, 1, 2]
    
    def test_camel_case_price_unit(self):
        professional = load_catalog([valid_record(priceUnit="project")])[0]
        assert professional.price_unit == "project"
    
    def test_snake_case_price_unit(self):
        record = valid_record()
        del record["priceUnit"]
        record["price_unit"] = "session"
        
        assert load_catalog([record])[0].price_unit == "session"
    
    def test_category_and_location_are_plain_strings(self):
        professional = load_catalog([valid_record()])[0]
        
        assert professional.category == "Home Services"
        assert professional.location == "Mumbai"
    
    def test_professionals_are_frozen(self):
        professional = load_catalog([valid_record()])[0]
        with pytest.raises(Exception):
            professional.price = 1
    
    def test_accepts_professional_instances(self):
        existing = Professional.model_validate(valid_record(id=7))
        assert load_catalog([existing])[0] is existing
    
    def test_duplicate_ids_rejected(self):
        with pytest.raises(CatalogLoadError, match="Duplicate"):
            load_catalog([valid_record(id=1), valid_record(id=1, name="Other")])
    
    @pytest.mark.parametrize("overrides", [
        {"category": "Plumbing"},
        {"location": "London"},
        {"price": -1},
        {"rating": 5.5},
        {"reviews": -3},
        {"name": ""},
    ])
    def test_invalid_records_rejected(self, overrides):
        with pytest.raises(CatalogLoadError):
            load_catalog([valid_record(**overrides)])
    
    def test_empty_catalog(self):
        assert load_catalog([]) == ()
