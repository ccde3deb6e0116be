"""
Tests for price bracket parsing and matching
"""

import pytest
from services.catalog_service.price_filter import parse_price_bound, matches_price_range
from services.exceptions import ParsePriceError


class TestParsePriceBound:
    """Test single bound parsing"""
    
    def test_plain_digits(self):
        assert parse_price_bound("500") == 500
    
    def test_strips_currency_and_spaces(self):
        assert parse_price_bound(" ₹1,000 ") == 1000
    
    def test_no_digits_raises(self):
        with pytest.raises(ParsePriceError) as exc_info:
            parse_price_bound("abc")
        assert exc_info.value.raw_value == "abc"
    
    def test_empty_raises(self):
        with pytest.raises(ParsePriceError):
            parse_price_bound("")
    
    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_price_bound("free")


class TestMatchesPriceRange:
    """Test bracket matching"""
    
    def test_empty_bracket_matches_everything(self):
        assert matches_price_range(0, "")
        assert matches_price_range(99999, "")
    
    @pytest.mark.parametrize("price,expected", [
        (499, False),
        (500, True),
        (750, True),
        (1000, True),
        (1001, False),
    ])
    def test_bounded_range_is_inclusive(self, price, expected):
        assert matches_price_range(price, "500-1000") is expected
    
    def test_open_ended_range(self):
        assert matches_price_range(2000, "2000+")
        assert matches_price_range(25000, "2000+")
        assert not matches_price_range(1999, "2000+")
    
    def test_bounded_range_with_currency_symbols(self):
        assert matches_price_range(400, "₹0 - ₹500")
    
    def test_unparseable_lower_bound_rejects(self):
        assert not matches_price_range(400, "abc-500")
    
    def test_unparseable_upper_bound_rejects(self):
        assert not matches_price_range(400, "0-xyz")
    
    def test_missing_upper_bound_rejects(self):
        assert not matches_price_range(400, "100-")
    
    def test_unparseable_open_bound_accepts(self):
        assert matches_price_range(0, "abc+")
        assert matches_price_range(400, "abc+")
    
    def test_bare_number_acts_as_minimum(self):
        assert matches_price_range(600, "500")
        assert not matches_price_range(400, "500")
