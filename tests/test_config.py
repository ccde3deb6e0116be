"""
Tests for configuration system
"""

import pytest
from config.app_config import (
    AppConfig, CatalogConfig, StatsConfig, NotificationConfig, AuthConfig, UIConfig,
    get_config, reload_config
)
from services.auth_service import Role
from services.catalog_service import Category, Location


class TestCatalogConfig:
    """Test catalog vocabularies"""
    
    def test_categories_match_catalog_enum(self):
        assert CatalogConfig().categories == [c.value for c in Category]
    
    def test_locations_match_catalog_enum(self):
        assert CatalogConfig().locations == [l.value for l in Location]
    
    def test_price_ranges_in_display_order(self):
        assert list(CatalogConfig().price_ranges) == ["0-500", "500-1000", "1000-2000", "2000+"]


class TestDefaults:
    """Test default section values"""
    
    def test_stats_defaults(self):
        config = StatsConfig()
        assert config.category_count == 6
        assert config.average_rating == 4.8
    
    def test_notification_defaults(self):
        assert NotificationConfig().expiry_seconds == 3.5
    
    def test_role_labels_cover_roles(self):
        assert set(AuthConfig().role_labels) == {r.value for r in Role}
    
    def test_ui_defaults(self):
        config = UIConfig()
        assert config.app_title == "ProConnect"
        assert config.empty_results_message == "No professionals found matching your search."


class TestAppConfig:
    """Test main application configuration"""
    
    def test_load_production(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        config = AppConfig.load()
        
        assert config.environment == "production"
        assert config.debug is False
        assert config.logging.level == "WARNING"
    
    def test_load_development(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "development")
        config = AppConfig.load()
        
        assert config.debug is True
        assert config.logging.level == "DEBUG"
    
    def test_validate_defaults(self):
        assert AppConfig().validate() == []
    
    def test_validate_reports_problems(self):
        config = AppConfig()
        config.notifications.expiry_seconds = 0
        config.catalog.categories = []
        config.stats.average_rating = 7
        
        errors = config.validate()
        assert len(errors) == 3
    
    def test_get_config_is_cached(self):
        first = reload_config()
        assert get_config() is first
        assert reload_config() is not first
