"""
Unified Configuration System for ProConnect

This module provides a centralized configuration system that consolidates all application settings,
supports environment-based overrides, and provides type-safe configuration access.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List
import os
from pathlib import Path


@dataclass
class CatalogConfig:
    """Catalog vocabularies offered by the filter controls"""
    categories: List[str] = field(default_factory=lambda: [
        "Home Services",
        "Design & Creative",
        "Technology",
        "Education",
        "Health & Wellness",
    ])
    locations: List[str] = field(default_factory=lambda: [
        "Mumbai",
        "Bangalore",
        "Delhi",
        "Hyderabad",
        "Chennai",
        "Pune",
        "Gurgaon",
        "Jaipur",
    ])
    # value -> label, in display order
    price_ranges: Dict[str, str] = field(default_factory=lambda: {
        "0-500": "₹0 - ₹500",
        "500-1000": "₹500 - ₹1000",
        "1000-2000": "₹1000 - ₹2000",
        "2000+": "₹2000+",
    })
    currency_symbol: str = "₹"


@dataclass
class StatsConfig:
    """Advertised figures shown on the dashboard stat cards"""
    category_count: int = 6
    average_rating: float = 4.8


@dataclass
class NotificationConfig:
    """Transient notification settings"""
    expiry_seconds: float = 3.5
    refresh_interval_seconds: float = 0.5


@dataclass
class AuthConfig:
    """Login form configuration"""
    missing_fields_message: str = "Please fill in all fields"
    role_labels: Dict[str, str] = field(default_factory=lambda: {
        "user": "User (Client)",
        "professional": "Professional",
        "admin": "Admin",
        "support": "Customer Support",
    })


@dataclass
class UIConfig:
    """User interface configuration"""
    app_title: str = "ProConnect"
    # Browser tab only; the header always uses app_title
    page_title: str = "ProConnect"
    tagline: str = "Connect with the right professionals"
    search_placeholder: str = "Search for services (e.g., plumber, designer, tutor)"
    empty_results_message: str = "No professionals found matching your search."


@dataclass
class LoggingConfig:
    """Logging and monitoring configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s [%(filename)s:%(lineno)d]"
    enable_file_logging: bool = False
    log_file: str = "logs/app.log"


@dataclass
class AppConfig:
    """Main application configuration"""
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Environment settings
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    @classmethod
    def load(cls) -> 'AppConfig':
        """Load configuration with environment overrides"""
        config = cls()

        # Apply environment-specific overrides
        if config.environment == "production":
            config.debug = False
            config.logging.level = "WARNING"
        elif config.environment == "development":
            config.debug = True
            config.logging.level = "DEBUG"

        return config

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if self.notifications.expiry_seconds <= 0:
            errors.append("Notification expiry must be positive")

        if not self.catalog.categories:
            errors.append("At least one catalog category is required")

        if not self.catalog.locations:
            errors.append("At least one catalog location is required")

        if not 0 <= self.stats.average_rating <= 5:
            errors.append("Advertised average rating must be between 0 and 5")

        if self.logging.enable_file_logging:
            log_dir = Path(self.logging.log_file).parent
            if not log_dir.exists():
                log_dir.mkdir(parents=True, exist_ok=True)

        return errors


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        from config.environments import get_environment_config
        _config = get_environment_config()

        # Validate configuration
        errors = _config.validate()
        if errors:
            import warnings
            for error in errors:
                warnings.warn(f"Configuration error: {error}")

    return _config


def reload_config() -> AppConfig:
    """Reload configuration (useful for testing)"""
    global _config
    _config = None
    return get_config()
