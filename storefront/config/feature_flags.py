"""
Feature Flags Configuration

Centralized feature flag management for the storefront.
All feature flags are loaded from environment variables.
"""
from storefront.config.settings import get_bool_env


class FeatureFlags:
    """
    Feature flags for the application.

    To add a new feature flag:
    1. Add it here as a class property
    2. Load it from environment variable
    3. Use it in your code
    """

    # Admin back-office CSV downloads (orders.csv / students.csv)
    FEATURE_ADMIN_EXPORT: bool = get_bool_env('FEATURE_ADMIN_EXPORT', True)

    # Seed the demo course catalogue when the courses table is empty
    FEATURE_SEED_ON_STARTUP: bool = get_bool_env('FEATURE_SEED_ON_STARTUP', True)

    @classmethod
    def is_enabled(cls, flag_name: str) -> bool:
        """Check if a feature flag is enabled by name."""
        return getattr(cls, flag_name, False)

    @classmethod
    def get_all_flags(cls) -> dict:
        """Get all feature flags as a dictionary."""
        return {
            key: value
            for key, value in cls.__dict__.items()
            if not key.startswith('_') and isinstance(value, bool)
        }


# Singleton instance for easy importing
feature_flags = FeatureFlags()
