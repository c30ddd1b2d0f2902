"""Configuration package."""

from dance_journal.config.settings import (
    Settings,
    get_settings,
    load_yaml_config,
    settings,
    yaml_config,
)
from dance_journal.config.catalog import (
    known_instructors,
    known_studios,
    known_styles,
)

__all__ = [
    # Application settings
    "Settings",
    "get_settings",
    "load_yaml_config",
    "settings",
    "yaml_config",
    # Suggestion catalogs
    "known_styles",
    "known_studios",
    "known_instructors",
]
