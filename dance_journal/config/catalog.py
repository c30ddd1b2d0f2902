"""
Suggestion Catalogs

Known styles, studios and instructors offered when logging a session.
Values come from the ``catalog`` section of config/default.yaml.
"""

from dance_journal.config.settings import yaml_config


def _catalog_list(key: str) -> list[str]:
    catalog = yaml_config.get("catalog") or {}
    return [str(item) for item in catalog.get(key) or []]


def known_styles() -> list[str]:
    """Dance styles suggested in the logging form."""
    return _catalog_list("styles")


def known_studios() -> list[str]:
    """Studios suggested in the logging form."""
    return _catalog_list("studios")


def known_instructors() -> list[str]:
    """Instructors suggested in the logging form."""
    return _catalog_list("instructors")
