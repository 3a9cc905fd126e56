"""URL builders for the plugin directory and its support forum."""

from __future__ import annotations

from wptickets.config import settings


def plugin_url(plugin: str) -> str:
    """Return the plugin's overview page, e.g. ``https://wordpress.org/plugins/akismet/``."""
    return f"{settings.base_url}/plugins/{plugin}/"


def support_url(plugin: str) -> str:
    return f"{settings.base_url}/support/plugin/{plugin}/"


def support_page_url(plugin: str, page: int) -> str:
    """Return listing page *page* (1-based) of the plugin's support forum."""
    return f"{settings.base_url}/support/plugin/{plugin}/page/{page}"
