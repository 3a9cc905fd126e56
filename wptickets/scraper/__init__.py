"""Scraper package — forum page fetch & marker counting."""

from wptickets.scraper.extractor import analyze_overview, analyze_page
from wptickets.scraper.fetcher import fetch_url
from wptickets.scraper.models import PageResult, RawPage

__all__ = ["fetch_url", "analyze_page", "analyze_overview", "RawPage", "PageResult"]
