"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


def missing_count(resolved: int, total: int) -> int:
    """Return unresolved topics; upstream markup may report resolved > total."""
    return max(0, total - resolved)


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class PageResult:
    """Resolved vs. listed topic counts for one support listing page.

    A page with no listed topics does not exist (the listing ran out before
    the requested page) and is left out of the report.
    """

    page_index: int
    url: str
    resolved_count: int = 0
    total_count: int = 0

    @property
    def exists(self) -> bool:
        return self.total_count > 0

    @property
    def missing(self) -> int:
        """Topics on the page that are not marked resolved (never negative)."""
        return missing_count(self.resolved_count, self.total_count)

    @classmethod
    def missing_page(cls, page_index: int, url: str) -> PageResult:
        """Return the placeholder used for past-the-end or unreachable pages."""
        return cls(page_index=page_index, url=url)
