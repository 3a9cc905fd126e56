"""Severity tiers for support listing pages.

Classification works on plain counts; :func:`render_status` turns a tier into
the colored status token shown in the report.
"""

from __future__ import annotations

from enum import Enum

import typer

from wptickets.scraper.models import missing_count


class SeverityTier(Enum):
    COMPLETE = "complete"
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"


# Tier -> (glyph, color)
_GLYPHS = {
    SeverityTier.COMPLETE: ("✔", typer.colors.BRIGHT_GREEN),
    SeverityTier.SEVERE: ("✘", typer.colors.BRIGHT_RED),
    SeverityTier.MODERATE: ("☢", typer.colors.BRIGHT_YELLOW),
    SeverityTier.MINOR: ("•", typer.colors.BRIGHT_BLUE),
}


def classify(resolved: int, total: int) -> SeverityTier:
    missing = missing_count(resolved, total)
    if missing == 0:
        return SeverityTier.COMPLETE
    if missing > 6:
        return SeverityTier.SEVERE
    if missing > 3:
        return SeverityTier.MODERATE
    return SeverityTier.MINOR


def render_status(tier: SeverityTier, missing: int, url: str) -> str:
    """Return the status token for *tier*.

    Complete pages render just the check mark.  Every other tier appends the
    number of unresolved topics and the page URL for direct navigation.
    """
    glyph, color = _GLYPHS[tier]
    token = typer.style(glyph, fg=color)
    if tier is SeverityTier.COMPLETE:
        return token
    return f"{token} ({missing} missing) {url}"


def classify_and_render(resolved: int, total: int, url: str) -> tuple[SeverityTier, str]:
    tier = classify(resolved, total)
    return tier, render_status(tier, missing_count(resolved, total), url)
