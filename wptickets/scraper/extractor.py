"""Marker counting: turns forum HTML into topic counts and statistics."""

from __future__ import annotations

import re
from typing import Optional

from wptickets.scraper.models import PageResult

# ---------------------------------------------------------------------------
# Markers emitted by the bbPress theme on wordpress.org
# ---------------------------------------------------------------------------
TOPIC_MARKER = '<ul id="bbp-topic-'
RESOLVED_MARKER = 'aria-label="Resolved"'

_TAG_RE = re.compile(r"<[^>]+>")
_STATISTIC_RE = re.compile(
    r"\d+\s+(?:out\s+)?of\s+\d+\s+support\s+threads[^.<]*?"
    r"(?:have\s+been\s+)?(?:marked\s+)?resolved\.?",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _strip_tags(html: str) -> str:
    return " ".join(_TAG_RE.sub(" ", html).split())


def _statistic_from_lines(html: str) -> Optional[str]:
    """Return the first line carrying an ``N out of M`` statistic.

    Wrapper ``<div>`` lines repeat the phrase in attributes and are skipped.
    """
    for line in html.splitlines():
        if " out of " not in line:
            continue
        line = line.replace("</span>", "").strip()
        if line.startswith("<div"):
            continue
        text = _strip_tags(line)
        if text:
            return text
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def count_topics(html: str) -> int:
    return html.count(TOPIC_MARKER)


def count_resolved(html: str) -> int:
    return html.count(RESOLVED_MARKER)


def analyze_page(html: str, page_index: int, url: str) -> PageResult:
    """Count listed and resolved topics in one support listing page.

    A page without a single topic container is past the end of the forum and
    comes back as :meth:`PageResult.missing_page`.
    """
    total = count_topics(html)
    if total == 0:
        return PageResult.missing_page(page_index, url)
    return PageResult(
        page_index=page_index,
        url=url,
        resolved_count=count_resolved(html),
        total_count=total,
    )


def analyze_overview(html: str) -> Optional[str]:
    """Extract the "resolved in the last two months" statistic, if present.

    Returns ``None`` when the overview page carries no such sentence; older
    and newer page layouts word it differently and some omit it entirely.
    """
    statistic = _statistic_from_lines(html)
    if statistic:
        return statistic

    match = _STATISTIC_RE.search(_strip_tags(html))
    if match:
        return match.group(0)
    return None
