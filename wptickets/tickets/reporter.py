"""Report rendering for collected page results."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional

import httpx

from wptickets.scraper.extractor import analyze_overview
from wptickets.scraper.fetcher import fetch_url
from wptickets.scraper.models import PageResult
from wptickets.scraper.urls import plugin_url
from wptickets.tickets.classifier import classify_and_render

STATISTIC_LABEL = "Issues resolved in last two months: "


def render_line(result: PageResult) -> str:
    """Render one page as ``- Page NN RR/T <status>`` (counts padded to width 2)."""
    _, status = classify_and_render(result.resolved_count, result.total_count, result.url)
    return (
        f"- Page {result.page_index:2d} "
        f"{result.resolved_count:2d}/{result.total_count} {status}"
    )


def build_report(results: Iterable[PageResult], statistic: Optional[str] = None) -> List[str]:
    """Return the report lines for *results* in page order.

    Pages that do not exist are dropped.  The statistic, when present, is
    appended after a blank separator line.
    """
    existing = sorted((r for r in results if r.exists), key=lambda r: r.page_index)
    lines = [render_line(r) for r in existing]
    if statistic:
        lines.append("")
        lines.append(STATISTIC_LABEL + statistic)
    return lines


def fetch_statistic(plugin: str) -> Optional[str]:
    """Fetch the plugin's overview page and extract its resolution statistic."""
    url = plugin_url(plugin)
    try:
        raw = fetch_url(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        print(f"[overview] ✗ Failed {url}: {exc}", file=sys.stderr)
        return None
    return analyze_overview(raw.html)
