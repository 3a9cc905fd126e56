"""Concurrent fetch of support listing pages.

One worker per page fetches and analyses its page independently; the caller
gets the complete set of results only after every worker has finished.
"""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed

import httpx

from wptickets.scraper.extractor import analyze_page
from wptickets.scraper.fetcher import fetch_url
from wptickets.scraper.models import PageResult
from wptickets.scraper.urls import support_page_url


def fetch_page_result(plugin: str, page: int) -> PageResult:
    """Fetch and analyse listing page *page* of *plugin*'s support forum.

    Transport failures are logged and reported as a missing page so that one
    unreachable page never aborts the others.
    """
    url = support_page_url(plugin, page)
    try:
        raw = fetch_url(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        print(f"[fetch] ✗ Page {page} failed ({url}): {exc}", file=sys.stderr)
        return PageResult.missing_page(page, url)
    return analyze_page(raw.html, page, url)


def collect_page_results(plugin: str, limit: int) -> list[PageResult]:
    """Fetch pages ``1..limit`` in parallel and return one result per page.

    All pages run at once (the pool is sized to *limit*).  Results come back
    in completion order; ordering is the reporter's job.  A non-positive
    *limit* yields no results.
    """
    if limit <= 0:
        return []

    results: list[PageResult] = []
    with ThreadPoolExecutor(max_workers=limit, thread_name_prefix="page") as pool:
        futures = [
            pool.submit(fetch_page_result, plugin, page) for page in range(1, limit + 1)
        ]
        for future in as_completed(futures):
            results.append(future.result())

    return results
