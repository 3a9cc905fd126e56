"""Tickets package — page classification, fan-out collection & reporting."""

from wptickets.tickets.classifier import SeverityTier, classify, render_status
from wptickets.tickets.reporter import build_report, fetch_statistic, render_line
from wptickets.tickets.scheduler import collect_page_results, fetch_page_result

__all__ = [
    "SeverityTier",
    "classify",
    "render_status",
    "collect_page_results",
    "fetch_page_result",
    "build_report",
    "fetch_statistic",
    "render_line",
]
