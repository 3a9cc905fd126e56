"""wptickets CLI — support forum resolution status for a WordPress plugin.

Usage:
    wptickets [plugin]
    wptickets [plugin] [pages]

Sends requests to the first *pages* listing pages (default 10) of the
plugin's support forum at the same time, counts how many topics are marked
resolved on each, and prints which pages still have open topics.  The
plugin's own "resolved in the last two months" figure closes the report.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wptickets.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from wptickets.config import settings
from wptickets.scraper.urls import plugin_url, support_url
from wptickets.tickets.reporter import build_report, fetch_statistic
from wptickets.tickets.scheduler import collect_page_results

app = typer.Typer(
    name="wptickets",
    help="Visualize the status of support requests for a WordPress plugin.",
    add_completion=False,
)


_LIMIT_RE = re.compile(r"[+-]?[0-9]+")


def parse_limit(pages: Optional[str]) -> int:
    """Return the page limit; anything that is not a plain integer means the default.

    Only ASCII digits with an optional sign are accepted: no padding, no
    underscores, no other digit scripts.
    """
    if pages is None or not _LIMIT_RE.fullmatch(pages):
        return settings.default_pages
    return int(pages)


# Unknown options such as "-1" or "-x" are passed on as the `pages` argument.
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    plugin: str = typer.Argument(..., help="Plugin slug, e.g. 'akismet'."),
    pages: Optional[str] = typer.Argument(
        None, help="Number of support listing pages to check (default 10)."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored status marks."),
) -> None:
    """Show how many support topics are resolved on each forum page."""
    color = False if no_color else None

    typer.echo(f"Plugin.: {plugin}")
    typer.echo(f"Website: {plugin_url(plugin)}")
    typer.echo(f"Support: {support_url(plugin)}")
    typer.echo("")
    typer.echo("Resolved threads:")

    results = collect_page_results(plugin, parse_limit(pages))
    statistic = fetch_statistic(plugin)

    for line in build_report(results, statistic):
        typer.echo(line, color=color)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
