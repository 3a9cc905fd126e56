"""Tests for the wptickets command line.

Pipeline collaborators are patched on ``cli.main`` for argument handling
tests; the end-to-end test mocks the forum with ``respx`` instead.
"""

from unittest.mock import patch

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app, parse_limit
from wptickets.scraper.models import PageResult

runner = CliRunner()

_SUPPORT = "https://wordpress.org/support/plugin/example/page/"


def _listing(total: int, resolved: int) -> str:
    topics = "\n".join(f'<ul id="bbp-topic-{i}">' for i in range(total))
    marks = "\n".join('<span aria-label="Resolved"></span>' for _ in range(resolved))
    return f"<html>\n{topics}\n{marks}\n</html>"


class TestParseLimit:
    def test_default_when_absent(self):
        assert parse_limit(None) == 10

    def test_numeric(self):
        assert parse_limit("3") == 3

    def test_non_numeric_falls_back(self):
        assert parse_limit("lots") == 10

    def test_negative_kept(self):
        assert parse_limit("-1") == -1

    def test_explicit_plus_sign(self):
        assert parse_limit("+3") == 3

    @pytest.mark.parametrize("pages", [" 3 ", "3_0", "\u0663", "", "3.0"])
    def test_non_plain_integers_fall_back(self, pages):
        assert parse_limit(pages) == 10

    def test_default_from_settings(self, monkeypatch):
        monkeypatch.setattr("cli.main.settings.default_pages", 20)
        assert parse_limit("x") == 20


def test_missing_plugin_is_usage_error():
    with patch("cli.main.collect_page_results") as mock_collect, \
         patch("cli.main.fetch_statistic") as mock_stat:
        result = runner.invoke(app, [])

    assert result.exit_code == 2
    assert "Usage" in result.stderr
    assert "Resolved threads:" not in result.stdout
    mock_collect.assert_not_called()
    mock_stat.assert_not_called()


def test_negative_pages_gives_empty_report():
    with patch("cli.main.fetch_statistic", return_value=None), \
         patch("wptickets.tickets.scheduler.fetch_url") as mock_fetch:
        result = runner.invoke(app, ["example", "-1"])

    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "Resolved threads:"
    mock_fetch.assert_not_called()


def test_option_like_pages_falls_back_to_default():
    with patch("cli.main.collect_page_results", return_value=[]) as mock_collect, \
         patch("cli.main.fetch_statistic", return_value=None):
        result = runner.invoke(app, ["example", "-x"])

    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "Resolved threads:"
    mock_collect.assert_called_once_with("example", 10)


def test_header_and_default_limit():
    with patch("cli.main.collect_page_results", return_value=[]) as mock_collect, \
         patch("cli.main.fetch_statistic", return_value=None):
        result = runner.invoke(app, ["akismet", "many"])

    assert result.exit_code == 0
    mock_collect.assert_called_once_with("akismet", 10)
    assert "Plugin.: akismet" in result.stdout
    assert "Website: https://wordpress.org/plugins/akismet/" in result.stdout
    assert "Support: https://wordpress.org/support/plugin/akismet/" in result.stdout
    assert "Resolved threads:" in result.stdout
    assert "Issues resolved" not in result.stdout


def test_report_lines_printed_in_order():
    results = [
        PageResult(page_index=2, url=f"{_SUPPORT}2", resolved_count=1, total_count=9),
        PageResult(page_index=1, url=f"{_SUPPORT}1", resolved_count=4, total_count=4),
        PageResult.missing_page(3, f"{_SUPPORT}3"),
    ]
    with patch("cli.main.collect_page_results", return_value=results), \
         patch("cli.main.fetch_statistic", return_value="7 out of 8"):
        result = runner.invoke(app, ["example", "3", "--no-color"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    start = lines.index("Resolved threads:") + 1
    assert lines[start:] == [
        "- Page  1  4/4 ✔",
        f"- Page  2  1/9 ✘ (8 missing) {_SUPPORT}2",
        "",
        "Issues resolved in last two months: 7 out of 8",
    ]


def test_end_to_end_with_failed_page():
    with respx.mock:
        respx.get(f"{_SUPPORT}1").mock(return_value=httpx.Response(200, text=_listing(5, 5)))
        respx.get(f"{_SUPPORT}2").mock(return_value=httpx.Response(200, text=_listing(4, 2)))
        respx.get(f"{_SUPPORT}3").mock(return_value=httpx.Response(200, text="<html></html>"))
        respx.get(f"{_SUPPORT}4").mock(return_value=httpx.Response(503))
        respx.get("https://wordpress.org/plugins/example/").mock(
            return_value=httpx.Response(200, text="<p>\n3 out of 4</span>\n</p>")
        )
        result = runner.invoke(app, ["example", "4"])

    assert result.exit_code == 0
    assert "- Page  1  5/5 ✔" in result.stdout
    assert f"- Page  2  2/4 • (2 missing) {_SUPPORT}2" in result.stdout
    assert "- Page  3" not in result.stdout
    assert "- Page  4" not in result.stdout
    assert "Issues resolved in last two months: 3 out of 4" in result.stdout


def test_unparseable_plugin_slug_still_completes():
    with respx.mock:
        result = runner.invoke(app, ["bad\x01slug", "2"])

    assert result.exit_code == 0
    assert result.exception is None
    assert "- Page" not in result.stdout
    assert "Issues resolved" not in result.stdout
