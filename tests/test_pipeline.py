import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError

import main
import settings
from article_scraper import pipeline
from article_scraper.exceptions import ExtractionError, NavigationError
from tests.fixtures import SCENARIO_HTML
from tests.test_browser import fake_playwright

URL = "https://example.com/posts/hello"


def _page(html=SCENARIO_HTML, goto_error=None):
    page = MagicMock()
    page.goto = AsyncMock(side_effect=goto_error)
    page.content = AsyncMock(return_value=html)
    page.url = URL
    return page


def test_scrape_article_closes_browser_after_success():
    factory, pw, browser = fake_playwright(_page())

    with patch("article_scraper.browser.async_playwright", factory):
        record = asyncio.run(pipeline.scrape_article(URL))

    assert record.title == "Hello World"
    browser.close.assert_awaited_once()


def test_run_writes_outputs_and_summary(tmp_path, capsys):
    factory, pw, browser = fake_playwright(_page())

    with patch("article_scraper.browser.async_playwright", factory):
        record = pipeline.run(URL, output_dir=str(tmp_path))

    data = json.loads((tmp_path / "article.json").read_text(encoding="utf-8"))
    assert data["estimatedReadingTime"] == "2 minutes"
    assert len(data["content"]) == 3
    assert len(data["images"]) == 2
    assert data["images"][0]["src"] == "https://example.com/images/cover.png"
    text = (tmp_path / "article.txt").read_text(encoding="utf-8")
    assert "Title: Hello World" in text.splitlines()
    assert "Content Length: 3 paragraphs" in capsys.readouterr().out
    assert record.author == "Jane Doe"


def test_run_twice_is_byte_identical(tmp_path):
    outputs = []
    for name in ("first", "second"):
        out_dir = tmp_path / name
        out_dir.mkdir()
        factory, _, _ = fake_playwright(_page())
        with patch("article_scraper.browser.async_playwright", factory):
            pipeline.run(URL, output_dir=str(out_dir))
        outputs.append((out_dir / "article.json").read_bytes())

    assert outputs[0] == outputs[1]


def test_navigation_failure_writes_nothing(tmp_path):
    page = _page(goto_error=PlaywrightError("net::ERR_CONNECTION_REFUSED"))
    factory, pw, browser = fake_playwright(page)

    with patch("article_scraper.browser.async_playwright", factory):
        with pytest.raises(NavigationError):
            pipeline.run(URL, output_dir=str(tmp_path))

    assert list(tmp_path.iterdir()) == []
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


def test_extraction_failure_closes_browser(tmp_path):
    page = _page()
    page.content = AsyncMock(side_effect=PlaywrightError("Execution context was destroyed"))
    factory, pw, browser = fake_playwright(page)

    with patch("article_scraper.browser.async_playwright", factory):
        with pytest.raises(ExtractionError):
            pipeline.run(URL, output_dir=str(tmp_path))

    browser.close.assert_awaited_once()


def test_main_uses_default_url():
    with patch("main.pipeline.run") as run:
        main.main([])

    args, kwargs = run.call_args
    assert args[0] == main.DEFAULT_URL
    assert kwargs["output_dir"] == "."
    assert kwargs["timeout_ms"] == 60_000


def test_main_passes_cli_arguments(tmp_path):
    with patch("main.pipeline.run") as run:
        main.main([URL, "--output-dir", str(tmp_path), "--log-level", "debug"])

    args, kwargs = run.call_args
    assert args[0] == URL
    assert kwargs["output_dir"] == str(tmp_path)


def test_main_exits_with_status_one_on_scraper_error():
    with patch("main.pipeline.run", side_effect=NavigationError("Timed out", url=URL)):
        with pytest.raises(SystemExit) as exc_info:
            main.main([])

    assert exc_info.value.code == 1


def test_main_exits_with_status_one_on_unexpected_error():
    with patch("main.pipeline.run", side_effect=RuntimeError("boom")):
        with pytest.raises(SystemExit) as exc_info:
            main.main([])

    assert exc_info.value.code == 1


def test_main_reads_headless_string_setting(monkeypatch):
    monkeypatch.setattr(settings, "_SETTINGS", {"headless": "false"})

    with patch("main.pipeline.run") as run:
        main.main([])

    assert run.call_args.kwargs["headless"] is False
