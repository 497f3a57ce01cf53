import importlib.util
import sys
from types import ModuleType
from unittest.mock import MagicMock, patch

import pytest

from wikicontext.services.headless_browser_fetcher import PlaywrightHeadlessFetcher, PlaywrightHeadlessOptions
from wikicontext.services.http_service import ACCEPT_HTML


def test_default_options():
    options = PlaywrightHeadlessOptions()
    assert options.timeout_ms == 10_000
    assert options.wait_until == "networkidle"
    assert options.storage_state is None


def test_headless_fetcher_raises_if_playwright_missing():
    if importlib.util.find_spec("playwright") is not None:
        pytest.skip("playwright is installed; missing-import behavior not applicable")

    fetcher = PlaywrightHeadlessFetcher(user_agent="ua")
    with pytest.raises(RuntimeError, match="Playwright is not installed"):
        fetcher.fetch("http://example.com")


def _fake_playwright(status=200, status_text="OK", html="<html>ok</html>"):
    sync_playwright = MagicMock()
    p = sync_playwright.return_value.__enter__.return_value
    browser = p.chromium.launch.return_value
    page = browser.new_context.return_value.new_page.return_value
    page.goto.return_value.status = status
    page.goto.return_value.status_text = status_text
    page.content.return_value = html

    sync_api = ModuleType("playwright.sync_api")
    sync_api.sync_playwright = sync_playwright
    package = ModuleType("playwright")
    package.sync_api = sync_api
    modules = {"playwright": package, "playwright.sync_api": sync_api}
    return modules, browser, page


def test_fetch_passes_storage_state_and_accept_to_context():
    modules, browser, page = _fake_playwright()
    options = PlaywrightHeadlessOptions(timeout_ms=5000, wait_until="load", storage_state="/tmp/sso.json")
    fetcher = PlaywrightHeadlessFetcher(user_agent="ua", options=options)

    with patch.dict(sys.modules, modules):
        response = fetcher.fetch("https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home")

    browser.new_context.assert_called_once_with(
        user_agent="ua",
        storage_state="/tmp/sso.json",
        extra_http_headers={"Accept": ACCEPT_HTML},
    )
    page.goto.assert_called_once_with(
        "https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home", wait_until="load", timeout=5000
    )
    browser.close.assert_called_once()
    assert response.status_code == 200
    assert response.reason == "OK"
    assert response.text == "<html>ok</html>"
    assert response.ok


def test_fetch_maps_error_status_and_reason():
    modules, browser, _ = _fake_playwright(status=403, status_text="Forbidden", html="denied")
    fetcher = PlaywrightHeadlessFetcher(user_agent="ua")

    with patch.dict(sys.modules, modules):
        response = fetcher.fetch("https://wiki.example.com/x")

    assert response.status_code == 403
    assert response.reason == "Forbidden"
    assert not response.ok
    browser.close.assert_called_once()


def test_fetch_without_navigation_response_is_status_zero():
    modules, _, page = _fake_playwright()
    page.goto.return_value = None
    fetcher = PlaywrightHeadlessFetcher(user_agent="ua")

    with patch.dict(sys.modules, modules):
        response = fetcher.fetch("https://wiki.example.com/x")

    assert response.status_code == 0
    assert response.reason is None
