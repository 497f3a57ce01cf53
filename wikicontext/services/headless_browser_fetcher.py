from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from wikicontext.domain.http_response import HttpResponse
from wikicontext.services.http_service import ACCEPT_HTML


@dataclass(frozen=True)
class PlaywrightHeadlessOptions:
    timeout_ms: int = 10_000
    wait_until: str = "networkidle"  # domcontentloaded | load | networkidle
    # Saved browser state (cookies, local storage) from an interactive SSO login
    storage_state: Optional[str] = None


class PlaywrightHeadlessFetcher:
    """Headless browser fetcher backed by Playwright.

    Renders JavaScript-heavy wiki pages and returns the final DOM HTML via
    page.content(). Ambient credentials come from `options.storage_state`.

    Notes:
    - A browser is launched per request; a crawl is sequential so at most
      one browser runs at a time.
    - Playwright is imported lazily so non-headless installs still work.
    """

    def __init__(self, *, user_agent: str, options: Optional[PlaywrightHeadlessOptions] = None):
        self._user_agent = user_agent
        self._options = options or PlaywrightHeadlessOptions()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="playwright")

    def _fetch_sync(self, url: str) -> HttpResponse:
        try:
            from playwright.sync_api import sync_playwright  # type: ignore
        except ImportError as e:
            raise RuntimeError(
                "Headless fetch requested but Playwright is not installed. "
                "Install 'playwright' and run 'python -m playwright install chromium'."
            ) from e

        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            try:
                context = browser.new_context(
                    user_agent=self._user_agent,
                    storage_state=self._options.storage_state,
                    extra_http_headers={"Accept": ACCEPT_HTML},
                )
                page = context.new_page()
                resp = page.goto(url, wait_until=self._options.wait_until, timeout=self._options.timeout_ms)
                status = int(resp.status) if resp is not None else 0
                reason = resp.status_text if resp is not None else None
                html = page.content()
                return HttpResponse(status_code=status, text=html, reason=reason)
            finally:
                browser.close()

    def fetch(self, url: str) -> HttpResponse:
        """Fetch a URL using Playwright, off the event loop when one is running."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return self._fetch_sync(url)
        return self._executor.submit(self._fetch_sync, url).result()
