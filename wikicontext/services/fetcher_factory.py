from __future__ import annotations

from dataclasses import dataclass

from wikicontext.exceptions import UnknownFetchModeError
from wikicontext.services.fetcher import RawFetcher

HTTP = "http"
HEADLESS_CHROMIUM = "headless_chromium"


@dataclass(frozen=True)
class FetcherFactory:
    http_fetcher: RawFetcher
    headless_fetcher: RawFetcher

    def get(self, fetch_mode: str) -> RawFetcher:
        if fetch_mode is None or (isinstance(fetch_mode, str) and fetch_mode.strip() == ""):
            raise ValueError("fetch_mode is required")
        mode = fetch_mode.strip().lower()
        if mode == HTTP:
            return self.http_fetcher
        if mode == HEADLESS_CHROMIUM:
            return self.headless_fetcher
        raise UnknownFetchModeError(fetch_mode)
