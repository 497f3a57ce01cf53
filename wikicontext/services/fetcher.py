from __future__ import annotations

import logging
from typing import Optional, Protocol

from wikicontext.domain.http_response import HttpResponse
from wikicontext.domain.page_content import PageContent
from wikicontext.services.html_text_extractor import HtmlTextExtractor

logger = logging.getLogger(__name__)


class RawFetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    Implementations carry the ambient credentials (requests session vs
    headless browser storage state).
    """

    def fetch(self, url: str) -> HttpResponse: ...


class PageFetcher(Protocol):
    """Fetch a URL and return its extracted text and outbound links."""

    def fetch(self, url: str) -> PageContent: ...


class HtmlPageFetcher:
    def __init__(self, raw_fetcher: RawFetcher, extractor: Optional[HtmlTextExtractor] = None):
        self._raw_fetcher = raw_fetcher
        self._extractor = extractor or HtmlTextExtractor()

    def fetch(self, url: str) -> PageContent:
        """Fetch `url`. Transport errors propagate; HTTP errors come back as failed content."""
        response = self._raw_fetcher.fetch(url)
        if not response.ok:
            logger.debug("Non-success status for %s: %s", url, response.status_code)
            error = f"HTTP {response.status_code}"
            if response.reason:
                error = f"{error}: {response.reason}"
            return PageContent.failed(error)

        text, links = self._extractor.extract(url, response.text)
        return PageContent(text=text, links=tuple(links), success=True)
