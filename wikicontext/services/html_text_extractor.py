import logging
from typing import Callable, List, Optional, Tuple
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from wikicontext.services.url_classifier import normalize_url

logger = logging.getLogger(__name__)

# Elements that never carry page content
NON_CONTENT_TAGS = ['script', 'style', 'nav', 'header', 'footer', 'iframe', 'noscript']


class HtmlTextExtractor:
    """Turn a wiki page's HTML into plain text plus its outbound links.

    Non-content elements are removed first, so links that only appear in
    navigation chrome are not followed.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, base_url: str, html: Optional[str]) -> Tuple[str, List[str]]:
        if not html:
            return "", []

        soup = self._soup_factory(html)
        for tag in NON_CONTENT_TAGS:
            for element in soup.find_all(tag):
                # nested matches go away with their ancestor
                if not element.decomposed:
                    element.decompose()

        root = soup.body or soup
        text = root.get_text(separator="\n", strip=True)
        return text.strip(), self._extract_links(base_url, soup)

    def _extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        links = {}
        for a in soup.find_all("a", href=True):
            try:
                abs_url = normalize_url(urljoin(base_url, a.get("href").strip()))
                scheme = urlsplit(abs_url).scheme
            except ValueError:
                logger.debug("Skipping unparseable href %r on %s", a.get("href"), base_url)
                continue
            if scheme in ("http", "https"):
                links.setdefault(abs_url, None)
        return list(links)
