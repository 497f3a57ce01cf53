import logging
import time
from collections import deque
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from wikicontext.domain.context_document import ContextDocument, PageKind, SpaceContribution
from wikicontext.domain.crawl_phase import CrawlPhase
from wikicontext.domain.crawl_session import CrawlSession
from wikicontext.domain.link_bucket import LinkBucket
from wikicontext.domain.page_content import PageContent
from wikicontext.domain.status import Severity
from wikicontext.domain.wiki_locator import WikiLocator
from wikicontext.exceptions import HttpFetchError, InvalidSeedUrlError, NoValidResourcesError
from wikicontext.services.context_aggregator import ContextAggregator
from wikicontext.services.crawl_policy import CrawlPolicy
from wikicontext.services.fetcher import PageFetcher
from wikicontext.services.link_categorizer import LinkCategory, categorize_link
from wikicontext.services.status_sink import LoggingStatusSink, StatusSink
from wikicontext.services.url_classifier import normalize_url, parse_wiki_url

logger = logging.getLogger(__name__)


def clean_seed_urls(seed_urls: Optional[Iterable[str]]) -> List[str]:
    """Strip seeds and drop blank ones, keeping order."""
    return [u.strip() for u in (seed_urls or []) if u and u.strip()]


class CrawlController:
    """Collects wiki context for a list of seed URLs.

    Each seed is crawled in three sequential phases: a breadth-first walk of
    its own space, a capped fetch of pages linked in other spaces of the same
    server, and a capped fetch of external pages. Fetches never overlap and
    every fetch is followed by a politeness pause.

    This class owns the crawl control-flow only. Fetching, link caps and
    document layout are delegated to injected collaborators.
    """

    def __init__(
        self,
        *,
        page_fetcher: PageFetcher,
        crawl_policy: CrawlPolicy,
        status_sink: Optional[StatusSink] = None,
        sleep_fn: Callable[[float], None] = time.sleep,
        now_fn: Optional[Callable[[], datetime]] = None,
    ):
        self.page_fetcher = page_fetcher
        self.crawl_policy = crawl_policy
        self.status_sink = status_sink if status_sink is not None else LoggingStatusSink()
        self.sleep_fn = sleep_fn
        self.now_fn = now_fn

    def _notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.status_sink.notify(message, severity)

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self.sleep_fn(seconds)

    def collect_context(self, seed_urls: Iterable[str], session: Optional[CrawlSession] = None) -> ContextDocument:
        """Crawl every seed in order and return the aggregated document.

        Raises NoValidResourcesError when all seeds are blank. Any other
        error is confined to the seed that raised it and shows up as an
        inline marker in the document.
        """
        seeds = clean_seed_urls(seed_urls)
        if not seeds:
            raise NoValidResourcesError()

        if session is None:
            session = CrawlSession()
        session.reset()

        aggregator = ContextAggregator(self.crawl_policy.config.caller, now_fn=self.now_fn)
        aggregator.begin(len(seeds))

        for seed_url in seeds:
            try:
                self._notify(f"Processing Wiki URL: {seed_url}")
                aggregator.add_space(self.crawl_space(seed_url, session))
            except InvalidSeedUrlError as e:
                aggregator.add_error(seed_url, str(e))
                self._notify(f"Error processing {seed_url}: {e}", Severity.ERROR)
            except Exception as e:
                logger.error("Crawl failed for seed %s: %s", seed_url, e, exc_info=True)
                aggregator.add_error(seed_url, str(e))
                self._notify(f"Error processing {seed_url}: {e}", Severity.ERROR)

        document = aggregator.finish(session)
        self._notify(
            f"Context collected: {document.pages_processed} pages from "
            f"{document.spaces_processed} spaces ({document.size_kb} KB)",
            Severity.SUCCESS,
        )
        return document

    def crawl_space(self, seed_url: str, session: CrawlSession) -> SpaceContribution:
        parsed = parse_wiki_url(seed_url)
        if not parsed.is_valid:
            raise InvalidSeedUrlError(seed_url)

        locator = parsed.locator
        if not session.claim_space(locator):
            self._notify(f"Space {locator.space} already processed, skipping...")
            return SpaceContribution.empty(locator)

        contribution = SpaceContribution(locator)
        # extracted links are normalized the same way
        bucket = self._discover(normalize_url(seed_url), locator, session, contribution)

        session.enter_phase(locator, CrawlPhase.EXPANDING_OTHER_SPACES)
        self._notify(
            f"Phase 2: Fetching linked pages from other spaces ({len(bucket.other_space_links)} found)..."
        )
        self._expand(
            self.crawl_policy.other_space_candidates(bucket),
            PageKind.OTHER_SPACE_PAGE,
            self.crawl_policy.page_delay,
            session,
            contribution,
        )

        session.enter_phase(locator, CrawlPhase.EXPANDING_EXTERNAL)
        self._notify(f"Phase 3: Fetching external linked pages ({len(bucket.external_links)} found)...")
        self._expand(
            self.crawl_policy.external_candidates(bucket),
            PageKind.EXTERNAL_PAGE,
            self.crawl_policy.external_delay,
            session,
            contribution,
        )

        session.enter_phase(locator, CrawlPhase.DONE)
        return contribution

    def _discover(self, seed_url: str, locator: WikiLocator, session: CrawlSession, contribution: SpaceContribution) -> LinkBucket:
        """Phase 1: breadth-first walk over the pages of the seed's space."""
        session.enter_phase(locator, CrawlPhase.DISCOVERING)
        self._notify(f'Phase 1: Collecting all pages from space "{locator.space}"...')

        bucket = LinkBucket(seed_url)
        queue = deque([seed_url])
        space_prefix = locator.space_prefix

        while queue:
            url = queue.popleft()
            if not session.mark_visited(url):
                continue

            content = self._fetch(url)
            if content.success and content.text:
                contribution.add(url, content.text, PageKind.SPACE_PAGE)

            for link in content.links:
                category = categorize_link(link, locator.server, space_prefix)
                if category is LinkCategory.SAME_SPACE:
                    if not session.is_visited(link) and bucket.add_space_page(link):
                        queue.append(link)
                elif category is LinkCategory.OTHER_SPACE_SAME_SERVER:
                    bucket.add_other_space(link)
                elif category is LinkCategory.EXTERNAL:
                    bucket.add_external(link)

            self._pause(self.crawl_policy.page_delay)

        return bucket

    def _expand(self, links: List[str], kind: PageKind, delay: float, session: CrawlSession, contribution: SpaceContribution) -> None:
        """Fetch each link once, without following its own links."""
        for link in links:
            if not session.mark_visited(link):
                logger.debug("Skipping (visited) %s", link)
                continue
            content = self._fetch(link)
            if content.success and content.text:
                contribution.add(link, content.text, kind)
            self._pause(delay)

    def _fetch(self, url: str) -> PageContent:
        self._notify(f"Fetching: {url}")
        try:
            content = self.page_fetcher.fetch(url)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            content = PageContent.failed(str(e.original))
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            content = PageContent.failed(str(e))

        if not content.success:
            self._notify(f"Warning: Could not fetch {url} - {content.error}", Severity.WARNING)
        return content
