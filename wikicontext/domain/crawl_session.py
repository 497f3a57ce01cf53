from typing import Optional, Set

from wikicontext.domain.crawl_phase import CrawlPhase
from wikicontext.domain.visited_tracker import VisitedTracker
from wikicontext.domain.wiki_locator import WikiLocator


class CrawlSession:
    """
    Mutable state shared by every space crawl of one collection run.

    Holds the global visited set (a URL is fetched at most once per run) and
    the processed space keys (a space is crawled at most once per run). The
    controller resets the session at the start of each run; it is passed by
    reference and never stored at module level.
    """

    def __init__(self, visited_tracker: Optional[VisitedTracker] = None):
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        self.processed_spaces: Set[str] = set()
        # Space and phase currently being crawled, for status reporting
        self.current_space: Optional[WikiLocator] = None
        self.phase: Optional[CrawlPhase] = None

    def reset(self) -> None:
        self.visited_tracker.clear()
        self.processed_spaces.clear()
        self.current_space = None
        self.phase = None

    def claim_space(self, locator: WikiLocator) -> bool:
        """Record `locator` as processed. Returns False if it already was."""
        if locator.key in self.processed_spaces:
            return False
        self.processed_spaces.add(locator.key)
        return True

    def enter_phase(self, locator: WikiLocator, phase: CrawlPhase) -> None:
        self.current_space = locator
        self.phase = phase

    def mark_visited(self, url: str) -> bool:
        """Delegate to visited tracker; True when `url` had not been visited."""
        return self.visited_tracker.mark_if_new(url)

    def is_visited(self, url: str) -> bool:
        """Delegate to visited tracker."""
        return self.visited_tracker.is_visited(url)

    @property
    def pages_processed(self) -> int:
        return len(self.visited_tracker)

    @property
    def spaces_processed(self) -> int:
        return len(self.processed_spaces)
