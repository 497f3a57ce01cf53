"""Domain objects for WikiContext - explicit re-exports to satisfy linters."""
from .wiki_locator import WikiLocator as WikiLocator, ParsedWikiUrl as ParsedWikiUrl
from .page_content import PageContent as PageContent
from .config import CollectorConfig as CollectorConfig
from .crawl_phase import CrawlPhase as CrawlPhase
from .crawl_session import CrawlSession as CrawlSession
from .link_bucket import LinkBucket as LinkBucket
from .context_document import (
    ContextDocument as ContextDocument,
    PageKind as PageKind,
    PageSection as PageSection,
    SpaceContribution as SpaceContribution,
)
from .status import Severity as Severity, StatusEvent as StatusEvent

__all__ = [
    "WikiLocator",
    "ParsedWikiUrl",
    "PageContent",
    "CollectorConfig",
    "CrawlPhase",
    "CrawlSession",
    "LinkBucket",
    "ContextDocument",
    "PageKind",
    "PageSection",
    "SpaceContribution",
    "Severity",
    "StatusEvent",
]
