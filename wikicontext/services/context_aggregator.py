from datetime import datetime
from typing import Callable, List, Optional

from wikicontext.domain.context_document import ContextDocument, PageSection, SpaceContribution
from wikicontext.domain.crawl_session import CrawlSession
from wikicontext.utils.datetime_utils import iso_timestamp, utc_now

DOCUMENT_TITLE = "=== CORPORATE DOCUMENTATION CONTEXT ==="
RULE = "=" * 80


class ContextAggregator:
    """Builds the context document for one collection run.

    Usage is strictly append-only: `begin`, any number of `add_space` /
    `add_error`, then `finish`.
    """

    def __init__(self, caller: str, now_fn: Optional[Callable[[], datetime]] = None):
        self.caller = caller
        self._now_fn = now_fn or utc_now
        self._parts: List[str] = []
        self._generated_at: Optional[datetime] = None
        self._resource_count = 0

    def begin(self, resource_count: int) -> None:
        self._generated_at = self._now_fn()
        self._resource_count = int(resource_count)
        self._parts = [
            f"{DOCUMENT_TITLE}\n"
            f"Generated: {iso_timestamp(self._generated_at)}\n"
            f"Total Resources: {self._resource_count}\n"
            f"User: {self.caller}\n\n"
        ]

    def add_space(self, contribution: SpaceContribution) -> None:
        self._parts.append(render_space(contribution))

    def add_error(self, url: str, message: str) -> None:
        self._parts.append(f"\n\nERROR processing {url}: {message}\n\n")

    def finish(self, session: CrawlSession) -> ContextDocument:
        if self._generated_at is None:
            raise RuntimeError("begin() must be called before finish()")
        self._parts.append(
            f"\n\n{RULE}\n"
            f"Total pages processed: {session.pages_processed}\n"
            f"Total spaces processed: {session.spaces_processed}\n"
            f"{RULE}\n"
        )
        return ContextDocument(
            text="".join(self._parts),
            generated_at=self._generated_at,
            resource_count=self._resource_count,
            pages_processed=session.pages_processed,
            spaces_processed=session.spaces_processed,
        )


def render_section(section: PageSection) -> str:
    return f"\n--- {section.kind.label}: {section.url} ---\n\n{section.text}\n"


def render_space(contribution: SpaceContribution) -> str:
    if contribution.is_empty:
        return ""
    locator = contribution.locator
    header = (
        f"\n\n{RULE}\n"
        f"WIKI SPACE: {locator.space}\n"
        f"Server: {locator.server}\n"
        f"{RULE}\n\n"
    )
    return header + "".join(render_section(s) for s in contribution.sections)
