from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, NamedTuple, Optional

from wikicontext.domain.wiki_locator import WikiLocator
from wikicontext.utils.datetime_utils import iso_date


class PageKind(Enum):
    SPACE_PAGE = "PAGE"
    OTHER_SPACE_PAGE = "LINKED PAGE (Other Space)"
    EXTERNAL_PAGE = "EXTERNAL LINKED PAGE"

    @property
    def label(self) -> str:
        return self.value


class PageSection(NamedTuple):
    url: str
    text: str
    kind: PageKind


@dataclass
class SpaceContribution:
    """Page sections collected for one seed URL, in fetch order.

    A skipped space (already processed earlier in the run) is an empty
    contribution and renders to nothing.
    """

    locator: Optional[WikiLocator]
    sections: List[PageSection] = field(default_factory=list)
    skipped: bool = False

    @classmethod
    def empty(cls, locator: Optional[WikiLocator] = None) -> "SpaceContribution":
        return cls(locator=locator, skipped=True)

    def add(self, url: str, text: str, kind: PageKind) -> None:
        self.sections.append(PageSection(url, text, kind))

    @property
    def is_empty(self) -> bool:
        return self.skipped


@dataclass(frozen=True)
class ContextDocument:
    """The aggregated text handed to the LLM, plus the numbers in its summary."""

    text: str
    generated_at: datetime
    resource_count: int
    pages_processed: int
    spaces_processed: int

    @property
    def filename(self) -> str:
        return f"wiki_context_{iso_date(self.generated_at)}.txt"

    @property
    def size_kb(self) -> int:
        return round(len(self.text) / 1024)

    def to_bytes(self) -> bytes:
        return self.text.encode("utf-8")

    def __str__(self) -> str:
        return self.text
