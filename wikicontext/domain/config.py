from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CollectorConfig:
    """Crawl-behavior settings for a collection run."""

    max_other_space_links: int = 20
    max_external_links: int = 10
    page_delay_seconds: float = 0.1
    external_delay_seconds: float = 0.15
    caller: str = "WikiContext/0.1"

    def __post_init__(self):
        if self.max_other_space_links < 0 or self.max_external_links < 0:
            raise ValueError("link caps must not be negative")
        if self.page_delay_seconds < 0 or self.external_delay_seconds < 0:
            raise ValueError("delays must not be negative")
