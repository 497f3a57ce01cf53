from typing import Dict, List, Set


class LinkBucket:
    """Links discovered while crawling one space, split by category.

    Other-space and external links are deduplicated by membership and keep
    the order in which they were first discovered, so the capped selections
    made after Phase 1 are reproducible.
    """

    def __init__(self, seed_url: str):
        self.space_pages: Set[str] = {seed_url}
        self._other_space: Dict[str, None] = {}
        self._external: Dict[str, None] = {}

    def add_space_page(self, url: str) -> bool:
        if url in self.space_pages:
            return False
        self.space_pages.add(url)
        return True

    def add_other_space(self, url: str) -> None:
        self._other_space.setdefault(url, None)

    def add_external(self, url: str) -> None:
        self._external.setdefault(url, None)

    @property
    def other_space_links(self) -> List[str]:
        return list(self._other_space)

    @property
    def external_links(self) -> List[str]:
        return list(self._external)
