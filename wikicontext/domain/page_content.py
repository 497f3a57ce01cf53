from typing import NamedTuple, Optional, Tuple


class PageContent(NamedTuple):
    """What a page fetcher hands back for one URL."""
    text: str
    links: Tuple[str, ...]
    success: bool
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "PageContent":
        return cls(text="", links=(), success=False, error=error)
