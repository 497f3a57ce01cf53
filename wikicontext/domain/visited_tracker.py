class VisitedTracker:
    """
    Tracks which URLs have been visited during a collection run.

    The set only grows until `clear()`; there is no eviction, since a URL
    that drops out of the tracker could be fetched a second time.
    """

    def __init__(self):
        # dict keeps first-visit order for reporting
        self._visited: "dict[str, None]" = {}

    def mark(self, url: str) -> None:
        """Mark a URL as visited."""
        self._visited.setdefault(url, None)

    def mark_if_new(self, url: str) -> bool:
        """Mark `url` and report whether it was unseen before the call."""
        if url in self._visited:
            return False
        self._visited[url] = None
        return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def clear(self) -> None:
        self._visited.clear()

    def urls(self) -> list:
        return list(self._visited)

    def __len__(self) -> int:
        return len(self._visited)
