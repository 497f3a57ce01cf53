from typing import NamedTuple, Optional


class WikiLocator(NamedTuple):
    """Identity of a wiki space: the server origin plus the space name."""
    server: str
    space: str

    @property
    def key(self) -> str:
        return f"{self.server}::{self.space}"

    @property
    def space_prefix(self) -> str:
        """URL prefix shared by every page of this space."""
        return f"{self.server}/wiki/spaces/{self.space}/"


class ParsedWikiUrl(NamedTuple):
    """Result of classifying a URL. Invalid results never carry server or space."""
    server: Optional[str]
    space: Optional[str]
    is_valid: bool

    @classmethod
    def invalid(cls) -> "ParsedWikiUrl":
        return cls(None, None, False)

    @property
    def locator(self) -> Optional[WikiLocator]:
        if not self.is_valid:
            return None
        return WikiLocator(self.server, self.space)
