from enum import Enum
from typing import Optional

from wikicontext.services.url_classifier import parse_wiki_url

WIKI_SPACES_PATH = "/wiki/spaces/"


class LinkCategory(str, Enum):
    SAME_SPACE = "same_space"
    OTHER_SPACE_SAME_SERVER = "other_space_same_server"
    EXTERNAL = "external"


def categorize_link(link: str, server: str, space_prefix: str) -> Optional[LinkCategory]:
    """Decide which bucket a discovered link belongs to.

    Same-space membership is a plain string prefix test against
    `space_prefix`; links that differ only in encoding from the prefix are
    not same-space. Returns None for links that are not http(s).
    """
    if link.startswith(space_prefix):
        return LinkCategory.SAME_SPACE
    if WIKI_SPACES_PATH in link:
        parsed = parse_wiki_url(link)
        if parsed.is_valid and parsed.server == server:
            return LinkCategory.OTHER_SPACE_SAME_SERVER
        return LinkCategory.EXTERNAL
    if link.startswith("http"):
        return LinkCategory.EXTERNAL
    return None
