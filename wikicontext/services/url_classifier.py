"""Classify wiki URLs into server and space identity."""
from urllib.parse import urlsplit, urlunsplit

from wikicontext.domain.wiki_locator import ParsedWikiUrl

SPACES_SEGMENT = "spaces"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _origin(scheme: str, hostname: str, port) -> str:
    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        host = f"{host}:{port}"
    return f"{scheme}://{host}"


def normalize_url(url: str) -> str:
    """Lowercase scheme and host and drop a default port, like a browser's `href`.

    URLs that do not parse or have no host come back unchanged.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return url
    if not parts.scheme or not parts.hostname:
        return url

    scheme = parts.scheme.lower()
    netloc = _origin(scheme, parts.hostname.lower(), port)[len(scheme) + 3:]
    if "@" in parts.netloc:
        netloc = f"{parts.netloc.rpartition('@')[0]}@{netloc}"
    path = parts.path
    if not path and scheme in _DEFAULT_PORTS:
        path = "/"
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def parse_wiki_url(url: str) -> ParsedWikiUrl:
    """Split `url` into its server origin and space name.

    The space is the segment right after the first `spaces` path segment,
    e.g. `https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home` gives
    server `https://wiki.example.com` and space `TEAM`. Anything that is not
    an absolute URL with that shape is invalid.
    """
    if not isinstance(url, str):
        return ParsedWikiUrl.invalid()
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return ParsedWikiUrl.invalid()
    if not parts.scheme or not parts.hostname:
        return ParsedWikiUrl.invalid()

    segments = parts.path.split("/")
    try:
        idx = segments.index(SPACES_SEGMENT)
    except ValueError:
        return ParsedWikiUrl.invalid()
    if idx + 1 >= len(segments) or not segments[idx + 1]:
        return ParsedWikiUrl.invalid()

    return ParsedWikiUrl(
        server=_origin(parts.scheme.lower(), parts.hostname.lower(), port),
        space=segments[idx + 1],
        is_valid=True,
    )
