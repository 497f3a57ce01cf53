import requests
from typing import Callable, Optional

from wikicontext.domain.http_response import HttpResponse
from wikicontext.exceptions import HttpFetchError

ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml"


def build_session(cookie: Optional[str] = None) -> requests.Session:
    """Create the shared session that carries ambient credentials.

    Cookies set by the wiki (SSO redirects and the like) stay on the session
    for the rest of the run; `cookie` seeds it with a raw Cookie header.
    User-Agent and Accept are sent per request by `HttpService.fetch`.
    """
    session = requests.Session()
    if cookie:
        session.headers["Cookie"] = cookie
    return session


class HttpService:
    """
    HTTP client wrapper for fetching wiki pages.

    Requires http_client callable for dependency injection; in production this
    is the bound `get` of a `requests.Session` so credentials ride along.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, Content-Type and reason."""
        headers = {"User-Agent": self.user_agent, "Accept": ACCEPT_HTML}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct, getattr(resp, 'reason', None))
