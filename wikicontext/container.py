"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from wikicontext import config as env
from wikicontext.domain.config import CollectorConfig
from wikicontext.services.crawl_controller import CrawlController
from wikicontext.services.crawl_policy import CrawlPolicy
from wikicontext.services.fetcher import HtmlPageFetcher
from wikicontext.services.fetcher_factory import FetcherFactory
from wikicontext.services.headless_browser_fetcher import PlaywrightHeadlessFetcher, PlaywrightHeadlessOptions
from wikicontext.services.html_text_extractor import HtmlTextExtractor
from wikicontext.services.http_service import HttpService, build_session
from wikicontext.services.status_sink import LoggingStatusSink, RecordingStatusSink


# Environment variables used by the container (read via `wikicontext.config` helpers).
#
# USER_AGENT (str, default: "WikiContext/0.1")
#   User-Agent header for outbound requests and the headless browser.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for outbound HTTP requests. Also reused for the headless fetcher.
#
# WIKICONTEXT_FETCH_MODE (str, default: "http")
#   "http" (requests session) or "headless_chromium" (Playwright).
#
# WIKICONTEXT_COOKIE (str | optional)
#   Raw Cookie header sent with every HTTP request (SSO session cookie).
#
# WIKICONTEXT_STORAGE_STATE (str path | optional)
#   Playwright storage-state file holding a logged-in browser session.
#
# WIKICONTEXT_PAGE_DELAY / WIKICONTEXT_EXTERNAL_DELAY (float seconds, 0.1 / 0.15)
#   Pause after each wiki page fetch / each external page fetch.
#
# WIKICONTEXT_MAX_OTHER_SPACE_LINKS / WIKICONTEXT_MAX_EXTERNAL_LINKS (int, 20 / 10)
#   How many other-space / external links are fetched per space.
#
# WIKICONTEXT_CALLER (str, default: USER_AGENT)
#   Caller identity written into the document header.
#
# WIKICONTEXT_STATUS_HISTORY (int, default: 200)
#   Status events kept by the recording sink for API responses.
_USER_AGENT = env.get_str_env("USER_AGENT", "WikiContext/0.1")

ENV = {
    "USER_AGENT": _USER_AGENT,
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "WIKICONTEXT_FETCH_MODE": env.get_str_env("WIKICONTEXT_FETCH_MODE", "http").strip().lower(),
    "WIKICONTEXT_COOKIE": env.get_optional_str_env("WIKICONTEXT_COOKIE"),
    "WIKICONTEXT_STORAGE_STATE": env.get_optional_str_env("WIKICONTEXT_STORAGE_STATE"),
    "WIKICONTEXT_PAGE_DELAY": env.get_float_env("WIKICONTEXT_PAGE_DELAY", 0.1),
    "WIKICONTEXT_EXTERNAL_DELAY": env.get_float_env("WIKICONTEXT_EXTERNAL_DELAY", 0.15),
    "WIKICONTEXT_MAX_OTHER_SPACE_LINKS": env.get_int_env("WIKICONTEXT_MAX_OTHER_SPACE_LINKS", 20),
    "WIKICONTEXT_MAX_EXTERNAL_LINKS": env.get_int_env("WIKICONTEXT_MAX_EXTERNAL_LINKS", 10),
    "WIKICONTEXT_CALLER": env.get_str_env("WIKICONTEXT_CALLER", _USER_AGENT),
    "WIKICONTEXT_STATUS_HISTORY": env.get_int_env("WIKICONTEXT_STATUS_HISTORY", 200),
}

# Keys whose values must not be echoed back by the API
SECRET_KEYS = frozenset({"WIKICONTEXT_COOKIE"})


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WikiContext."""

    config = providers.Configuration(default=ENV)

    # One session per process so cookies picked up during a run are reused
    http_session = providers.Singleton(
        build_session,
        cookie=config.WIKICONTEXT_COOKIE,
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=http_session.provided.get,
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    headless_fetcher = providers.Singleton(
        PlaywrightHeadlessFetcher,
        user_agent=config.USER_AGENT.as_(str),
        options=providers.Factory(
            PlaywrightHeadlessOptions,
            timeout_ms=providers.Callable(lambda t: t * 1000, config.HTTP_TIMEOUT.as_(int)),
            storage_state=config.WIKICONTEXT_STORAGE_STATE,
        ),
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        http_fetcher=http_service,
        headless_fetcher=headless_fetcher,
    )

    text_extractor = providers.Singleton(HtmlTextExtractor)

    page_fetcher = providers.Singleton(
        HtmlPageFetcher,
        raw_fetcher=providers.Callable(
            lambda factory, mode: factory.get(mode),
            fetcher_factory,
            config.WIKICONTEXT_FETCH_MODE.as_(str),
        ),
        extractor=text_extractor,
    )

    collector_config = providers.Singleton(
        CollectorConfig,
        max_other_space_links=config.WIKICONTEXT_MAX_OTHER_SPACE_LINKS.as_(int),
        max_external_links=config.WIKICONTEXT_MAX_EXTERNAL_LINKS.as_(int),
        page_delay_seconds=config.WIKICONTEXT_PAGE_DELAY.as_(float),
        external_delay_seconds=config.WIKICONTEXT_EXTERNAL_DELAY.as_(float),
        caller=config.WIKICONTEXT_CALLER.as_(str),
    )

    crawl_policy = providers.Singleton(
        CrawlPolicy,
        config=collector_config,
    )

    logging_status_sink = providers.Singleton(LoggingStatusSink)

    # Per-run sink so each API request reports only its own events
    status_sink = providers.Factory(
        RecordingStatusSink,
        max_events=config.WIKICONTEXT_STATUS_HISTORY.as_(int),
        forward=logging_status_sink,
    )

    crawl_controller = providers.Factory(
        CrawlController,
        page_fetcher=page_fetcher,
        crawl_policy=crawl_policy,
        status_sink=status_sink,
    )
