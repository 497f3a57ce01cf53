import pytest

from wikicontext.services.url_classifier import normalize_url, parse_wiki_url


def test_parses_server_and_space():
    parsed = parse_wiki_url("https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home")
    assert parsed.is_valid
    assert parsed.server == "https://wiki.example.com"
    assert parsed.space == "TEAM"


def test_keeps_non_default_port():
    parsed = parse_wiki_url("http://wiki.example.com:8090/wiki/spaces/ops/overview")
    assert parsed.server == "http://wiki.example.com:8090"
    assert parsed.space == "ops"


def test_drops_default_port_and_lowercases_host():
    parsed = parse_wiki_url("HTTPS://Wiki.Example.com:443/wiki/spaces/Team/pages/1")
    assert parsed.server == "https://wiki.example.com"
    # space names are case sensitive
    assert parsed.space == "Team"


def test_spaces_segment_need_not_follow_wiki():
    parsed = parse_wiki_url("https://host.example.com/confluence/spaces/DOC")
    assert parsed.is_valid
    assert parsed.space == "DOC"


def test_ignores_query_and_fragment():
    parsed = parse_wiki_url("https://wiki.example.com/wiki/spaces/TEAM/pages/1?focused=2#top")
    assert parsed.space == "TEAM"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "/wiki/spaces/TEAM/pages/1",
        "wiki.example.com/wiki/spaces/TEAM",
        "https://wiki.example.com/wiki/display/TEAM/Home",
        "https://wiki.example.com/wiki/spaces",
        "https://wiki.example.com/wiki/spaces/",
        "https://wiki.example.com/wiki/spaces//pages/1",
        "https://wiki.example.com/wiki/myspaces/TEAM",
        "https://wiki.example.com:notaport/wiki/spaces/TEAM",
    ],
)
def test_invalid_shapes_report_nothing(url):
    parsed = parse_wiki_url(url)
    assert parsed.is_valid is False
    assert parsed.server is None
    assert parsed.space is None
    assert parsed.locator is None


def test_non_string_input_is_invalid():
    assert parse_wiki_url(None).is_valid is False


def test_classification_is_repeatable():
    url = "https://wiki.example.com/wiki/spaces/TEAM/pages/2/Guide"
    assert parse_wiki_url(url) == parse_wiki_url(url)


def test_pages_of_one_space_share_locator():
    a = parse_wiki_url("https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home")
    b = parse_wiki_url("https://wiki.example.com/wiki/spaces/TEAM/pages/2/Guide")
    assert a.locator == b.locator
    assert a.locator.key == "https://wiki.example.com::TEAM"


@pytest.mark.parametrize("url,expected", [
    ("https://Wiki.Example.com/wiki/spaces/TEAM/pages/2/Guide", "https://wiki.example.com/wiki/spaces/TEAM/pages/2/Guide"),
    ("https://wiki.example.com:443/wiki/spaces/TEAM?x=1#top", "https://wiki.example.com/wiki/spaces/TEAM?x=1#top"),
    ("HTTP://wiki.example.com:80", "http://wiki.example.com/"),
    ("http://wiki.example.com:8090/a", "http://wiki.example.com:8090/a"),
    ("https://User@Wiki.Example.com/a", "https://User@wiki.example.com/a"),
])
def test_normalize_url_matches_parsed_server(url, expected):
    assert normalize_url(url) == expected


def test_normalize_url_leaves_unparseable_alone():
    assert normalize_url("not a url") == "not a url"
    assert normalize_url("http://host:notaport/x") == "http://host:notaport/x"
