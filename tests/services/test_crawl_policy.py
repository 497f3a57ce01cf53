from wikicontext.domain import CollectorConfig, LinkBucket
from wikicontext.services.crawl_policy import CrawlPolicy

SEED = "https://wiki.example.com/wiki/spaces/TEAM/pages/1/Home"


def _bucket(other=0, external=0):
    bucket = LinkBucket(SEED)
    for i in range(other):
        bucket.add_other_space(f"https://wiki.example.com/wiki/spaces/S{i}/pages/{i}")
    for i in range(external):
        bucket.add_external(f"https://ext{i}.example.org/")
    return bucket


def test_default_caps():
    policy = CrawlPolicy(CollectorConfig())
    bucket = _bucket(other=25, external=15)
    other = policy.other_space_candidates(bucket)
    external = policy.external_candidates(bucket)
    assert len(other) == 20
    assert len(external) == 10
    assert other == bucket.other_space_links[:20]
    assert external[0] == "https://ext0.example.org/"


def test_caps_do_not_pad_short_lists():
    policy = CrawlPolicy(CollectorConfig())
    bucket = _bucket(other=3, external=1)
    assert len(policy.other_space_candidates(bucket)) == 3
    assert len(policy.external_candidates(bucket)) == 1


def test_zero_cap_selects_nothing():
    policy = CrawlPolicy(CollectorConfig(max_other_space_links=0, max_external_links=0))
    bucket = _bucket(other=3, external=3)
    assert policy.other_space_candidates(bucket) == []
    assert policy.external_candidates(bucket) == []


def test_delays_come_from_config():
    policy = CrawlPolicy(CollectorConfig(page_delay_seconds=0.5, external_delay_seconds=1.5))
    assert policy.page_delay == 0.5
    assert policy.external_delay == 1.5
