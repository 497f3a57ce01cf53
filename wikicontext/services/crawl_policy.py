from typing import List

from wikicontext.domain.config import CollectorConfig
from wikicontext.domain.link_bucket import LinkBucket


class CrawlPolicy:
    """Encapsulates crawl decision rules: link caps and politeness pauses.

    Separates policy decisions from crawl orchestration logic. Capped
    selections take links in first-discovered order.
    """

    def __init__(self, config: CollectorConfig):
        self.config = config

    def other_space_candidates(self, bucket: LinkBucket) -> List[str]:
        return bucket.other_space_links[: self.config.max_other_space_links]

    def external_candidates(self, bucket: LinkBucket) -> List[str]:
        return bucket.external_links[: self.config.max_external_links]

    @property
    def page_delay(self) -> float:
        return self.config.page_delay_seconds

    @property
    def external_delay(self) -> float:
        return self.config.external_delay_seconds
