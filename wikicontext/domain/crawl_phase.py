from enum import Enum


class CrawlPhase(str, Enum):
    """Stages of one space's crawl, entered strictly in declaration order."""
    DISCOVERING = "discovering"
    EXPANDING_OTHER_SPACES = "expanding_other_spaces"
    EXPANDING_EXTERNAL = "expanding_external"
    DONE = "done"
