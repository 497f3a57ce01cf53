import logging
from typing import List

import yaml

logger = logging.getLogger(__name__)


def load_seed_file(path: str) -> List[str]:
    """Load seed URLs from a YAML file.

    The file holds either a plain list of URLs or a mapping with a
    `seed_urls` key (string or list). Blank entries are kept; the crawl
    controller filters them.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("seed_urls")
        if data is None:
            logger.warning("Seed file %s has no seed_urls entry", path)
            return []
    if isinstance(data, str):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a list of URLs")
    return ["" if item is None else str(item) for item in data]
