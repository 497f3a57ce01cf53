import logging
from pathlib import Path
from typing import Union

from wikicontext.domain.context_document import ContextDocument

logger = logging.getLogger(__name__)


def write_context_file(document: ContextDocument, directory: Union[str, Path] = ".") -> Path:
    """Write the document as `wiki_context_<date>.txt` (UTF-8) under `directory`."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / document.filename
    path.write_bytes(document.to_bytes())
    logger.info("Wrote context file %s (%s KB)", path, document.size_kb)
    return path
