import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_document(path: str | Path, content: str) -> Path:
    """
    Write *content* verbatim to *path*, creating parent directories as needed.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.debug("wrote %d characters to %s", len(content), target)
    return target
