"""File output for generated pages and artifacts."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_text(path: Path, text: str) -> Path:
    """Write UTF-8 text, creating parent directories.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_text_best_effort(path: Path, text: str) -> bool:
    """Write a legacy compatibility copy; failures are logged, not raised.

    Returns:
        True if the file was written.
    """
    try:
        write_text(path, text)
    except OSError as e:
        logger.warning(f"Skipped legacy copy {path}: {e}")
        return False
    return True
