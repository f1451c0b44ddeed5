"""
Writes generated files to disk.
"""

from pathlib import Path
from typing import Iterable, List

from .core.generator import GeneratedFile
from ..logging_config import get_logger

logger = get_logger(__name__)


def write_generated_file(path: str | Path, content: str) -> bool:
    """Write one file, creating parent directories.

    Args:
        path: Destination path.
        content: Full file text.

    Returns:
        True if the file was written, False if the write failed.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the configured line endings as generated
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        return False

    logger.info("Wrote %s", path)
    return True


def write_files(root: str | Path, files: Iterable[GeneratedFile]) -> List[Path]:
    """Write generated files below ``root``.

    Returns:
        Paths that were written successfully.
    """
    root = Path(root)
    written = []
    for generated in files:
        target = root / generated.path
        if write_generated_file(target, generated.content):
            written.append(target)
    return written
