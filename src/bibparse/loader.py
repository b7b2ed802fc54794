"""Loading bibliography documents from disk."""

import logging
from pathlib import Path

from .config import ParserConfig
from .document import parse
from .exceptions import FileOperationError
from .model import Document

logger = logging.getLogger(__name__)


def load(path: Path | str, config: ParserConfig | None = None) -> Document:
    """Read a UTF-8 bibliography file and parse it.

    Args:
        path: Path to the ``.bib`` file
        config: Parser configuration (defaults when ``None``)

    Returns:
        Items in file order

    Raises:
        FileOperationError: If the file cannot be read or is not valid UTF-8
        ParseError: If the content cannot be parsed
    """
    path = Path(path)
    logger.debug(f"Reading bibliography file: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Failed to read {path}: {e}") from e

    items = parse(text, config)
    logger.info(f"Loaded {len(items)} items from {path.name}")
    return items
