"""Document level parsing: a sequence of items separated by whitespace."""

import logging

from .config import ParserConfig
from .exceptions import ParseError
from .items import scan_item
from .model import Document
from .scanner import NoMatch, skip_whitespace

logger = logging.getLogger(__name__)


def parse_document(text: str, config: ParserConfig | None = None) -> tuple[int, Document]:
    """Parse items from the start of ``text`` until no further item is recognized.

    Stopping because no item starts at the current offset is not an error:
    the items parsed so far are returned and the remaining suffix is dropped
    (logged as a warning), unless ``config.strict`` is set. Malformed content
    inside a recognized item always raises.

    Args:
        text: Complete document text
        config: Parser configuration (defaults when ``None``)

    Returns:
        Tuple ``(end_offset, items)`` where ``end_offset`` is where parsing stopped

    Raises:
        ParseError: If a recognized item is malformed, or trailing content is
            left over in strict mode
    """
    config = ParserConfig.resolve(config)
    items: Document = []

    offset = skip_whitespace(text, 0)
    while offset < len(text):
        try:
            offset, item = scan_item(text, offset, config)
        except NoMatch:
            break
        items.append(item)
        offset = skip_whitespace(text, offset)

    if offset < len(text):
        if config.strict:
            raise ParseError("Unrecognized content after the last item")
        logger.warning(
            "Discarding %d characters of unrecognized content after %d items",
            len(text) - offset,
            len(items),
        )

    logger.debug("Parsed %d items", len(items))
    return offset, items


def parse(text: str, config: ParserConfig | None = None) -> Document:
    """Parse a complete bibliography document into its ordered items.

    Args:
        text: Complete document text
        config: Parser configuration (defaults when ``None``)

    Returns:
        Items in input order

    Raises:
        ParseError: If the document cannot be interpreted; no partial result is returned
    """
    _, items = parse_document(text, config)
    return items
