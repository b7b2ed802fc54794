"""Parsing of comma separated ``key = value`` tag lists."""

import logging
from collections.abc import Iterable

from .config import ParserConfig
from .exceptions import ParseError
from .scanner import ALPHA_RE, NoMatch, expect_literal, try_literal, try_token
from .types import TagMap, TagPair
from .values import scan_value

logger = logging.getLogger(__name__)


def scan_tag_pair(text: str, offset: int, config: ParserConfig | None = None) -> tuple[int, TagPair]:
    """Parse a single ``key = value`` pair, whitespace allowed between tokens.

    Raises:
        NoMatch: If no alphabetic key starts the pair
        ParseError: If the key is present but ``=`` or the value is missing or malformed
    """
    key_match = try_token(ALPHA_RE, text, offset)
    if key_match is None:
        raise NoMatch
    offset, key = key_match

    offset = expect_literal(text, offset, "=")
    try:
        offset, value = scan_value(text, offset, config)
    except NoMatch:
        raise ParseError(f"Expected a value for tag '{key}'") from None
    return offset, (key, value)


def scan_tag_list(text: str, offset: int, config: ParserConfig | None = None) -> tuple[int, TagMap]:
    """Parse zero or more comma separated tag pairs.

    A single trailing comma after the list is consumed. Parsing stops at the
    first position where no further pair starts; the caller checks for its
    own closing delimiter there.

    Args:
        text: Complete document text
        offset: Offset at which the list starts
        config: Parser configuration (defaults when ``None``)

    Returns:
        Tuple ``(end_offset, tags)`` with keys lower-cased, later duplicates winning
    """
    pairs: list[TagPair] = []
    while True:
        try:
            offset, pair = scan_tag_pair(text, offset, config)
        except NoMatch:
            break
        pairs.append(pair)

        after_comma = try_literal(text, offset, ",")
        if after_comma is None:
            return offset, fold_tags(pairs)
        offset = after_comma

    # No pair follows: either a trailing comma was just consumed or the list is empty
    if not pairs:
        after_comma = try_literal(text, offset, ",")
        if after_comma is not None:
            offset = after_comma
    return offset, fold_tags(pairs)


def fold_tags(pairs: Iterable[TagPair]) -> TagMap:
    """Fold parsed pairs into a fresh mapping.

    Keys are lower-cased; when a key repeats, the later value replaces the
    earlier one.
    """
    tags: TagMap = {}
    for key, value in pairs:
        normalized = key.lower()
        if normalized in tags:
            logger.debug("Duplicate tag '%s': later value replaces earlier one", normalized)
        tags[normalized] = value
    return tags
