"""Classification and parsing of top-level ``@`` items.

An item is recognized by trying a fixed, ordered list of alternatives:
``@STRING``, ``@PREAMBLE``, ``@COMMENT`` and finally a generic typed entry.
The first alternative whose structural prefix matches wins. Once an
alternative has committed (its keyword was read, or for entries the opening
brace after the type), any further failure is a :class:`ParseError` and no
other alternative is tried.
"""

import logging
from collections.abc import Callable

from .config import ParserConfig
from .model import Comment, Entry, Item, Preamble, StringMacro
from .scanner import (
    ALPHA_RE,
    ALPHANUMERIC_RE,
    NoMatch,
    expect_literal,
    expect_token,
    skip_whitespace,
    try_literal,
    try_token,
)
from .tags import scan_tag_list
from .values import skip_group

logger = logging.getLogger(__name__)

Alternative = Callable[[str, int, ParserConfig], tuple[int, Item]]


def scan_item(text: str, offset: int, config: ParserConfig | None = None) -> tuple[int, Item]:
    """Parse the item starting at ``offset`` (leading whitespace is skipped).

    Args:
        text: Complete document text
        offset: Offset at which an ``@`` marker may start
        config: Parser configuration (defaults when ``None``)

    Returns:
        Tuple ``(end_offset, item)``

    Raises:
        NoMatch: If no alternative applies; nothing has been consumed
        ParseError: If an alternative committed but its body is malformed
    """
    config = ParserConfig.resolve(config)
    for alternative in ALTERNATIVES:
        try:
            return alternative(text, offset, config)
        except NoMatch:
            continue
    raise NoMatch


def _scan_keyword(text: str, offset: int, keyword: str | None = None) -> tuple[int, str]:
    """Match ``@`` followed by an alphabetic word, optionally a specific keyword.

    Keywords are compared case-insensitively against the whole word, so
    ``@STRINGS`` does not match the ``STRING`` keyword.
    """
    offset = try_literal(text, offset, "@")
    if offset is None:
        raise NoMatch
    word_match = try_token(ALPHA_RE, text, offset)
    if word_match is None:
        raise NoMatch
    offset, word = word_match
    if keyword is not None and word.upper() != keyword:
        raise NoMatch
    return offset, word


def _scan_string_macro(text: str, offset: int, config: ParserConfig) -> tuple[int, Item]:
    offset, _ = _scan_keyword(text, offset, "STRING")
    logger.debug("Parsing @STRING declaration")

    offset = expect_literal(text, offset, "{")
    offset, tags = scan_tag_list(text, offset, config)
    offset = expect_literal(text, offset, "}")
    return offset, StringMacro(tags)


def _skip_optional_body(text: str, offset: int, config: ParserConfig) -> int:
    """Consume a balanced body after a keyword, if one follows."""
    body_start = skip_whitespace(text, offset)
    try:
        return skip_group(text, body_start, config)
    except NoMatch:
        return offset


def _scan_preamble(text: str, offset: int, config: ParserConfig) -> tuple[int, Item]:
    offset, _ = _scan_keyword(text, offset, "PREAMBLE")
    logger.debug("Skipping @PREAMBLE body")
    return _skip_optional_body(text, offset, config), Preamble()


def _scan_comment(text: str, offset: int, config: ParserConfig) -> tuple[int, Item]:
    offset, _ = _scan_keyword(text, offset, "COMMENT")
    logger.debug("Skipping @COMMENT body")
    return _skip_optional_body(text, offset, config), Comment()


def _scan_entry(text: str, offset: int, config: ParserConfig) -> tuple[int, Item]:
    offset, entry_type = _scan_keyword(text, offset)
    offset = try_literal(text, offset, "{")
    if offset is None:
        raise NoMatch

    # Committed from here on: '@type{' identifies an entry
    offset, label = expect_token(ALPHANUMERIC_RE, text, offset, f"a label for @{entry_type}")
    offset = expect_literal(text, offset, ",")
    offset, tags = scan_tag_list(text, offset, config)
    offset = expect_literal(text, offset, "}")

    logger.debug("Parsed @%s entry '%s' with %d tags", entry_type, label, len(tags))
    return offset, Entry(entry_type=entry_type.upper(), label=label, tags=tags)


# Tried in order; the first alternative that does not raise NoMatch wins
ALTERNATIVES: tuple[Alternative, ...] = (
    _scan_string_macro,
    _scan_preamble,
    _scan_comment,
    _scan_entry,
)
