"""Field value parsing: delimited strings and bare literals."""

import re

from .config import ParserConfig
from .exceptions import IncompleteInputError, NestingDepthError, ParseError
from .scanner import ALPHANUMERIC_RE, NoMatch, skip_whitespace

# Opening delimiter -> closing delimiter for field values
_VALUE_CLOSERS = {"{": "}", '"': '"'}
# Opening delimiter -> closing delimiter for discarded bodies (@PREAMBLE, @COMMENT)
_GROUP_CLOSERS = {"{": "}", "(": ")"}
# A maximal run of characters that neither open nor close a delimited group
_PLAIN_RUN_RE = re.compile(r'[^"{}]+')


def scan_value(text: str, offset: int, config: ParserConfig | None = None) -> tuple[int, str]:
    """Parse one field value starting at ``offset`` (leading whitespace is skipped).

    A value is either a bare alphanumeric literal such as ``2000`` or a
    delimited string, see :func:`scan_delimited`.

    Args:
        text: Complete document text
        offset: Offset at which the value may start
        config: Parser configuration (defaults when ``None``)

    Returns:
        Tuple ``(end_offset, value)`` where ``value`` has its outer delimiters stripped

    Raises:
        NoMatch: If no value starts at ``offset``
        ParseError: If a delimited value is opened but not correctly closed
    """
    offset = skip_whitespace(text, offset)
    try:
        return scan_literal(text, offset)
    except NoMatch:
        return scan_delimited(text, offset, config)


def scan_literal(text: str, offset: int) -> tuple[int, str]:
    """Parse a bare alphanumeric literal exactly at ``offset``."""
    match = ALPHANUMERIC_RE.match(text, offset)
    if match is None:
        raise NoMatch
    return match.end(), match.group(0)


def scan_delimited(text: str, offset: int, config: ParserConfig | None = None) -> tuple[int, str]:
    """Parse a ``{...}`` or ``"..."`` string exactly at ``offset``.

    The body of a delimited string is one or more segments, each either a
    nested delimited string or a run of characters other than ``"``, ``{``
    and ``}``. Braced strings may therefore contain balanced inner braces and
    paired quotes; quoted strings may contain balanced braces (and quotes
    inside them) but end at the first bare ``"``.

    Nesting is tracked with an explicit stack bounded by ``config.max_depth``
    so hostile input cannot exhaust the interpreter stack.

    Returns:
        Tuple ``(end_offset, inner_text)`` with inner text kept verbatim

    Raises:
        NoMatch: If ``offset`` is not at an opening delimiter
        IncompleteInputError: If the text ends before the value is closed
        NestingDepthError: If nesting exceeds ``config.max_depth``
        ParseError: If the value is empty or closed by the wrong delimiter
    """
    config = ParserConfig.resolve(config)
    if offset >= len(text) or text[offset] not in _VALUE_CLOSERS:
        raise NoMatch

    # One frame per open group: (expected closer, group has content)
    stack: list[tuple[str, bool]] = [(_VALUE_CLOSERS[text[offset]], False)]
    position = offset + 1

    while stack:
        if position >= len(text):
            raise IncompleteInputError("Unterminated delimited value")

        run = _PLAIN_RUN_RE.match(text, position)
        if run is not None:
            stack[-1] = (stack[-1][0], True)
            position = run.end()
            continue

        char = text[position]
        closer, has_content = stack[-1]
        if char == closer:
            if not has_content:
                raise ParseError("Empty delimited group in value")
            stack.pop()
        elif char in _VALUE_CLOSERS:
            if len(stack) >= config.max_depth:
                raise NestingDepthError(f"Value nesting deeper than {config.max_depth}")
            stack[-1] = (closer, True)
            stack.append((_VALUE_CLOSERS[char], False))
        else:
            raise ParseError(f"Unbalanced '{char}' in value")
        position += 1

    return position, text[offset + 1 : position - 1]


def skip_group(text: str, offset: int, config: ParserConfig | None = None) -> int:
    """Skip a balanced ``{...}`` or ``(...)`` group starting exactly at ``offset``.

    Used for bodies whose content is discarded, so only the group's own
    delimiter pair is counted and the body is not otherwise validated.

    Returns:
        Offset just past the closing delimiter

    Raises:
        NoMatch: If ``offset`` is not at ``{`` or ``(``
        IncompleteInputError: If the group is never closed
        NestingDepthError: If nesting exceeds ``config.max_depth``
    """
    config = ParserConfig.resolve(config)
    if offset >= len(text) or text[offset] not in _GROUP_CLOSERS:
        raise NoMatch

    opener = text[offset]
    closer = _GROUP_CLOSERS[opener]
    depth = 0
    for position in range(offset, len(text)):
        char = text[position]
        if char == opener:
            depth += 1
            if depth > config.max_depth:
                raise NestingDepthError(f"Group nesting deeper than {config.max_depth}")
        elif char == closer:
            depth -= 1
            if depth == 0:
                return position + 1

    raise IncompleteInputError(f"Unterminated '{opener}' group")
