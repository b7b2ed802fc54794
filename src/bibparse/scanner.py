"""Cursor helpers shared by the grammar rules.

Every rule takes the full text and an offset into it and returns the offset
just past what it matched, together with the matched value. A rule that does
not apply at the offset raises :class:`NoMatch`; a rule that has committed to
a construct and then finds it malformed raises :class:`~bibparse.exceptions.ParseError`.
"""

import re

from .exceptions import IncompleteInputError, ParseError

WHITESPACE_RE = re.compile(r"[ \t\r\n]*")
ALPHA_RE = re.compile(r"[A-Za-z]+")
ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9]+")


class NoMatch(Exception):
    """Signal that a grammar alternative does not apply at the current offset.

    Never escapes the public API: the dispatcher either tries the next
    alternative or reports that no item starts at the offset.
    """


def skip_whitespace(text: str, offset: int) -> int:
    """Return the offset of the first non-whitespace character at or after ``offset``."""
    match = WHITESPACE_RE.match(text, offset)
    return match.end() if match else offset


def try_token(pattern: re.Pattern[str], text: str, offset: int) -> tuple[int, str] | None:
    """Match ``pattern`` at ``offset`` after skipping whitespace.

    Returns:
        ``(end_offset, token)`` or ``None`` when the pattern does not match
    """
    offset = skip_whitespace(text, offset)
    match = pattern.match(text, offset)
    if match is None:
        return None
    return match.end(), match.group(0)


def try_literal(text: str, offset: int, literal: str) -> int | None:
    """Match a single-character ``literal`` after skipping whitespace.

    Returns:
        The offset past the literal, or ``None`` when it is not there
    """
    offset = skip_whitespace(text, offset)
    if text.startswith(literal, offset):
        return offset + len(literal)
    return None


def expect_token(pattern: re.Pattern[str], text: str, offset: int, what: str) -> tuple[int, str]:
    """Like :func:`try_token` but for committed constructs: a miss is fatal."""
    result = try_token(pattern, text, offset)
    if result is None:
        raise _failure(text, offset, f"Expected {what}")
    return result


def expect_literal(text: str, offset: int, literal: str) -> int:
    """Like :func:`try_literal` but for committed constructs: a miss is fatal."""
    end = try_literal(text, offset, literal)
    if end is None:
        raise _failure(text, offset, f"Expected '{literal}'")
    return end


def _failure(text: str, offset: int, message: str) -> ParseError:
    if skip_whitespace(text, offset) >= len(text):
        return IncompleteInputError(f"{message} before end of input")
    return ParseError(message)
