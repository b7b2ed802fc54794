"""Tests for field value parsing."""

import pytest

from bibparse.config import ParserConfig
from bibparse.exceptions import IncompleteInputError, NestingDepthError, ParseError
from bibparse.scanner import NoMatch
from bibparse.values import scan_delimited, scan_literal, scan_value, skip_group


def test_quoted_string() -> None:
    """Quoted values are returned without their quotes."""
    assert scan_delimited('"This is a string"', 0) == (18, "This is a string")


def test_braced_string() -> None:
    """Braced values are returned without their outer braces."""
    assert scan_delimited("{test string}", 0) == (13, "test string")


def test_nested_braces_are_kept_as_content() -> None:
    """Inner brace groups at any depth stay in the value verbatim."""
    _, value = scan_delimited("{A {Nested {Deep}} Title}", 0)
    assert value == "A {Nested {Deep}} Title"


def test_quoted_value_keeps_inner_braces() -> None:
    """A quoted value may protect words with braces."""
    _, value = scan_delimited('"A {Quoted} Term"', 0)
    assert value == "A {Quoted} Term"


def test_bare_quote_ends_quoted_value() -> None:
    """The first unnested quote closes a quoted value."""
    assert scan_delimited('"first" rest"', 0) == (7, "first")


def test_braced_value_may_contain_paired_quotes() -> None:
    """Quotes inside braces are parsed as a nested quoted group."""
    _, value = scan_delimited('{He said "hi" to me}', 0)
    assert value == 'He said "hi" to me'


def test_quote_inside_braces_inside_quotes() -> None:
    """Braces inside a quoted value may themselves hold quotes."""
    _, value = scan_delimited('"outer {with "inner" quotes} end"', 0)
    assert value == 'outer {with "inner" quotes} end'


def test_unterminated_value_is_incomplete() -> None:
    """Running out of input inside a value is reported as incomplete input."""
    with pytest.raises(IncompleteInputError):
        scan_delimited("{open {inner} still open", 0)


def test_stray_closing_brace_in_quoted_value() -> None:
    """A closing brace with no opening brace inside quotes is malformed."""
    with pytest.raises(ParseError):
        scan_delimited('"a}b"', 0)


def test_empty_delimited_value_is_rejected() -> None:
    """A delimited value needs at least one segment."""
    with pytest.raises(ParseError):
        scan_delimited("{}", 0)
    with pytest.raises(ParseError):
        scan_delimited('{a {} b}', 0)


def test_scan_delimited_requires_opening_delimiter() -> None:
    """Text that does not start with a delimiter is not a delimited value."""
    with pytest.raises(NoMatch):
        scan_delimited("plain", 0)


def test_scan_literal() -> None:
    """A literal is a maximal alphanumeric run."""
    assert scan_literal("2000,", 0) == (4, "2000")
    with pytest.raises(NoMatch):
        scan_literal("-2000", 0)


def test_scan_value_skips_leading_whitespace() -> None:
    """Whitespace before a value is ignored and literals are accepted."""
    assert scan_value("  2000,", 0) == (6, "2000")
    assert scan_value(" \n{Title}", 0) == (9, "Title")


def test_scan_value_without_value() -> None:
    """No value at the offset is signalled with NoMatch."""
    with pytest.raises(NoMatch):
        scan_value(" ,", 0)


def test_nesting_depth_is_bounded() -> None:
    """Nesting beyond max_depth is rejected rather than recursed into."""
    with pytest.raises(NestingDepthError):
        scan_delimited("{{{x}}}", 0, ParserConfig(max_depth=2))

    assert scan_delimited("{{{x}}}", 0, ParserConfig(max_depth=3)) == (7, "{{x}}")


def test_deep_nesting_does_not_recurse() -> None:
    """Nesting far beyond the interpreter recursion limit is handled iteratively."""
    depth = 5000
    text = "{" * depth + "x" + "}" * depth
    end, value = scan_delimited(text, 0, ParserConfig(max_depth=depth))
    assert end == len(text)
    assert value == "{" * (depth - 1) + "x" + "}" * (depth - 1)


def test_skip_group() -> None:
    """Discarded bodies are skipped by counting their own delimiter pair."""
    assert skip_group("{a {b} c} tail", 0) == 9
    assert skip_group('("unbalanced quote)', 0) == 19
    assert skip_group("{}", 0) == 2


def test_skip_group_errors() -> None:
    """An unterminated group is incomplete; no group is NoMatch."""
    with pytest.raises(IncompleteInputError):
        skip_group("{never closed", 0)
    with pytest.raises(NoMatch):
        skip_group("x", 0)
