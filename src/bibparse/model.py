"""Item model produced by the parser."""

from __future__ import annotations

from typing import Union

import msgspec

from .types import TagMap


class _BibItem(msgspec.Struct, frozen=True, tag_field="kind"):
    """Common base for top-level items; serialized with a ``kind`` tag."""


class StringMacro(_BibItem, tag="string"):
    """An ``@STRING`` declaration holding its tag list verbatim."""

    tags: TagMap


class Preamble(_BibItem, tag="preamble"):
    """Marker for an ``@PREAMBLE`` item; its content is not retained."""


class Comment(_BibItem, tag="comment"):
    """Marker for an ``@COMMENT`` item; its content is not retained."""


class Entry(_BibItem, tag="entry"):
    """A typed bibliographic record.

    ``entry_type`` is upper-cased and tag keys are lower-cased by the parser;
    values keep their original casing with outer delimiters removed.
    """

    entry_type: str
    label: str
    tags: TagMap


Item = Union[StringMacro, Preamble, Comment, Entry]
Document = list[Item]
