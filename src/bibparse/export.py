"""Conversion of parsed documents to exchange formats (JSON and bibtexparser)."""

import logging
from collections.abc import Iterable

import bibtexparser
import msgspec
from bibtexparser.library import Library
from bibtexparser.model import Block, ExplicitComment, Field, String
from bibtexparser.model import Entry as BibtexEntry
from bibtexparser.model import Preamble as BibtexPreamble

from .exceptions import InvalidDataError
from .model import Comment, Document, Entry, Item, Preamble, StringMacro

logger = logging.getLogger(__name__)

_document_decoder = msgspec.json.Decoder(Document)


def to_json(items: Iterable[Item]) -> bytes:
    """Encode items as a JSON array; each object carries a ``kind`` tag."""
    return msgspec.json.encode(list(items))


def from_json(data: bytes | str) -> Document:
    """Decode a JSON array produced by :func:`to_json` back into items.

    Raises:
        InvalidDataError: If the data is not valid JSON or does not match the item model
    """
    try:
        return _document_decoder.decode(data)
    except (msgspec.DecodeError, msgspec.ValidationError) as e:
        raise InvalidDataError(f"Invalid item data: {e}") from e


def to_library(items: Iterable[Item]) -> Library:
    """Build a bibtexparser library holding the items in order.

    Each tag of a string macro becomes its own ``String`` block. Preambles
    and comments become empty blocks since their content is not retained.
    Repeated entry labels or macro names are kept: bibtexparser wraps the
    later block in a ``DuplicateBlockKeyBlock`` instead of refusing them.
    """
    blocks: list[Block] = []
    for item in items:
        if isinstance(item, Entry):
            fields = [Field(key, value) for key, value in item.tags.items()]
            blocks.append(
                BibtexEntry(entry_type=item.entry_type.lower(), key=item.label, fields=fields)
            )
        elif isinstance(item, StringMacro):
            blocks.extend(String(key, value) for key, value in item.tags.items())
        elif isinstance(item, Preamble):
            blocks.append(BibtexPreamble(""))
        elif isinstance(item, Comment):
            blocks.append(ExplicitComment(""))
        else:
            raise TypeError(f"Cannot export {type(item).__name__}")

    logger.debug("Built library with %d blocks", len(blocks))
    library = Library()
    library.add(blocks, fail_on_duplicate_key=False)
    return library


def write_bibtex(items: Iterable[Item]) -> str:
    """Render items as BibTeX through bibtexparser's writer."""
    return str(bibtexparser.write_string(to_library(items)))
