"""Grammar engine for BibTeX-like bibliography documents."""

import logging

from .config import ParserConfig
from .document import parse, parse_document
from .exceptions import BibparseError, FileOperationError, ParseError
from .loader import load
from .model import Comment, Document, Entry, Item, Preamble, StringMacro

# Install a NullHandler to avoid emitting logs unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BibparseError",
    "Comment",
    "Document",
    "Entry",
    "FileOperationError",
    "Item",
    "ParseError",
    "ParserConfig",
    "Preamble",
    "StringMacro",
    "load",
    "parse",
    "parse_document",
]
