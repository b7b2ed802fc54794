"""Rendering of parsed items back to BibTeX text."""

from collections.abc import Iterable

from .model import Comment, Entry, Item, Preamble, StringMacro
from .types import TagMap

INDENT = "    "


def render_item(item: Item) -> str:
    """Render a single item as BibTeX.

    Values are always written brace-delimited; parsing the output again
    yields an equal item.
    """
    if isinstance(item, Entry):
        lines = [f"@{item.entry_type}{{{item.label},"]
        lines.extend(f"{INDENT}{key} = {{{value}}}," for key, value in item.tags.items())
        lines.append("}")
        return "\n".join(lines)
    if isinstance(item, StringMacro):
        return f"@STRING{{{_render_tags(item.tags)}}}"
    if isinstance(item, Preamble):
        return "@PREAMBLE{}"
    if isinstance(item, Comment):
        return "@COMMENT{}"
    raise TypeError(f"Cannot render {type(item).__name__}")


def render_document(items: Iterable[Item]) -> str:
    """Render items in order, separated by blank lines."""
    return "".join(f"{render_item(item)}\n\n" for item in items)


def _render_tags(tags: TagMap) -> str:
    return ", ".join(f"{key} = {{{value}}}" for key, value in tags.items())
