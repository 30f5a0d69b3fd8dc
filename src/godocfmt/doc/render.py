# topmark:header:start
#
#   project      : godocfmt
#   file         : render.py
#   file_relpath : src/godocfmt/doc/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block and document rendering.

`render` is the single entry point: a pure function of a `Document` and a
wrap width. Every rendered block ends with exactly one newline; blocks are
separated by one blank line and link definitions are appended last, each
preceded by a blank line. The caller strips the final newline if its output
convention requires it.

Rendering never fails: degenerate input (no blocks, empty paragraphs, widths
smaller than a word or below zero) still yields well-defined text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from godocfmt.config.logging import get_logger
from godocfmt.doc.inline import inline_text
from godocfmt.doc.model import Code, Heading, List, Paragraph
from godocfmt.doc.wrap import format_paragraph

if TYPE_CHECKING:
    from godocfmt.config.logging import GodocfmtLogger
    from godocfmt.doc.model import Block, Document, ListItem

logger: GodocfmtLogger = get_logger(__name__)

BULLET: Final[str] = "  - "
HEADING_PREFIX: Final[str] = "# "
CODE_PREFIX: Final[str] = "\t"
# Continuation indent of list item text and indent of nested item blocks.
ITEM_INDENT: Final[str] = "    "


def list_marker(item: ListItem) -> str:
    """Return the prefix written before an item's first line."""
    if item.numbered:
        return f" {item.ordinal}. "
    return BULLET


def _indent_lines(text: str, indent: str) -> str:
    """Prefix every non-empty line of ``text`` with ``indent``."""
    return "".join(
        indent + line if line.strip("\n") else line for line in text.splitlines(keepends=True)
    )


def _render_code(block: Code) -> str:
    return "".join(f"{CODE_PREFIX}{line}\n" if line else "\n" for line in block.lines)


def _render_list(block: List, width: int) -> str:
    out: list[str] = []
    for item in block.items:
        marker: str = list_marker(item)
        rest: tuple[Block, ...] = item.content

        if rest and isinstance(rest[0], Paragraph):
            out.append(marker)
            out.append(format_paragraph(rest[0].spans, width - len(marker), ITEM_INDENT))
            rest = rest[1:]
        else:
            # Nothing to put on the marker line.
            out.append(marker.rstrip() + "\n")

        for sub in rest:
            out.append("\n")
            out.append(_indent_lines(render_block(sub, width - len(ITEM_INDENT)), ITEM_INDENT))

    return "".join(out)


def render_block(block: Block, width: int) -> str:
    """Render a single block.

    Args:
        block (Block): The block to render.
        width (int): Column budget for the block's text.

    Returns:
        str: The rendered block, terminated by a newline. Unknown block types
            render as the empty string.
    """
    match block:
        case Paragraph(spans=spans):
            return format_paragraph(spans, width)
        case Heading(spans=spans):
            return f"{HEADING_PREFIX}{inline_text(spans)}\n"
        case Code():
            return _render_code(block)
        case List():
            return _render_list(block, width)
        case _:
            logger.debug("Skipping unsupported block: %r", block)
            return ""


def render(document: Document, width: int) -> str:
    """Render a document at the given wrap width.

    Args:
        document (Document): The parsed doc comment.
        width (int): Column budget for prose, excluding any comment prefix.

    Returns:
        str: The formatted text, ending with a newline unless the document is
            empty.
    """
    out: list[str] = []
    for i, block in enumerate(document.blocks):
        if i > 0:
            out.append("\n")
        out.append(render_block(block, width))

    for link in document.links:
        out.append(f"\n[{link.label}]: {link.url}\n")

    logger.trace(
        "rendered %d block(s) and %d link definition(s) at width %d",
        len(document.blocks),
        len(document.links),
        width,
    )
    return "".join(out)
