# topmark:header:start
#
#   project      : godocfmt
#   file         : model.py
#   file_relpath : src/godocfmt/doc/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document model for parsed doc comments.

A `Document` is an ordered sequence of blocks plus the link definitions
collected from the comment. Blocks and inline spans are closed sets of frozen
dataclasses; renderers dispatch on them with ``match`` statements.

Block kinds:
    - `Paragraph`: prose made of inline spans, reflowed on rendering.
    - `Heading`: a single ``# `` line, never wrapped.
    - `Code`: verbatim lines, rendered tab-indented.
    - `List`: bullet or numbered items with nested block content.

Inline kinds:
    - `Plain` and `Emphasis`: literal text.
    - `Link`: text that matches a link definition, rendered as ``[text]``.
    - `CrossReference`: a doc link such as ``[Foo]`` or ``[Type.Method]``.

All values are immutable so a document may be rendered from several threads
without coordination.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Inline spans ---


@dataclass(frozen=True, slots=True)
class Plain:
    """Literal text, split on whitespace when reflowed."""

    text: str


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Emphasized text; rendered as its literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class Link:
    """Text referring to a link definition.

    Attributes:
        spans (tuple[InlineSpan, ...]): The displayed text.
        url (str): The target URL. It is not reproduced inline; it belongs to
            the document's link-definition table.
    """

    spans: tuple[InlineSpan, ...]
    url: str


@dataclass(frozen=True, slots=True)
class CrossReference:
    """Doc link to another symbol (``Foo``, ``Type.Method``, ``pkg.Name``)."""

    text: str


InlineSpan = Plain | Emphasis | Link | CrossReference


# --- Blocks ---


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Reflowable prose."""

    spans: tuple[InlineSpan, ...]


@dataclass(frozen=True, slots=True)
class Heading:
    """A ``# Title`` heading."""

    spans: tuple[InlineSpan, ...]


@dataclass(frozen=True, slots=True)
class Code:
    """Preformatted lines, without their common indentation."""

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ListItem:
    """A single list item.

    Attributes:
        ordinal (str): Item number as written in the source (``"1"``, ``"10"``);
            empty for bullet items.
        content (tuple[Block, ...]): The item's blocks. A leading `Paragraph`
            is rendered on the bullet line.
    """

    ordinal: str
    content: tuple[Block, ...]

    @property
    def numbered(self) -> bool:
        """Whether the item belongs to a numbered list."""
        return self.ordinal != ""


@dataclass(frozen=True, slots=True)
class List:
    """A bullet or numbered list."""

    items: tuple[ListItem, ...]


Block = Paragraph | Heading | Code | List


# --- Document ---


@dataclass(frozen=True, slots=True)
class LinkDefinition:
    """A ``[label]: url`` line."""

    label: str
    url: str


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed doc comment.

    Attributes:
        blocks (tuple[Block, ...]): Top-level blocks in source order.
        links (tuple[LinkDefinition, ...]): Link definitions in source order.
    """

    blocks: tuple[Block, ...] = ()
    links: tuple[LinkDefinition, ...] = ()
