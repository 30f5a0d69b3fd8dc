# topmark:header:start
#
#   project      : godocfmt
#   file         : parser.py
#   file_relpath : src/godocfmt/doc/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Go doc-comment parser.

Turns the text of a doc comment (comment markers already removed) into a
`Document`. The parser follows the Go doc comment syntax closely enough for
reformatting purposes:

- Blank lines separate spans.
- An indented span (leading space or tab) is a list when its first line starts
  with a list marker, and a code block otherwise. Blank lines inside an
  indented span belong to it.
- A lone ``# Title`` line surrounded by blank lines is a heading.
- Other runs of lines are paragraphs, except runs made only of
  ``[label]: url`` lines, which define links.

Inline parsing happens once all link definitions are known, so a paragraph
may refer to a definition that appears later in the comment. Brackets whose
text matches a definition become `Link` spans; brackets holding a Go
identifier or import path become `CrossReference` spans; anything else stays
plain text. The parser never raises: unrecognized input is kept as prose.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from godocfmt.config.logging import get_logger
from godocfmt.doc.model import (
    Code,
    CrossReference,
    Document,
    Heading,
    Link,
    LinkDefinition,
    List,
    ListItem,
    Paragraph,
    Plain,
)

if TYPE_CHECKING:
    from godocfmt.config.logging import GodocfmtLogger
    from godocfmt.doc.model import Block, InlineSpan

logger: GodocfmtLogger = get_logger(__name__)

LINK_DEF_RE: Final[re.Pattern[str]] = re.compile(r"^\[([^\[\]]+)\]:\s+(\S+)\s*$")
LIST_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    r"^[ \t]*(?:[-*+•]|(?P<number>\d{1,8})[.)])(?:[ \t]+(?P<text>.*))?$"
)
_BRACKET_RE: Final[re.Pattern[str]] = re.compile(r"\[([^\[\]]+)\]")
_DOC_LINK_RE: Final[re.Pattern[str]] = re.compile(
    r"\*?[A-Za-z_][\w\-]*(?:[./][A-Za-z_][\w\-]*)*"
)
_QUOTES: Final[tuple[tuple[str, str], ...]] = (("``", "“"), ("''", "”"))


def _is_blank(line: str) -> bool:
    return line.strip() == ""


def _is_indented(line: str) -> bool:
    return line[:1] in (" ", "\t") and not _is_blank(line)


def _is_heading(lines: list[str], i: int) -> bool:
    line: str = lines[i]
    if not line.startswith("# ") or _is_blank(line[2:]):
        return False
    before_ok: bool = i == 0 or _is_blank(lines[i - 1])
    after_ok: bool = i + 1 == len(lines) or _is_blank(lines[i + 1])
    return before_ok and after_ok


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


# --- Block structure ---


@dataclass(slots=True)
class _RawParagraph:
    """Paragraph or heading text awaiting inline parsing."""

    text: str
    heading: bool = False


@dataclass(slots=True)
class _RawList:
    """List items (ordinal, paragraph texts) awaiting inline parsing."""

    items: list[tuple[str, list[str]]] = field(default_factory=lambda: [])


def _parse_code(lines: list[str]) -> Code:
    """Build a code block, removing the indentation common to its lines."""
    prefix: str = os.path.commonprefix([_leading_whitespace(ln) for ln in lines if ln.strip()])
    return Code(lines=tuple("" if _is_blank(ln) else ln[len(prefix) :] for ln in lines))


def _parse_list(lines: list[str]) -> _RawList:
    """Split an indented span starting with a list marker into items.

    A marker of the same kind (numbered or bullet) as the first one starts a
    new item. A blank line ends the current paragraph of the item.
    """
    first = LIST_MARKER_RE.match(lines[0])
    numbered: bool = first is not None and first.group("number") is not None

    raw = _RawList()
    ordinal: str = ""
    paragraphs: list[str] = []
    text: list[str] = []

    def flush() -> None:
        if text:
            paragraphs.append("\n".join(text))
            text.clear()

    for line in lines:
        m = LIST_MARKER_RE.match(line)
        if m is not None and (m.group("number") is not None) == numbered:
            flush()
            if raw.items or paragraphs:
                raw.items.append((ordinal, list(paragraphs)))
            ordinal = m.group("number") or ""
            paragraphs.clear()
            line = m.group("text") or ""
        stripped: str = line.strip()
        if not stripped:
            flush()
            continue
        text.append(stripped)

    flush()
    raw.items.append((ordinal, list(paragraphs)))
    return raw


def _parse_spans(
    lines: list[str],
) -> tuple[list[Code | _RawParagraph | _RawList], list[LinkDefinition]]:
    """Classify lines into raw blocks and collect link definitions."""
    blocks: list[Code | _RawParagraph | _RawList] = []
    links: list[LinkDefinition] = []
    n: int = len(lines)
    i: int = 0

    while i < n:
        line: str = lines[i]

        if _is_blank(line):
            i += 1
            continue

        if _is_indented(line):
            j: int = i
            while j < n and (_is_blank(lines[j]) or _is_indented(lines[j])):
                j += 1
            while j > i and _is_blank(lines[j - 1]):
                j -= 1
            span: list[str] = lines[i:j]
            if LIST_MARKER_RE.match(span[0]):
                blocks.append(_parse_list(span))
            else:
                blocks.append(_parse_code(span))
            i = j
            continue

        if _is_heading(lines, i):
            blocks.append(_RawParagraph(line[2:].rstrip(), heading=True))
            i += 1
            continue

        j = i
        while j < n and not _is_blank(lines[j]) and not _is_indented(lines[j]):
            j += 1
        span = lines[i:j]
        defs: list[LinkDefinition] = [
            LinkDefinition(label=m.group(1), url=m.group(2))
            for m in (LINK_DEF_RE.match(ln) for ln in span)
            if m is not None
        ]
        if len(defs) == len(span):
            links.extend(defs)
        else:
            blocks.append(_RawParagraph("\n".join(span)))
        i = j

    return blocks, links


# --- Inline text ---


def _is_boundary(text: str, index: int) -> bool:
    """Return True if ``text[index]`` is absent or not alphanumeric."""
    return index < 0 or index >= len(text) or not text[index].isalnum()


def parse_inline(text: str, links: dict[str, str]) -> tuple[InlineSpan, ...]:
    """Parse paragraph text into inline spans.

    Args:
        text (str): The paragraph text, possibly spanning several lines.
        links (dict[str, str]): Known link definitions, label to URL.

    Returns:
        tuple[InlineSpan, ...]: Plain text interleaved with `Link` and
            `CrossReference` spans.
    """
    for old, new in _QUOTES:
        text = text.replace(old, new)

    spans: list[InlineSpan] = []
    pos: int = 0
    for m in _BRACKET_RE.finditer(text):
        if not (_is_boundary(text, m.start() - 1) and _is_boundary(text, m.end())):
            continue
        inner: str = m.group(1)
        label: str = " ".join(inner.split())
        span: InlineSpan | None = None
        if label in links:
            span = Link(spans=(Plain(label),), url=links[label])
        elif _DOC_LINK_RE.fullmatch(inner):
            span = CrossReference(inner)
        if span is None:
            continue
        if m.start() > pos:
            spans.append(Plain(text[pos : m.start()]))
        spans.append(span)
        pos = m.end()

    if pos < len(text):
        spans.append(Plain(text[pos:]))
    return tuple(spans)


def parse(text: str) -> Document:
    """Parse doc comment text into a `Document`.

    Args:
        text (str): Comment text with the comment markers removed.

    Returns:
        Document: The parsed document. Empty text yields an empty document.
    """
    lines: list[str] = text.split("\n")
    raw_blocks, link_defs = _parse_spans(lines)

    known: dict[str, str] = {}
    for link in link_defs:
        known.setdefault(" ".join(link.label.split()), link.url)

    blocks: list[Block] = []
    for raw in raw_blocks:
        if isinstance(raw, _RawParagraph):
            spans = parse_inline(raw.text, known)
            blocks.append(Heading(spans) if raw.heading else Paragraph(spans))
        elif isinstance(raw, _RawList):
            items: list[ListItem] = []
            for ordinal, paragraphs in raw.items:
                content: tuple[Block, ...] = tuple(
                    Paragraph(parse_inline(p, known)) for p in paragraphs
                )
                items.append(ListItem(ordinal=ordinal, content=content))
            blocks.append(List(items=tuple(items)))
        else:
            blocks.append(raw)

    logger.debug("parsed %d block(s), %d link definition(s)", len(blocks), len(link_defs))
    return Document(blocks=tuple(blocks), links=tuple(link_defs))
