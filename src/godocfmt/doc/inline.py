# topmark:header:start
#
#   project      : godocfmt
#   file         : inline.py
#   file_relpath : src/godocfmt/doc/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline text rendering.

Converts inline spans into literal text. Links and cross-references are
re-wrapped in brackets and, when flattened into words for reflowing, always
form a single indivisible word so a line break never falls inside ``[...]``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from godocfmt.doc.model import CrossReference, Emphasis, Link, Plain

if TYPE_CHECKING:
    from collections.abc import Iterable

    from godocfmt.doc.model import InlineSpan

_WHITESPACE_RE: re.Pattern[str] = re.compile(r"(\s+)")


def span_text(span: InlineSpan) -> str:
    """Return the literal text of a single inline span.

    Args:
        span (InlineSpan): The span to render.

    Returns:
        str: ``text`` for plain and emphasized spans, ``[text]`` for links and
            cross-references. Unknown span types render as the empty string.
    """
    match span:
        case Plain(text=text) | Emphasis(text=text):
            return text
        case Link(spans=spans):
            return f"[{inline_text(spans)}]"
        case CrossReference(text=text):
            return f"[{text}]"
        case _:
            return ""


def inline_text(spans: Iterable[InlineSpan]) -> str:
    """Concatenate the literal text of ``spans``."""
    return "".join(span_text(span) for span in spans)


def span_words(spans: Iterable[InlineSpan]) -> list[str]:
    """Flatten inline spans into whitespace-delimited words.

    Plain and emphasized text is split on whitespace. Links and
    cross-references contribute their bracketed text as-is, even when it
    contains spaces (``[RFC 7159]``), and are glued to any text that touches
    them without whitespace (``[ErrNotFound],``).

    Args:
        spans (Iterable[InlineSpan]): Inline spans of a paragraph.

    Returns:
        list[str]: The paragraph's words, in order.
    """
    words: list[str] = []
    current: str = ""

    for span in spans:
        match span:
            case Plain(text=text) | Emphasis(text=text):
                for part in _WHITESPACE_RE.split(text):
                    if not part:
                        continue
                    if part.isspace():
                        if current:
                            words.append(current)
                        current = ""
                    else:
                        current += part
            case _:
                current += span_text(span)

    if current:
        words.append(current)
    return words
