# topmark:header:start
#
#   project      : godocfmt
#   file         : wrap.py
#   file_relpath : src/godocfmt/doc/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sentence-aware paragraph reflowing.

Three layers, leaf first:

- `split_sentences` groups words into sentences using punctuation and
  capitalization heuristics.
- `wrap_sentence` greedily packs one sentence into width-bounded lines.
- `format_paragraph` renders inline spans: every sentence starts on its own
  line, and a sentence that wraps over several lines is preceded by a blank
  line (except for the first sentence of the paragraph).

Widths are soft limits: a word is never split, so a single word longer than
the width occupies a line on its own and overflows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from godocfmt.config.logging import get_logger
from godocfmt.doc.inline import span_words

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from godocfmt.config.logging import GodocfmtLogger
    from godocfmt.doc.model import InlineSpan

logger: GodocfmtLogger = get_logger(__name__)

SENTENCE_TERMINATORS: Final[frozenset[str]] = frozenset(".?!")


def ends_sentence(word: str) -> bool:
    """Return True if ``word`` ends with ``.``, ``?`` or ``!``."""
    return word != "" and word[-1] in SENTENCE_TERMINATORS


def starts_sentence(word: str) -> bool:
    """Return True if ``word`` may open a sentence.

    A sentence opens with an ASCII uppercase letter or with ``[`` (a doc
    link), even when the bracket is really mid-sentence punctuation.
    """
    if word == "":
        return False
    first: str = word[0]
    return "A" <= first <= "Z" or first == "["


def split_sentences(words: Sequence[str]) -> list[list[str]]:
    """Split a flat word sequence into sentences.

    A boundary is placed after a word that ends a sentence when the next word
    starts one. Every input word ends up in exactly one group, in order.

    Args:
        words (Sequence[str]): Words without internal whitespace (bracketed
            links count as one word).

    Returns:
        list[list[str]]: Sentence word groups; empty when ``words`` is empty.
    """
    sentences: list[list[str]] = []
    current: list[str] = []

    for i, word in enumerate(words):
        current.append(word)
        if ends_sentence(word) and i + 1 < len(words) and starts_sentence(words[i + 1]):
            sentences.append(current)
            current = []

    if current:
        sentences.append(current)

    logger.trace("split %d word(s) into %d sentence(s)", len(words), len(sentences))
    return sentences


def wrap_sentence(words: Sequence[str], width: int, indent: str) -> str:
    """Greedily wrap a sentence into lines of at most ``width`` columns.

    The first line carries no indent: the caller places it at the current
    cursor position (after a bullet, for instance). Each wrapped line starts
    with ``indent``. After the first break the budget shrinks to
    ``width - len(indent)`` for the rest of the sentence.

    Args:
        words (Sequence[str]): The sentence's words.
        width (int): Column budget for the first line.
        indent (str): Continuation indent for wrapped lines.

    Returns:
        str: One or more ``\\n``-terminated lines; ``"\\n"`` for an empty sentence.
    """
    if not words:
        return "\n"

    parts: list[str] = [words[0]]
    line_len: int = len(words[0])
    next_width: int = width - len(indent)

    for word in words[1:]:
        if line_len + 1 + len(word) > width:
            parts.append("\n")
            parts.append(indent)
            parts.append(word)
            line_len = len(indent) + len(word)
            width = next_width
        else:
            parts.append(" ")
            parts.append(word)
            line_len += 1 + len(word)

    parts.append("\n")
    return "".join(parts)


def format_paragraph(spans: Iterable[InlineSpan], width: int, indent: str = "") -> str:
    """Render a paragraph's inline spans as sentence-aware wrapped lines.

    Sentences after the first start on a new line that carries ``indent``,
    so list item text stays aligned under the bullet text.

    Args:
        spans (Iterable[InlineSpan]): The paragraph's inline spans.
        width (int): Column budget passed to `wrap_sentence` for every sentence.
        indent (str): Continuation indent passed to `wrap_sentence`.

    Returns:
        str: The rendered paragraph, ``\\n``-terminated; ``"\\n"`` when the
            paragraph holds no words.
    """
    words: list[str] = span_words(spans)
    if not words:
        return "\n"

    out: list[str] = []
    for i, sentence in enumerate(split_sentences(words)):
        wrapped: str = wrap_sentence(sentence, width, indent)
        if i > 0:
            # Multi-line sentences after the first get a blank line before them.
            if wrapped.count("\n") > 1:
                out.append("\n")
            out.append(indent)
        out.append(wrapped)

    return "".join(out)
