# topmark:header:start
#
#   project      : godocfmt
#   file         : test_wrap.py
#   file_relpath : tests/doc/test_wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sentence segmentation, greedy wrapping and paragraph formatting."""

from __future__ import annotations

from godocfmt.doc.model import CrossReference, Link, Plain
from godocfmt.doc.wrap import format_paragraph, split_sentences, wrap_sentence
from tests.conftest import join_lf, parametrize


@parametrize(
    "text, expected",
    [
        ("", []),
        ("Hello world.", [["Hello", "world."]]),
        ("First one. Second one.", [["First", "one."], ["Second", "one."]]),
        # Lowercase after a terminator does not open a sentence.
        ("See e.g. the docs.", [["See", "e.g.", "the", "docs."]]),
        ("Really? Yes! Good.", [["Really?"], ["Yes!"], ["Good."]]),
        # A bracket opens a sentence even mid-sentence.
        ("Use it. [Foo] helps.", [["Use", "it."], ["[Foo]", "helps."]]),
        ("No terminator here", [["No", "terminator", "here"]]),
    ],
)
def test_split_sentences(text: str, expected: list[list[str]]) -> None:
    """Boundaries fall after a terminator followed by an uppercase or bracketed word."""
    assert split_sentences(text.split()) == expected


def test_split_sentences_keeps_every_word_in_order() -> None:
    """Concatenating the sentences gives back the input words."""
    words = "A b. C d? e f! G h. [I] j".split()
    groups = split_sentences(words)
    assert [w for g in groups for w in g] == words


def test_wrap_sentence_empty() -> None:
    """An empty sentence renders as a single newline."""
    assert wrap_sentence([], 10, "") == "\n"


def test_wrap_sentence_fits_on_one_line() -> None:
    """Words that fit stay on one line."""
    assert wrap_sentence(["Exactly", "twenty", "chars"], 20, "") == "Exactly twenty chars\n"


def test_wrap_sentence_breaks_greedily() -> None:
    """A word that would exceed the width starts a new line."""
    words = "This is a very long line that should wrap when it exceeds the specified width limit."
    assert wrap_sentence(words.split(), 40, "") == join_lf(
        "This is a very long line that should",
        "wrap when it exceeds the specified width",
        "limit.",
        "",
    )


def test_wrap_sentence_shrinks_width_after_first_break() -> None:
    """Continuation lines carry the indent and the budget shrinks by its length."""
    words = (
        "This is a very long list item that should wrap to multiple lines"
        " when it exceeds the width"
    )
    assert wrap_sentence(words.split(), 46, "    ") == join_lf(
        "This is a very long list item that should wrap",
        "    to multiple lines when it exceeds the",
        "    width",
        "",
    )


def test_wrap_sentence_never_splits_long_words() -> None:
    """A word longer than the width sits alone on its line."""
    assert wrap_sentence(["a", "supercalifragilistic", "b"], 5, "") == join_lf(
        "a", "supercalifragilistic", "b", ""
    )


def test_wrap_sentence_tolerates_non_positive_width() -> None:
    """Zero or negative widths put one word per line."""
    assert wrap_sentence(["a", "b"], 0, "") == "a\nb\n"
    assert wrap_sentence(["a", "b"], -3, "  ") == "a\n  b\n"


def test_format_paragraph_no_words() -> None:
    """A paragraph without words renders as a single newline."""
    assert format_paragraph((Plain("   "),), 80) == "\n"


def test_format_paragraph_separates_short_sentences() -> None:
    """Every sentence starts on a new line."""
    spans = (Plain("First sentence. Second sentence."),)
    assert format_paragraph(spans, 80) == "First sentence.\nSecond sentence.\n"


def test_format_paragraph_blank_line_before_multi_line_sentence() -> None:
    """Only later sentences that wrap are preceded by a blank line."""
    spans = (
        Plain(
            "Short one. Another short. This third sentence is much longer and "
            "will definitely need to wrap across multiple lines."
        ),
    )
    assert format_paragraph(spans, 50) == join_lf(
        "Short one.",
        "Another short.",
        "",
        "This third sentence is much longer and will",
        "definitely need to wrap across multiple lines.",
        "",
    )


def test_format_paragraph_multi_line_first_sentence_gets_no_blank() -> None:
    """The first sentence is never preceded by a blank line."""
    spans = (
        Plain(
            "This is a longer first sentence that fills more space and wraps. "
            "This is the second sentence."
        ),
    )
    assert format_paragraph(spans, 50) == join_lf(
        "This is a longer first sentence that fills more",
        "space and wraps.",
        "This is the second sentence.",
        "",
    )


def test_format_paragraph_keeps_links_atomic() -> None:
    """Links and cross-references are never broken and stay glued to punctuation."""
    spans = (
        Plain("See "),
        Link(spans=(Plain("RFC 7159"),), url="https://tools.ietf.org/html/rfc7159"),
        Plain(" and "),
        CrossReference("io.EOF"),
        Plain(", done."),
    )
    assert format_paragraph(spans, 12) == join_lf(
        "See", "[RFC 7159]", "and", "[io.EOF],", "done.", ""
    )


def test_format_paragraph_indents_later_sentences() -> None:
    """With an indent, later sentences line up under the first one."""
    spans = (Plain("One. Two."),)
    assert format_paragraph(spans, 40, "    ") == "One.\n    Two.\n"
