"""Tests for line classification and document building."""

import pytest

from note_parser import (
    Block,
    BlockKind,
    Span,
    SpanStyle,
    build_document,
    classify,
    parse_spans,
)


def test_heading2_scenario():
    """A level-2 heading keeps its text as a single plain span."""
    assert classify("## Key Concepts") == Block(
        BlockKind.HEADING2, (Span(SpanStyle.PLAIN, "Key Concepts"),), "## Key Concepts"
    )


def test_ordered_item_with_bold():
    """The number is discarded and the bold run is split out."""
    block = classify("1. Install the **driver** package")

    assert block.kind == BlockKind.ORDERED_LIST_ITEM
    assert block.spans == (
        Span(SpanStyle.PLAIN, "Install the "),
        Span(SpanStyle.BOLD, "driver"),
        Span(SpanStyle.PLAIN, " package"),
    )


def test_empty_line_is_blank():
    block = classify("")
    assert block.kind == BlockKind.BLANK
    assert block.spans == ()


def test_whitespace_only_line_is_blank():
    assert classify("   \t").kind == BlockKind.BLANK


@pytest.mark.parametrize("line, kind", [
    ("# Title", BlockKind.HEADING1),
    ("## Section", BlockKind.HEADING2),
    ("### Sub-section", BlockKind.HEADING3),
    ("12. Twelfth step", BlockKind.ORDERED_LIST_ITEM),
    ("- dash item", BlockKind.UNORDERED_LIST_ITEM),
    ("* star item", BlockKind.UNORDERED_LIST_ITEM),
    ("> a quote", BlockKind.BLOCKQUOTE),
    ("Just a sentence.", BlockKind.PARAGRAPH),
    ("#NoSpace", BlockKind.PARAGRAPH),
    ("#### Too deep", BlockKind.PARAGRAPH),
    ("1.No space", BlockKind.PARAGRAPH),
    ("1) paren", BlockKind.PARAGRAPH),
    ("  - indented", BlockKind.PARAGRAPH),
    (">no space", BlockKind.PARAGRAPH),
    ("**Bold start**", BlockKind.PARAGRAPH),
])
def test_classify_kinds(line, kind):
    assert classify(line).kind == kind


def test_star_prefix_is_list_item_not_bold():
    """'* ' is checked as a list prefix before any inline parsing."""
    block = classify("* **Voltage** drives current")

    assert block.kind == BlockKind.UNORDERED_LIST_ITEM
    assert block.spans[0] == Span(SpanStyle.BOLD, "Voltage")


def test_prefix_only_lines_have_no_spans():
    assert classify("- ") == Block(BlockKind.UNORDERED_LIST_ITEM, (), "- ")
    assert classify("# ").kind == BlockKind.HEADING1


def test_only_the_matched_prefix_is_removed():
    assert classify("-  two spaces").text == " two spaces"
    assert classify(">  quoted").text == " quoted"


def test_parse_spans_code_and_bold():
    assert parse_spans("Use `pip install` then **restart**") == (
        Span(SpanStyle.PLAIN, "Use "),
        Span(SpanStyle.CODE, "pip install"),
        Span(SpanStyle.PLAIN, " then "),
        Span(SpanStyle.BOLD, "restart"),
    )


def test_parse_spans_is_non_greedy():
    assert parse_spans("**a** and **b**") == (
        Span(SpanStyle.BOLD, "a"),
        Span(SpanStyle.PLAIN, " and "),
        Span(SpanStyle.BOLD, "b"),
    )


def test_delimiters_do_not_nest():
    """Bold markers inside code stay literal."""
    assert parse_spans("`a **b** c`") == (Span(SpanStyle.CODE, "a **b** c"),)


@pytest.mark.parametrize("text", [
    "a stray ** marker",
    "unclosed `tick",
    "**",
    "`",
    "***",
])
def test_unterminated_delimiters_stay_plain(text):
    spans = parse_spans(text)
    assert all(span.style == SpanStyle.PLAIN for span in spans)
    assert "".join(span.text for span in spans) == text


def test_empty_delimited_runs_are_dropped():
    assert parse_spans("a****b``c") == (
        Span(SpanStyle.PLAIN, "a"),
        Span(SpanStyle.PLAIN, "b"),
        Span(SpanStyle.PLAIN, "c"),
    )


@pytest.mark.parametrize("line, expected", [
    ("# Intro to **Ohm's** Law", "Intro to Ohm's Law"),
    ("### `V = IR`", "V = IR"),
    ("3. Measure `I` with a **multimeter**", "Measure I with a multimeter"),
    ("- **Resistance** is in ohms", "Resistance is in ohms"),
    ("> Tip: use **SI** units", "Tip: use SI units"),
    ("Plain text only", "Plain text only"),
])
def test_span_text_reconstructs_line(line, expected):
    assert classify(line).text == expected


def test_build_document_one_block_per_line():
    markdown = "# Title\n\n## Section\n- item\n1. step\n> quote\ntext"
    document = build_document(markdown)

    assert [block.kind for block in document] == [
        BlockKind.HEADING1,
        BlockKind.BLANK,
        BlockKind.HEADING2,
        BlockKind.UNORDERED_LIST_ITEM,
        BlockKind.ORDERED_LIST_ITEM,
        BlockKind.BLOCKQUOTE,
        BlockKind.PARAGRAPH,
    ]


def test_build_document_trailing_newline_adds_blank():
    document = build_document("a\nb\n")
    assert len(document) == 3
    assert document[-1].kind == BlockKind.BLANK


def test_build_document_handles_crlf():
    document = build_document("# Title\r\n- item\r\n")
    assert document[0] == classify("# Title")
    assert document[1] == classify("- item")


def test_build_document_is_deterministic():
    markdown = "# T\n**b** `c`\n\n1. x\n* y\n> z"
    assert build_document(markdown) == build_document(markdown)


def test_lines_are_classified_independently():
    """A line's block does not depend on its neighbours."""
    lines = ["1. first", "continued", "- bullet", "", "> quote"]
    document = build_document("\n".join(lines))
    assert document == tuple(classify(line) for line in lines)


def test_empty_input_is_one_blank_block():
    assert build_document("") == (Block(BlockKind.BLANK, (), ""),)


@pytest.mark.parametrize("line", ["٣. arabic-indic digit", "１. fullwidth digit"])
def test_ordered_prefix_needs_ascii_digits(line):
    assert classify(line).kind == BlockKind.PARAGRAPH
