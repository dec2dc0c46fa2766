"""
Screen renderer: turns the parsed note into HTML elements for the notes viewer.
Each block becomes one element keyed by its line index.
"""

from markupsafe import Markup, escape

from note_parser import Block, BlockKind, Document, Span, SpanStyle, build_document

# (tag, css class) per block kind
BLOCK_ELEMENTS = {
    BlockKind.HEADING1: ("h1", "note-h1"),
    BlockKind.HEADING2: ("h2", "note-h2"),
    BlockKind.HEADING3: ("h3", "note-h3"),
    BlockKind.ORDERED_LIST_ITEM: ("li", "note-li list-decimal"),
    BlockKind.UNORDERED_LIST_ITEM: ("li", "note-li list-disc"),
    BlockKind.BLOCKQUOTE: ("blockquote", "note-quote"),
    BlockKind.PARAGRAPH: ("p", "note-p"),
}


def render_span(span: Span) -> Markup:
    if span.style == SpanStyle.BOLD:
        return Markup('<strong>{}</strong>').format(span.text)
    if span.style == SpanStyle.CODE:
        return Markup('<code class="note-code">{}</code>').format(span.text)
    return escape(span.text)


def render_block(block: Block, key: int) -> Markup:
    if block.kind == BlockKind.BLANK:
        return Markup('<div data-key="{}" class="note-spacer"></div>').format(key)

    tag, css_class = BLOCK_ELEMENTS[block.kind]
    inner = Markup('').join(render_span(span) for span in block.spans)
    return Markup('<{tag} data-key="{key}" class="{cls}">{inner}</{tag}>').format(
        tag=Markup(tag), key=key, cls=css_class, inner=inner
    )


def render_elements(document: Document) -> list[Markup]:
    """One HTML element per block, in order."""
    return [render_block(block, index) for index, block in enumerate(document)]


def render_html(markdown: str) -> Markup:
    """
    Render a note for display.

    Args:
        markdown: Raw note markdown

    Returns:
        Safe HTML markup; note text is escaped
    """
    return Markup('\n').join(render_elements(build_document(markdown)))


def word_count(markdown: str) -> int:
    """Whitespace-separated words in the raw note, markers included."""
    return len(markdown.split())
