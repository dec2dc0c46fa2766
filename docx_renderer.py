"""
Study Notes Word Renderer
Builds a .docx with a top-level title heading and one paragraph per note line.
"""

import io
import re
from typing import Optional

from docx import Document
from docx.shared import Pt

from note_parser import Block, BlockKind, SpanStyle, build_document

HEADING_MARKERS = re.compile(r'^#+\s*')
INLINE_MARKERS = re.compile(r'[*`]')

# Built-in styles of the default python-docx template; list numbering comes from Word
SPAN_MODE_STYLES = {
    BlockKind.ORDERED_LIST_ITEM: "List Number",
    BlockKind.UNORDERED_LIST_ITEM: "List Bullet",
    BlockKind.BLOCKQUOTE: "Quote",
}


class NotesDocxRenderer:
    """
    Word export.

    By default a non-heading line is bolded as a whole when it contains "**"
    anywhere. With span_runs=True each inline span becomes its own run, so only
    the delimited text is bold and `code` is set in Courier.
    """

    def __init__(self, output_path: Optional[str] = None, span_runs: bool = False):
        self.output_path = output_path
        self.span_runs = span_runs

        self.title_space_after = Pt(20)
        self.heading_space_before = Pt(12)
        self.body_space_before = Pt(6)
        self.space_after = Pt(6)
        self.code_font = "Courier New"

    def _add_heading_line(self, doc, block: Block):
        text = INLINE_MARKERS.sub('', HEADING_MARKERS.sub('', block.source))
        paragraph = doc.add_paragraph(style="Heading 2")
        paragraph.add_run(text).bold = True
        paragraph.paragraph_format.space_before = self.heading_space_before
        return paragraph

    def _add_body_line(self, doc, block: Block):
        if self.span_runs:
            paragraph = doc.add_paragraph(style=SPAN_MODE_STYLES.get(block.kind))
            for span in block.spans:
                run = paragraph.add_run(span.text)
                if span.style == SpanStyle.BOLD:
                    run.bold = True
                elif span.style == SpanStyle.CODE:
                    run.font.name = self.code_font
        else:
            paragraph = doc.add_paragraph()
            text = INLINE_MARKERS.sub('', block.source)
            paragraph.add_run(text).bold = '**' in block.source

        paragraph.paragraph_format.space_before = self.body_space_before
        return paragraph

    def render(self, title: str, markdown: str) -> bytes:
        """
        Render the note to a Word document.

        Args:
            title: Text of the leading Heading 1 paragraph
            markdown: Note body; every line becomes exactly one paragraph

        Returns:
            The .docx file contents
        """
        doc = Document()

        heading = doc.add_heading(title, level=1)
        heading.paragraph_format.space_after = self.title_space_after

        for block in build_document(markdown):
            if block.source.startswith('#'):
                paragraph = self._add_heading_line(doc, block)
            else:
                paragraph = self._add_body_line(doc, block)
            paragraph.paragraph_format.space_after = self.space_after

        buffer = io.BytesIO()
        doc.save(buffer)
        data = buffer.getvalue()

        if self.output_path:
            with open(self.output_path, 'wb') as f:
                f.write(data)
            print(f"✓ DOCX saved: {self.output_path}")

        return data


def render_docx(title: str, markdown: str, span_runs: bool = False) -> bytes:
    """Render a note to .docx bytes."""
    return NotesDocxRenderer(span_runs=span_runs).render(title, markdown)
