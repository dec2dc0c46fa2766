"""
Study Notes PDF Renderer
Renders a note onto A4 portrait pages: large coloured title, plain wrapped body text.
Markdown markers are stripped rather than styled.
"""

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas
import io
import re
from typing import List, Optional

from note_parser import BlockKind, build_document

TITLE_COLOR = "#0ea5e9"
BODY_COLOR = "#1e293b"

MARKER_PATTERN = re.compile(r'[#*`]')
WHITESPACE_PATTERN = re.compile(r'\s+')


def export_filename(title: str, extension: str) -> str:
    """Download name for an exported note, e.g. 'Engine_Assembly_Notes.pdf'."""
    stem = WHITESPACE_PATTERN.sub('_', title)
    return f"{stem}_Notes.{extension}"


def strip_markers(line: str) -> str:
    return MARKER_PATTERN.sub('', line)


class NotesPDFRenderer:
    def __init__(self, output_path: Optional[str] = None):
        self.output_path = output_path
        self.page_width, self.page_height = A4
        self.margin = 20 * mm
        self.max_line_width = self.page_width - 2 * self.margin

        # Positions are measured from the top edge of the page
        self.title_top = 30 * mm
        self.body_top = 45 * mm
        self.page_top = 20 * mm
        self.bottom_bound = 280 * mm

        self.title_font_size = 22
        self.title_line_height = 9 * mm
        self.body_font_size = 11
        self.line_height = 7 * mm

        self.c = None  # canvas
        self.cursor = 0.0
        self.page_number = 0
        self.page_count = 0
        self.placements = []  # (page, y from top, text) for every drawn line

    def _wrap_text(self, text: str, max_width: float, font_name: str, font_size: float) -> List[str]:
        """Word wrapping; words wider than a full line are broken by character."""
        lines = []
        current_line = []

        for word in text.split():
            test_line = ' '.join(current_line + [word])
            if self.c.stringWidth(test_line, font_name, font_size) <= max_width:
                current_line.append(word)
                continue

            if current_line:
                lines.append(' '.join(current_line))
                current_line = []

            while self.c.stringWidth(word, font_name, font_size) > max_width and len(word) > 1:
                cut = len(word) - 1
                while cut > 1 and self.c.stringWidth(word[:cut], font_name, font_size) > max_width:
                    cut -= 1
                lines.append(word[:cut])
                word = word[cut:]
            current_line = [word]

        if current_line:
            lines.append(' '.join(current_line))

        return lines if lines else ['']

    def _new_page(self):
        self.c.showPage()
        self.page_number += 1
        self.cursor = self.page_top
        self._set_body_style()

    def _set_body_style(self):
        self.c.setFont("Helvetica", self.body_font_size)
        self.c.setFillColor(HexColor(BODY_COLOR))

    def _draw_line(self, text: str):
        """Draw one wrapped line at the cursor, breaking the page first if it would not fit."""
        if self.cursor > self.bottom_bound:
            self._new_page()
        self.c.drawString(self.margin, self.page_height - self.cursor, text)
        self.placements.append((self.page_number, self.cursor, text))
        self.cursor += self.line_height

    def _draw_title(self, title: str):
        c = self.c
        c.setFont("Helvetica-Bold", self.title_font_size)
        c.setFillColor(HexColor(TITLE_COLOR))

        lines = self._wrap_text(title, self.max_line_width, "Helvetica-Bold", self.title_font_size)
        for i, line in enumerate(lines):
            c.drawString(self.margin, self.page_height - (self.title_top + i * self.title_line_height), line)

        # A wrapped title pushes the body down by the extra title lines
        self.cursor = self.body_top + (len(lines) - 1) * self.title_line_height

    def render(self, title: str, markdown: str) -> bytes:
        """
        Render the note to PDF.

        Args:
            title: Title drawn at the top of the first page
            markdown: Note body in the supported markdown subset

        Returns:
            The PDF file contents
        """
        buffer = io.BytesIO()
        self.c = canvas.Canvas(buffer, pagesize=A4)
        self.c.setTitle(title)
        self.page_number = 0
        self.placements = []

        self._draw_title(title)
        self._set_body_style()

        for block in build_document(markdown):
            line = strip_markers(block.source)
            # "**" alone is blank once markers are gone
            if block.kind == BlockKind.BLANK or not line.strip():
                self.cursor += self.line_height / 2
                continue

            for sub_line in self._wrap_text(line, self.max_line_width, "Helvetica", self.body_font_size):
                self._draw_line(sub_line)

        self.c.save()
        self.page_count = self.page_number + 1
        data = buffer.getvalue()

        if self.output_path:
            with open(self.output_path, 'wb') as f:
                f.write(data)
            print(f"✓ PDF saved: {self.output_path}")

        return data


def render_pdf(title: str, markdown: str) -> bytes:
    """Render a note to PDF bytes."""
    return NotesPDFRenderer().render(title, markdown)
