"""Tests for Word export."""

import io

from docx import Document
from docx.shared import Pt

from docx_renderer import NotesDocxRenderer, render_docx


def load(data: bytes):
    return Document(io.BytesIO(data))


def test_three_line_note_gives_four_paragraphs():
    doc = load(render_docx("Ohm's Law", "## Key Concepts\nVoltage drives current\n- Resistance opposes it"))

    assert len(doc.paragraphs) == 4
    assert doc.paragraphs[0].text == "Ohm's Law"
    assert doc.paragraphs[0].style.name == "Heading 1"


def test_blank_lines_become_empty_paragraphs():
    doc = load(render_docx("T", "first\n\nsecond"))

    assert [p.text for p in doc.paragraphs] == ["T", "first", "", "second"]


def test_heading_lines_are_bold_subheadings():
    doc = load(render_docx("T", "### **Deep** `dive`\n#NoSpace"))
    heading, no_space = doc.paragraphs[1], doc.paragraphs[2]

    assert heading.text == "Deep dive"
    assert heading.style.name == "Heading 2"
    assert heading.runs[0].bold is True
    assert heading.paragraph_format.space_before == Pt(12)

    # Any leading '#' makes a heading here, even without a space
    assert no_space.text == "NoSpace"
    assert no_space.style.name == "Heading 2"


def test_whole_line_bold_when_marker_present():
    doc = load(render_docx("T", "Install the **driver** package\nNo emphasis here"))
    bolded, plain = doc.paragraphs[1], doc.paragraphs[2]

    assert bolded.text == "Install the driver package"
    assert len(bolded.runs) == 1
    assert bolded.runs[0].bold is True
    assert plain.runs[0].bold is False
    assert plain.paragraph_format.space_before == Pt(6)


def test_list_prefixes_are_kept_in_default_mode():
    doc = load(render_docx("T", "- item\n1. step\n> quote"))
    assert [p.text for p in doc.paragraphs[1:]] == ["- item", "1. step", "> quote"]


def test_span_runs_bold_only_the_delimited_text():
    doc = load(render_docx("T", "Install the **driver** package", span_runs=True))
    paragraph = doc.paragraphs[1]

    assert [run.text for run in paragraph.runs] == ["Install the ", "driver", " package"]
    assert [bool(run.bold) for run in paragraph.runs] == [False, True, False]


def test_span_runs_code_font_and_list_styles():
    renderer = NotesDocxRenderer(span_runs=True)
    doc = load(renderer.render("T", "- run `make`\n1. first\n> tip"))

    item, step, quote = doc.paragraphs[1:]
    assert item.style.name == "List Bullet"
    assert item.text == "run make"
    assert item.runs[1].font.name == renderer.code_font
    assert step.style.name == "List Number"
    assert step.text == "first"
    assert quote.style.name == "Quote"


def test_title_spacing():
    doc = load(render_docx("Spaced", "body"))
    assert doc.paragraphs[0].paragraph_format.space_after == Pt(20)
    assert doc.paragraphs[1].paragraph_format.space_after == Pt(6)


def test_output_path_writes_file(tmp_path):
    path = tmp_path / "notes.docx"
    data = NotesDocxRenderer(str(path)).render("Saved", "# Heading\nbody")
    assert path.read_bytes() == data
