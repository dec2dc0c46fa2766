"""
Main entry point for NoteForge.

Workflow:
1. Provide a subject + topic (and optionally a level)
2. Query Claude for markdown study notes
3. Save them to the recent-notes history
4. Export to PDF and/or Word

Usage:
    python main.py --subject Physics --topic "Ohm's Law" --level Beginner --format both
    python main.py --input notes.md --title "Ohm's Law" --format pdf

Or use export_notes() programmatically.
"""

import argparse
import sys
from pathlib import Path

from prompt_template import NoteLevel, parse_level
from generator import generate_notes, GenerationError
from history import HistoryStore, NoteData
from pdf_renderer import NotesPDFRenderer, export_filename
from docx_renderer import NotesDocxRenderer
from settings import load_settings

FORMATS = {
    "pdf": ["pdf"],
    "docx": ["docx"],
    "both": ["pdf", "docx"],
    "md": ["md"],
}


def export_notes(title: str, markdown: str, output_dir: str = ".", fmt: str = "both") -> list[str]:
    """
    Write already-generated notes to disk.

    Args:
        title: Note title, also used to build the file names
        markdown: Note body
        output_dir: Directory the files go into (created if missing)
        fmt: One of pdf, docx, both, md

    Returns:
        Paths of the files written
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format '{fmt}'. Choose one of: {', '.join(FORMATS)}")

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []

    for extension in FORMATS[fmt]:
        path = out / export_filename(title, extension)
        if extension == "pdf":
            NotesPDFRenderer(str(path)).render(title, markdown)
        elif extension == "docx":
            NotesDocxRenderer(str(path)).render(title, markdown)
        else:
            path.write_text(markdown, encoding="utf-8")
            print(f"✓ Markdown saved: {path}")
        written.append(str(path))

    return written


def main(argv=None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Generate study notes and export them to PDF/Word")
    parser.add_argument("--subject", type=str, help="Subject, e.g. 'Physics'")
    parser.add_argument("--topic", type=str, help="Topic within the subject, e.g. \"Ohm's Law\"")
    parser.add_argument("--level", type=str, choices=[level.value for level in NoteLevel],
                        help="Difficulty level")
    parser.add_argument("--input", "-i", type=str, help="Existing markdown notes to export instead of calling the API")
    parser.add_argument("--title", type=str, help="Title for --input (defaults to the file name)")
    parser.add_argument("--format", "-f", type=str, default="both", choices=list(FORMATS), help="Export format")
    parser.add_argument("--output-dir", "-o", type=str, default=".", help="Where to save exported files")
    parser.add_argument("--api-key", type=str, default=settings.api_key, help="Anthropic API key")
    parser.add_argument("--model", type=str, default=settings.model, help="Claude model")
    parser.add_argument("--history", type=str, default=str(settings.history_path), help="History file")

    args = parser.parse_args(argv)

    if args.input:
        markdown = Path(args.input).read_text(encoding="utf-8")
        title = args.title or Path(args.input).stem
        export_notes(title, markdown, args.output_dir, args.format)
        return 0

    if not args.subject or not args.topic:
        parser.error("--subject and --topic are required unless --input is given")

    level = parse_level(args.level)

    try:
        markdown = generate_notes(
            args.subject,
            args.topic,
            level,
            api_key=args.api_key,
            model=args.model,
            max_tokens=settings.max_tokens
        )
    except GenerationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    HistoryStore(args.history).record(NoteData.create(args.subject, args.topic, level, markdown))

    export_notes(args.topic, markdown, args.output_dir, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
