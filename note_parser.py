"""
Parser for AI-generated study notes.
Classifies each markdown line into a block and splits inline bold/code spans.
"""

import re
from dataclasses import dataclass
from enum import Enum


class BlockKind(str, Enum):
    HEADING1 = "Heading1"
    HEADING2 = "Heading2"
    HEADING3 = "Heading3"
    ORDERED_LIST_ITEM = "OrderedListItem"
    UNORDERED_LIST_ITEM = "UnorderedListItem"
    BLOCKQUOTE = "Blockquote"
    BLANK = "Blank"
    PARAGRAPH = "Paragraph"


class SpanStyle(str, Enum):
    BOLD = "Bold"
    CODE = "Code"
    PLAIN = "Plain"


@dataclass(frozen=True)
class Span:
    style: SpanStyle
    text: str


@dataclass(frozen=True)
class Block:
    kind: BlockKind
    spans: tuple[Span, ...] = ()
    source: str = ""

    @property
    def text(self) -> str:
        """Span text joined without styling."""
        return "".join(span.text for span in self.spans)


Document = tuple[Block, ...]


# Prefixes are checked before the blank test, so "- " alone is a list item
PREFIX_RULES = [
    ("# ", BlockKind.HEADING1),
    ("## ", BlockKind.HEADING2),
    ("### ", BlockKind.HEADING3),
]

ORDERED_PREFIX = re.compile(r'^[0-9]+\. ')
INLINE_PATTERN = re.compile(r'\*\*(?P<bold>.*?)\*\*|`(?P<code>.*?)`')


def parse_spans(text: str) -> tuple[Span, ...]:
    """
    Split text into bold, code and plain spans.

    Bold uses **double asterisks**, code uses `backticks`. Both are matched
    non-greedily and never nest; whichever delimiter opens first wins.
    A delimiter without a closing partner is kept as plain text.

    Args:
        text: Line content with any block prefix already removed

    Returns:
        Tuple of Span objects in reading order (empty runs are dropped)
    """
    spans = []
    position = 0

    for match in INLINE_PATTERN.finditer(text):
        if match.start() > position:
            spans.append(Span(SpanStyle.PLAIN, text[position:match.start()]))

        if match.group('bold') is not None:
            style, inner = SpanStyle.BOLD, match.group('bold')
        else:
            style, inner = SpanStyle.CODE, match.group('code')
        if inner:
            spans.append(Span(style, inner))

        position = match.end()

    if position < len(text):
        spans.append(Span(SpanStyle.PLAIN, text[position:]))

    return tuple(spans)


def classify(line: str) -> Block:
    """
    Classify a single markdown line. Never raises.

    Checks run in a fixed order and the first match wins:
    heading 1-3, ordered item, unordered item, blockquote, blank, paragraph.
    """
    for prefix, kind in PREFIX_RULES:
        if line.startswith(prefix):
            return Block(kind, parse_spans(line[len(prefix):]), line)

    match = ORDERED_PREFIX.match(line)
    if match:
        return Block(BlockKind.ORDERED_LIST_ITEM, parse_spans(line[match.end():]), line)

    if line.startswith('- ') or line.startswith('* '):
        return Block(BlockKind.UNORDERED_LIST_ITEM, parse_spans(line[2:]), line)

    if line.startswith('> '):
        return Block(BlockKind.BLOCKQUOTE, parse_spans(line[2:]), line)

    if not line.strip():
        return Block(BlockKind.BLANK, (), line)

    return Block(BlockKind.PARAGRAPH, parse_spans(line), line)


def split_lines(markdown: str) -> list[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    return [line[:-1] if line.endswith('\r') else line for line in markdown.split('\n')]


def build_document(markdown: str) -> Document:
    """
    Build the block sequence for a whole note.

    Every line is classified on its own; no line looks at its neighbours.

    Args:
        markdown: Raw markdown returned by the note generator

    Returns:
        Tuple of Block objects, one per source line
    """
    return tuple(classify(line) for line in split_lines(markdown))


# Test with sample AI output
if __name__ == "__main__":
    sample_output = """# Ohm's Law

## Key Concepts
- **Voltage** is measured in `V`
1. Measure the **current**
> Remember: V = I * R
"""

    document = build_document(sample_output)

    print(f"Parsed {len(document)} blocks:\n")
    for block in document:
        spans = ", ".join(f"{span.style.value}({span.text!r})" for span in block.spans)
        print(f"{block.kind.value:<18} {spans}")
