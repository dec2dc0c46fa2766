"""
Prompt template for generating study notes on a subject and topic.
The output rules match the markdown subset the notes parser understands.
"""

from enum import Enum
from typing import Optional


class NoteLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


SYSTEM_PROMPT = """You are a study assistant writing clear, well-structured study notes for students.

OUTPUT FORMAT RULES (follow exactly):
- Write in Markdown, one element per line
- Headings: "# " for the title, "## " for sections, "### " for sub-sections
- Bullet points with "- " (dash + space)
- Numbered steps with "1. ", "2. ", etc.
- Use **double asterisks** for bold/key terms
- Use `backticks` for formulas, code, units and commands
- Use "> " for a single-line tip or remark
- Use blank lines to separate sections
- Do NOT use tables, nested lists, images, links or code fences
- Do NOT add commentary before or after the notes
"""

USER_PROMPT_TEMPLATE = """Generate comprehensive yet simple and well-structured study notes for the following:
Subject: {subject}
Topic: {topic}
{level_line}
Structure the notes using:
- A clear title
- An introductory overview
- Key concepts (use bullet points)
- Detailed explanation of sub-topics
- Important formulas or dates (if applicable)
- A brief summary or conclusion

Use professional but easy-to-understand language. Return the response in Markdown format."""

LEVEL_GUIDANCE = {
    NoteLevel.BEGINNER: "Assume no prior knowledge. Define every term and prefer everyday examples.",
    NoteLevel.INTERMEDIATE: "Assume the basics are known. Focus on how the pieces fit together and practical steps.",
    NoteLevel.ADVANCED: "Assume solid background. Cover edge cases, trade-offs and deeper theory.",
}


def parse_level(value) -> Optional[NoteLevel]:
    """
    Turn user input into a NoteLevel.

    Accepts a NoteLevel, its value in any letter case, or an empty value (no level).
    Raises ValueError for anything else.
    """
    if value is None or value == "":
        return None
    if isinstance(value, NoteLevel):
        return value
    for level in NoteLevel:
        if str(value).strip().lower() == level.value.lower():
            return level
    choices = ", ".join(level.value for level in NoteLevel)
    raise ValueError(f"Unknown level '{value}'. Choose one of: {choices}")


def build_prompt(subject: str, topic: str, level: Optional[NoteLevel] = None) -> tuple[str, str]:
    """
    Build the system and user prompts for note generation.

    Args:
        subject: Broad subject, e.g. "Mechanical Engineering"
        topic: Topic within the subject, e.g. "Engine Assembly Workflow"
        level: Optional difficulty level the notes should be pitched at

    Returns:
        Tuple of (system_prompt, user_prompt)
    """
    if level is not None:
        level_line = f"Level: {level.value}\n{LEVEL_GUIDANCE[level]}\n"
    else:
        level_line = ""

    user_prompt = USER_PROMPT_TEMPLATE.format(
        subject=subject.strip(),
        topic=topic.strip(),
        level_line=level_line
    )

    return SYSTEM_PROMPT, user_prompt


# Example usage
if __name__ == "__main__":
    system, user = build_prompt("Physics", "Ohm's Law", NoteLevel.BEGINNER)
    print("=== SYSTEM PROMPT ===")
    print(system)
    print("\n=== USER PROMPT ===")
    print(user)
