"""
Note generation through the Anthropic Messages API.
"""

from typing import Optional

import anthropic

from prompt_template import NoteLevel, build_prompt
from settings import DEFAULT_MAX_TOKENS, DEFAULT_MODEL

FAILURE_MESSAGE = "Failed to generate notes. Please try again later."


class GenerationError(Exception):
    """The note generator could not produce notes. The message is safe to show users."""


def generate_notes(
    subject: str,
    topic: str,
    level: Optional[NoteLevel] = None,
    api_key: Optional[str] = None,
    model: str = DEFAULT_MODEL,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    client=None
) -> str:
    """
    Ask the model for study notes.

    Args:
        subject: Broad subject
        topic: Topic within the subject
        level: Optional difficulty level
        api_key: Anthropic API key (falls back to ANTHROPIC_API_KEY when omitted)
        model: Which Claude model to use
        max_tokens: Response length cap
        client: Pre-built anthropic.Anthropic client, mainly for tests

    Returns:
        The notes as markdown

    Raises:
        ValueError: subject or topic is blank
        GenerationError: the API call failed or returned no text
    """
    if not subject or not subject.strip() or not topic or not topic.strip():
        raise ValueError("Subject and topic are required")

    system_prompt, user_prompt = build_prompt(subject, topic, level)

    if client is None:
        client = anthropic.Anthropic(api_key=api_key)

    print(f"Calling Claude API for '{topic.strip()}'...")
    try:
        response = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}]
        )
    except anthropic.AnthropicError as e:
        print(f"ERROR: note generation failed: {e}")
        raise GenerationError(FAILURE_MESSAGE) from e

    text = "".join(
        block.text for block in response.content if getattr(block, "type", None) == "text"
    )
    if not text.strip():
        raise GenerationError(FAILURE_MESSAGE)

    print(f"Received {len(text)} characters from AI")
    return text
