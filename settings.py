"""Runtime settings read from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 8000
DEFAULT_HISTORY_PATH = Path.home() / ".noteforge" / "history.json"


@dataclass
class Settings:
    """Settings shared by the web app and the CLI."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    history_path: Path = DEFAULT_HISTORY_PATH
    port: int = 5000
    debug: bool = False


def load_settings(environ=None) -> Settings:
    """
    Build Settings from the environment.

    ANTHROPIC_API_KEY, NOTEFORGE_MODEL, NOTEFORGE_MAX_TOKENS,
    NOTEFORGE_HISTORY_PATH, PORT and FLASK_DEBUG are read; anything unset
    keeps its default.
    """
    if environ is None:
        environ = os.environ

    history_path = environ.get('NOTEFORGE_HISTORY_PATH')

    return Settings(
        api_key=environ.get('ANTHROPIC_API_KEY') or None,
        model=environ.get('NOTEFORGE_MODEL', DEFAULT_MODEL),
        max_tokens=int(environ.get('NOTEFORGE_MAX_TOKENS', DEFAULT_MAX_TOKENS)),
        history_path=Path(history_path).expanduser() if history_path else DEFAULT_HISTORY_PATH,
        port=int(environ.get('PORT', 5000)),
        debug=environ.get('FLASK_DEBUG', 'false').lower() == 'true',
    )
