"""
Recent notes history.
Keeps the 10 most recent generated notes, newest first, in a JSON file under a fixed key.
"""

import json
import os
import tempfile
import threading
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from prompt_template import NoteLevel, parse_level

HISTORY_LIMIT = 10
STORAGE_KEY = "note_forge_history"
TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"

# Held across load-push-save in HistoryStore.record
_record_lock = threading.Lock()


@dataclass(frozen=True)
class NoteData:
    subject: str
    topic: str
    level: Optional[NoteLevel]
    content: str
    timestamp: str

    @classmethod
    def create(cls, subject: str, topic: str, level: Optional[NoteLevel], content: str) -> "NoteData":
        """New note stamped with the current local time."""
        return cls(subject, topic, level, content, datetime.now().strftime(TIMESTAMP_FORMAT))

    def to_dict(self) -> dict:
        data = asdict(self)
        data['level'] = self.level.value if self.level else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "NoteData":
        return cls(
            subject=data.get('subject', ''),
            topic=data.get('topic', ''),
            level=parse_level(data.get('level')),
            content=data.get('content', ''),
            timestamp=data.get('timestamp', ''),
        )


def push_history(history: list[NoteData], note: NoteData, limit: int = HISTORY_LIMIT) -> list[NoteData]:
    """
    Prepend a note and cap the list.

    Args:
        history: Current history, newest first (left untouched)
        note: Newly generated note
        limit: Maximum number of entries kept

    Returns:
        New list with the note first and at most `limit` entries
    """
    return [note, *history][:limit]


class HistoryStore:
    """JSON file holding the history list under STORAGE_KEY."""

    def __init__(self, path, limit: int = HISTORY_LIMIT):
        self.path = Path(path)
        self.limit = limit

    def load(self) -> list[NoteData]:
        if not self.path.exists():
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            entries = raw.get(STORAGE_KEY, []) if isinstance(raw, dict) else []
            if not isinstance(entries, list):
                raise TypeError(f"expected a list under {STORAGE_KEY!r}, got {type(entries).__name__}")
            return [NoteData.from_dict(entry) for entry in entries][:self.limit]
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
            print(f"WARNING: ignoring unreadable history file {self.path}: {e}")
            return []

    def save(self, history: list[NoteData]):
        """Write the whole list; the file is replaced in one step."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {STORAGE_KEY: [note.to_dict() for note in history[:self.limit]]}

        fd, temp_path = tempfile.mkstemp(dir=self.path.parent, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(temp_path, self.path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def record(self, note: NoteData) -> list[NoteData]:
        """Add a note to the stored history and return the updated list."""
        with _record_lock:
            history = push_history(self.load(), note, self.limit)
            self.save(history)
        return history
