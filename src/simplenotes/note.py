# SPDX-License-Identifier: GPL-3.0-or-later

import uuid
from dataclasses import dataclass, field
from typing import Optional


def is_blank(text) -> bool:
    return text is None or not text.strip()


def new_note_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Note:
    text: str
    timestamp: Optional[str] = None
    id: str = field(default_factory=new_note_id)

    def with_text(self, text) -> 'Note':
        """Return a copy carrying new text; id and creation time are kept."""
        return Note(text=text, timestamp=self.timestamp, id=self.id)

    def to_dict(self) -> dict:
        return {'id': self.id, 'text': self.text, 'timestamp': self.timestamp}

    @classmethod
    def from_dict(cls, data) -> 'Note':
        note_id = data.get('id') or new_note_id()
        timestamp = data.get('timestamp')
        if timestamp is not None:
            timestamp = str(timestamp)
        return cls(text=str(data['text']), timestamp=timestamp, id=str(note_id))
