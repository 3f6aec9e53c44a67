# SPDX-License-Identifier: GPL-3.0-or-later
"""
JSON codec between the note list and a single key-value entry.

Stored format (under STORAGE_KEY):
[
  {"id": "0f1c...", "text": "Buy milk", "timestamp": "19 October 2026 09:30"},
  ...
]

Plain string arrays (["Buy milk", ...]) written by older versions are still
accepted on load; such notes get a fresh id and no timestamp.
"""

import json
import logging

from simplenotes.constants import STORAGE_KEY
from simplenotes.note import Note, is_blank
from simplenotes.storage import StorageError

logger = logging.getLogger(__name__)


def encode_notes(notes) -> str:
    return json.dumps([note.to_dict() for note in notes], ensure_ascii=False)


def decode_notes(blob) -> list[Note]:
    """Decode a stored blob. Bad input yields an empty or partial list, never an error."""
    if not blob:
        return []
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, TypeError):
        logger.warning('Discarding unparsable notes blob')
        return []
    if not isinstance(data, list):
        logger.warning('Discarding notes blob that is not a JSON array')
        return []

    notes = []
    for entry in data:
        if isinstance(entry, str):
            if not is_blank(entry):
                notes.append(Note(text=entry))
        elif isinstance(entry, dict) and isinstance(entry.get('text'), str):
            if not is_blank(entry['text']):
                notes.append(Note.from_dict(entry))
        else:
            logger.debug('Skipping malformed note entry: %r', entry)
    return notes


class NotePersistence:

    def __init__(self, storage, key=STORAGE_KEY):
        self._storage = storage
        self._key = key

    def save(self, notes):
        """Write the whole list. Raises StorageError if the store rejects it."""
        self._storage.set_string(self._key, encode_notes(notes))

    def load(self) -> list[Note]:
        try:
            blob = self._storage.get_string(self._key)
        except StorageError as e:
            logger.warning('Could not read stored notes: %s', e)
            return []
        return decode_notes(blob)

    def close(self):
        self._storage.close()
