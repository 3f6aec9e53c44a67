# SPDX-License-Identifier: GPL-3.0-or-later

import enum
import logging
from datetime import datetime
from typing import Optional

from simplenotes.constants import TIMESTAMP_FORMAT
from simplenotes.note import Note, is_blank
from simplenotes.storage import StorageError

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    OK = 'ok'
    BLANK_INPUT = 'blank-input'
    INDEX_OUT_OF_RANGE = 'index-out-of-range'
    NOT_FOUND = 'not-found'
    NO_EDIT = 'no-edit'

    def __bool__(self):
        return self is Outcome.OK


class NoteStore:
    """Owns the ordered note list and mirrors every change to persistence."""

    def __init__(self, persistence=None, use_timestamps=True, clock=datetime.now):
        self._persistence = persistence
        self.use_timestamps = use_timestamps
        self._clock = clock
        self._editing_id = None
        self._notes = persistence.load() if persistence is not None else []
        logger.debug('Note store opened with %d notes', len(self._notes))

    def __len__(self):
        return len(self._notes)

    def __iter__(self):
        return iter(list(self._notes))

    @property
    def is_empty(self) -> bool:
        return not self._notes

    @property
    def persistent(self) -> bool:
        return self._persistence is not None

    # --- Index-based access ---

    def list(self) -> list[Note]:
        return list(self._notes)

    def get(self, index) -> Optional[Note]:
        if not self._valid_index(index):
            return None
        return self._notes[index]

    def last(self) -> Optional[Note]:
        return self._notes[-1] if self._notes else None

    def add(self, text) -> Optional[Note]:
        if is_blank(text):
            return None
        timestamp = None
        if self.use_timestamps:
            timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        note = Note(text=text.strip(), timestamp=timestamp)
        self._notes.append(note)
        self._sync()
        return note

    def update(self, index, text) -> Outcome:
        if not self._valid_index(index):
            return Outcome.INDEX_OUT_OF_RANGE
        if is_blank(text):
            return Outcome.BLANK_INPUT
        # Creation timestamp is kept on edit
        self._notes[index] = self._notes[index].with_text(text.strip())
        self._sync()
        return Outcome.OK

    def delete_at(self, index) -> Outcome:
        if not self._valid_index(index):
            return Outcome.INDEX_OUT_OF_RANGE
        note = self._notes.pop(index)
        if note.id == self._editing_id:
            self._editing_id = None
        self._sync()
        return Outcome.OK

    def clear(self):
        self._notes.clear()
        self._editing_id = None
        self._sync()

    # --- Id-based access ---

    def index_of(self, note_id) -> Optional[int]:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None

    def get_by_id(self, note_id) -> Optional[Note]:
        index = self.index_of(note_id)
        return None if index is None else self._notes[index]

    def update_by_id(self, note_id, text) -> Outcome:
        index = self.index_of(note_id)
        if index is None:
            return Outcome.NOT_FOUND
        return self.update(index, text)

    def delete_by_id(self, note_id) -> Outcome:
        index = self.index_of(note_id)
        if index is None:
            return Outcome.NOT_FOUND
        return self.delete_at(index)

    # --- Edit commands ---

    @property
    def editing_id(self) -> Optional[str]:
        return self._editing_id

    def begin_edit(self, note_id) -> Optional[str]:
        """Start editing a note and return its text as the initial draft."""
        note = self.get_by_id(note_id)
        if note is None:
            return None
        self._editing_id = note.id
        return note.text

    def commit_edit(self, text) -> Outcome:
        """Apply the draft to the note being edited.

        Blank text keeps the edit open so the caller can keep its form up.
        """
        if self._editing_id is None:
            return Outcome.NO_EDIT
        outcome = self.update_by_id(self._editing_id, text)
        if outcome is not Outcome.BLANK_INPUT:
            self._editing_id = None
        return outcome

    def cancel_edit(self):
        self._editing_id = None

    # --- Helpers ---

    def _valid_index(self, index) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._notes)

    def _sync(self):
        if self._persistence is None:
            return
        try:
            self._persistence.save(self._notes)
        except StorageError as e:
            logger.warning(
                'Note storage unavailable, keeping notes in memory only: %s', e,
            )
            self._persistence = None

    def close(self):
        self._editing_id = None
        if self._persistence is not None:
            self._persistence.close()
            self._persistence = None
