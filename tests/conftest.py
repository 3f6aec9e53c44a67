# SPDX-License-Identifier: GPL-3.0-or-later

from datetime import datetime

import pytest

from simplenotes.note_store import NoteStore
from simplenotes.persistence import NotePersistence
from simplenotes.storage import MemoryStorage, StorageError

FIXED_TIME = datetime(2026, 10, 19, 9, 30)


class FailingStorage(MemoryStorage):
    """Reads work, every write fails."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.write_attempts = 0

    def set_string(self, key, value):
        self.write_attempts += 1
        raise StorageError('disk full')


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def persistence(storage):
    return NotePersistence(storage)


@pytest.fixture
def store(persistence):
    return NoteStore(persistence, clock=lambda: FIXED_TIME)


def make_store(*texts, **kwargs):
    kwargs.setdefault('clock', lambda: FIXED_TIME)
    store = NoteStore(**kwargs)
    for text in texts:
        store.add(text)
    return store


def texts(store):
    return [note.text for note in store.list()]
