# SPDX-License-Identifier: GPL-3.0-or-later
"""
Key-value storage used to persist the note list.

A storage backend is any object exposing:

    get_string(key) -> str | None
    set_string(key, value) -> None
    close() -> None

Backends raise StorageError when the underlying store cannot be written.
GLib-backed implementations live in simplenotes.glib_storage.
"""


class StorageError(Exception):
    """The key-value store is unavailable or refused a write."""


class MemoryStorage:
    """Dict-backed storage that lives as long as the process."""

    def __init__(self, initial=None):
        self._values = dict(initial or {})
        self._closed = False

    def get_string(self, key):
        return self._values.get(key)

    def set_string(self, key, value):
        if self._closed:
            raise StorageError('storage is closed')
        self._values[key] = value

    def close(self):
        self._closed = True
