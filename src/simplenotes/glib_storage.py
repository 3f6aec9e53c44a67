# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os

from gi.repository import Gio, GLib

from simplenotes.constants import (
    APP_ID,
    DATA_DIR_NAME,
    KEYFILE_GROUP,
    KEYFILE_NAME,
)
from simplenotes.storage import StorageError

logger = logging.getLogger(__name__)


def default_keyfile_path() -> str:
    return os.path.join(GLib.get_user_data_dir(), DATA_DIR_NAME, KEYFILE_NAME)


class KeyFileStorage:
    """String values kept in a GLib key file, written through on every set."""

    def __init__(self, path=None, group=KEYFILE_GROUP):
        self._path = path or default_keyfile_path()
        self._group = group
        self._keyfile = GLib.KeyFile()

        if os.path.exists(self._path):
            try:
                self._keyfile.load_from_file(
                    self._path, GLib.KeyFileFlags.KEEP_COMMENTS,
                )
            except GLib.Error as e:
                logger.warning('Ignoring unreadable key file %s: %s', self._path, e.message)
                self._keyfile = GLib.KeyFile()

    @property
    def path(self):
        return self._path

    def get_string(self, key):
        if not self._keyfile.has_group(self._group):
            return None
        try:
            return self._keyfile.get_string(self._group, key)
        except GLib.Error:
            return None

    def set_string(self, key, value):
        self._keyfile.set_string(self._group, key, value)
        try:
            os.makedirs(os.path.dirname(self._path), exist_ok=True)
            self._keyfile.save_to_file(self._path)
        except GLib.Error as e:
            raise StorageError(e.message) from e
        except OSError as e:
            raise StorageError(str(e)) from e

    def close(self):
        pass


class SettingsStorage:
    """String values kept in Gio.Settings keys of the application schema."""

    def __init__(self, settings):
        self._settings = settings

    @staticmethod
    def _settings_key(key):
        # GSettings key names only allow lowercase letters, digits and dashes
        return key.replace('_', '-')

    def get_string(self, key):
        value = self._settings.get_string(self._settings_key(key))
        return value or None

    def set_string(self, key, value):
        if not self._settings.set_string(self._settings_key(key), value):
            raise StorageError(f'settings key {key!r} is not writable')

    def close(self):
        Gio.Settings.sync()


def lookup_settings():
    """Return the application Gio.Settings, or None if the schema is not installed."""
    schema_source = Gio.SettingsSchemaSource.get_default()
    if schema_source and schema_source.lookup(APP_ID, True):
        return Gio.Settings.new(APP_ID)
    return None


def default_storage():
    settings = lookup_settings()
    if settings is not None:
        logger.debug('Storing notes in GSettings schema %s', APP_ID)
        return SettingsStorage(settings)
    storage = KeyFileStorage()
    logger.debug('Storing notes in key file %s', storage.path)
    return storage
