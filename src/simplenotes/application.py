# SPDX-License-Identifier: GPL-3.0-or-later

import logging

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio, GObject, Gtk

from simplenotes.constants import APP_ID, APP_NAME
from simplenotes.glib_storage import default_storage, lookup_settings
from simplenotes.main_window import MainWindow
from simplenotes.note_store import NoteStore
from simplenotes.persistence import NotePersistence

logger = logging.getLogger(__name__)


class SimpleNotesApp(Adw.Application):

    __gsignals__ = {
        'notes-changed': (GObject.SignalFlags.RUN_LAST, None, ()),
    }

    def __init__(self, version='0.1.0', **kwargs):
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
            **kwargs,
        )
        self.version = version
        self.store = None
        self.settings = None

    def do_startup(self):
        Adw.Application.do_startup(self)
        self.settings = lookup_settings()

        use_timestamps = True
        if self.settings:
            use_timestamps = self.settings.get_boolean('attach-timestamps')
            self.settings.connect('changed::attach-timestamps', self._on_timestamps_setting_changed)

        self.store = NoteStore(
            NotePersistence(default_storage()),
            use_timestamps=use_timestamps,
        )
        logger.info('Loaded %d notes', len(self.store))
        self._setup_actions()
        self._setup_shortcuts()

    def do_shutdown(self):
        if self.store is not None:
            self.store.close()
            self.store = None
        Adw.Application.do_shutdown(self)

    def _setup_actions(self):
        actions = [
            ('new-note', self._on_new_note, None),
            ('clear-all', self._on_clear_all, None),
            ('about', self._on_about, None),
            ('quit', self._on_quit, None),
            ('preferences', self._on_preferences, None),
            ('shortcuts', self._on_shortcuts, None),
        ]
        for name, callback, param_type in actions:
            action = Gio.SimpleAction.new(name, param_type)
            action.connect('activate', callback)
            self.add_action(action)

    def _setup_shortcuts(self):
        self.set_accels_for_action('app.new-note', ['<Control>n'])
        self.set_accels_for_action('app.quit', ['<Control>q'])
        self.set_accels_for_action('app.shortcuts', ['<Control>question'])
        self.set_accels_for_action('app.preferences', ['<Control>comma'])

    def do_activate(self):
        win = self._main_window()
        if win is None:
            win = MainWindow(application=self)
        win.present()

    def _main_window(self):
        for win in self.get_windows():
            if isinstance(win, MainWindow):
                return win
        return None

    def notify_changed(self):
        self.emit('notes-changed')

    def _on_timestamps_setting_changed(self, settings, key):
        if self.store is not None:
            self.store.use_timestamps = settings.get_boolean(key)

    def _on_new_note(self, action, param):
        self.activate()
        win = self._main_window()
        if win:
            win.show_add_form()

    def _on_clear_all(self, action, param):
        win = self._main_window()
        if win:
            win.confirm_clear_all()

    def _on_about(self, action, param):
        about = Adw.AboutDialog(
            application_name=APP_NAME,
            application_icon=APP_ID,
            developer_name='Ferry',
            version=self.version,
            developers=['Ferry'],
            copyright='Copyright 2026 Ferry',
            license_type=Gtk.License.GPL_3_0,
        )
        about.present(self.get_active_window())

    def _on_quit(self, action, param):
        self.quit()

    def _on_preferences(self, action, param):
        from simplenotes.preferences import PreferencesWindow
        win = PreferencesWindow(settings=self.settings)
        win.present(self.get_active_window())

    def _on_shortcuts(self, action, param):
        from simplenotes.shortcuts import ShortcutsWindow
        win = ShortcutsWindow(transient_for=self.get_active_window())
        win.present()
