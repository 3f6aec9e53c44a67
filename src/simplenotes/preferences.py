# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio


class PreferencesWindow(Adw.PreferencesDialog):

    def __init__(self, settings=None, **kwargs):
        super().__init__(**kwargs)
        self.set_title('Preferences')
        self._settings = settings
        self._build_ui()

    def _build_ui(self):
        page = Adw.PreferencesPage(title='General', icon_name='preferences-system-symbolic')

        notes_group = Adw.PreferencesGroup(title='Notes')

        timestamps_row = Adw.SwitchRow(
            title='Attach Timestamps',
            subtitle='Record the creation time of new notes',
            active=True,
        )
        if self._settings:
            self._settings.bind(
                'attach-timestamps', timestamps_row, 'active',
                Gio.SettingsBindFlags.DEFAULT,
            )
        else:
            # Without the installed schema there is nowhere to keep the choice
            timestamps_row.set_sensitive(False)

        notes_group.add(timestamps_row)
        page.add(notes_group)

        self.add(page)
