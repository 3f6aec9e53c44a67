# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gtk


class ShortcutsWindow(Gtk.ShortcutsWindow):

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        section = Gtk.ShortcutsSection(visible=True, section_name='shortcuts')

        general = Gtk.ShortcutsGroup(title='General', visible=True)
        for title, accelerator in (
            ('New Note', '<Control>n'),
            ('Preferences', '<Control>comma'),
            ('Keyboard Shortcuts', '<Control>question'),
            ('Quit', '<Control>q'),
        ):
            general.append(Gtk.ShortcutsShortcut(
                title=title,
                accelerator=accelerator,
                visible=True,
            ))
        section.append(general)

        self.add_section(section)
