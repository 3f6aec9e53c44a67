# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gtk


class DetailPage(Adw.NavigationPage):
    """Full text and creation time of one note, or a not-found message."""

    def __init__(self, note, **kwargs):
        super().__init__(title='Note Details', tag='detail', **kwargs)

        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(Adw.HeaderBar())

        if note is None:
            toolbar_view.set_content(Adw.StatusPage(
                icon_name='dialog-question-symbolic',
                title='Note Not Found',
                description='The note may have been deleted',
            ))
            self.set_child(toolbar_view)
            return

        box = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=6,
            margin_start=16,
            margin_end=16,
            margin_top=16,
            margin_bottom=16,
        )

        text_heading = Gtk.Label(label='Content', xalign=0)
        text_heading.add_css_class('heading')
        box.append(text_heading)

        text_label = Gtk.Label(
            label=note.text,
            xalign=0,
            wrap=True,
            selectable=True,
            margin_bottom=16,
        )
        box.append(text_label)

        if note.timestamp:
            time_heading = Gtk.Label(label='Created', xalign=0)
            time_heading.add_css_class('heading')
            box.append(time_heading)

            time_label = Gtk.Label(label=note.timestamp, xalign=0)
            time_label.add_css_class('dim-label')
            box.append(time_label)

        back_btn = Gtk.Button(label='Back', halign=Gtk.Align.START, margin_top=32)
        back_btn.add_css_class('pill')
        back_btn.connect('clicked', self._on_back)
        box.append(back_btn)

        scrolled = Gtk.ScrolledWindow(vexpand=True)
        scrolled.set_child(box)
        toolbar_view.set_content(scrolled)
        self.set_child(toolbar_view)

    def _on_back(self, btn):
        self.activate_action('navigation.pop', None)
