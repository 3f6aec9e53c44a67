# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, GLib, GObject, Gtk

PREVIEW_MAX_CHARS = 120


class NoteRow(Adw.ActionRow):
    """List row for one note: number, text preview, creation time and actions."""

    __gsignals__ = {
        'edit-requested': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'delete-requested': (GObject.SignalFlags.RUN_LAST, None, (str,)),
    }

    def __init__(self, note, position, **kwargs):
        super().__init__(activatable=True, **kwargs)
        self._note = note

        preview = note.text.replace('\n', ' ')
        if len(preview) > PREVIEW_MAX_CHARS:
            preview = preview[:PREVIEW_MAX_CHARS] + '…'

        self.set_title(f'Note #{position}')
        self.set_subtitle(GLib.markup_escape_text(preview))
        self.set_subtitle_lines(2)
        if note.timestamp:
            self.set_tooltip_text(f'Created {note.timestamp}')

        edit_btn = Gtk.Button(
            icon_name='document-edit-symbolic',
            tooltip_text='Edit',
            valign=Gtk.Align.CENTER,
        )
        edit_btn.add_css_class('flat')
        edit_btn.connect('clicked', lambda b: self.emit('edit-requested', self._note.id))
        self.add_suffix(edit_btn)

        delete_btn = Gtk.Button(
            icon_name='user-trash-symbolic',
            tooltip_text='Delete',
            valign=Gtk.Align.CENTER,
        )
        delete_btn.add_css_class('flat')
        delete_btn.connect('clicked', lambda b: self.emit('delete-requested', self._note.id))
        self.add_suffix(delete_btn)

        self.add_suffix(Gtk.Image.new_from_icon_name('go-next-symbolic'))

    @property
    def note_id(self):
        return self._note.id
