# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gdk, Gio, Gtk

from simplenotes.constants import APP_ID, APP_NAME
from simplenotes.detail_page import DetailPage
from simplenotes.note import is_blank
from simplenotes.note_row import NoteRow
from simplenotes.note_store import Outcome


class MainWindow(Adw.ApplicationWindow):

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._app = self.get_application()
        self._warned_in_memory = False

        self.set_title(APP_NAME)
        self.set_default_size(480, 720)
        self.set_icon_name(APP_ID)

        self._build_ui()
        self._app.connect('notes-changed', self._on_notes_changed)
        self._setup_key_controller()
        self._refresh_notes()

    @property
    def store(self):
        return self._app.store

    def _build_ui(self):
        self._nav_view = Adw.NavigationView()

        toolbar_view = Adw.ToolbarView()
        header = Adw.HeaderBar()

        menu = Gio.Menu()
        menu.append('Clear All Notes', 'app.clear-all')
        menu.append('Preferences', 'app.preferences')
        menu.append('Keyboard Shortcuts', 'app.shortcuts')
        menu.append(f'About {APP_NAME}', 'app.about')
        menu_btn = Gtk.MenuButton(
            icon_name='open-menu-symbolic',
            menu_model=menu,
        )
        header.pack_end(menu_btn)
        toolbar_view.add_top_bar(header)

        content = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=12,
            margin_start=16,
            margin_end=16,
            margin_top=16,
            margin_bottom=16,
        )

        # Action buttons
        buttons = Gtk.Box(
            orientation=Gtk.Orientation.HORIZONTAL,
            spacing=10,
            homogeneous=True,
        )
        self._add_toggle = Gtk.ToggleButton(label='Add Note')
        self._add_toggle.add_css_class('suggested-action')
        self._add_toggle.connect('toggled', self._on_add_toggled)
        buttons.append(self._add_toggle)

        self._latest_btn = Gtk.Button(label='Latest Note')
        self._latest_btn.connect('clicked', self._on_latest_clicked)
        buttons.append(self._latest_btn)
        content.append(buttons)

        self._clear_btn = Gtk.Button(label='Clear All Notes')
        self._clear_btn.add_css_class('destructive-action')
        self._clear_btn.add_css_class('pill')
        self._clear_btn.connect('clicked', lambda b: self.confirm_clear_all())
        content.append(self._clear_btn)

        # Add form
        form = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        self._note_entry = Gtk.Entry(placeholder_text='Note text...')
        self._note_entry.connect('activate', self._on_save_clicked)
        form.append(self._note_entry)
        save_btn = Gtk.Button(label='Save', halign=Gtk.Align.START)
        save_btn.connect('clicked', self._on_save_clicked)
        form.append(save_btn)

        self._form_revealer = Gtk.Revealer(
            transition_type=Gtk.RevealerTransitionType.SLIDE_DOWN,
        )
        self._form_revealer.set_child(form)
        content.append(self._form_revealer)

        self._count_label = Gtk.Label(xalign=0)
        self._count_label.add_css_class('heading')
        content.append(self._count_label)

        # Notes list
        self._notes_list = Gtk.ListBox(selection_mode=Gtk.SelectionMode.NONE)
        self._notes_list.add_css_class('boxed-list')
        self._notes_list.connect('row-activated', self._on_row_activated)

        self._empty_state = Adw.StatusPage(
            icon_name='document-new-symbolic',
            title='No Notes Yet',
            description='Notes you add will appear here',
        )

        self._notes_stack = Gtk.Stack(vexpand=True)
        self._notes_stack.add_named(self._notes_list, 'list')
        self._notes_stack.add_named(self._empty_state, 'empty')
        content.append(self._notes_stack)

        scrolled = Gtk.ScrolledWindow(vexpand=True)
        scrolled.set_child(content)

        self._toast_overlay = Adw.ToastOverlay()
        self._toast_overlay.set_child(scrolled)
        toolbar_view.set_content(self._toast_overlay)

        self._nav_view.add(Adw.NavigationPage(
            child=toolbar_view, title=APP_NAME, tag='notes',
        ))
        self.set_content(self._nav_view)

    def _setup_key_controller(self):
        key_ctrl = Gtk.EventControllerKey()
        key_ctrl.connect('key-pressed', self._on_key_pressed)
        self._note_entry.add_controller(key_ctrl)

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape:
            self._add_toggle.set_active(False)
            return True
        return False

    # --- Add form ---

    def show_add_form(self):
        self._nav_view.pop_to_tag('notes')
        self._add_toggle.set_active(True)

    def _on_add_toggled(self, btn):
        active = btn.get_active()
        self._form_revealer.set_reveal_child(active)
        if active:
            self._note_entry.grab_focus()
        else:
            self._note_entry.set_text('')

    def _on_save_clicked(self, widget):
        note = self.store.add(self._note_entry.get_text())
        if note is None:
            # Blank submission: keep the form open
            self._note_entry.grab_focus()
            return
        self._note_entry.set_text('')
        self._add_toggle.set_active(False)
        self._app.notify_changed()

    # --- Detail ---

    def _on_row_activated(self, list_box, row):
        if isinstance(row, NoteRow):
            self._show_detail(row.note_id)

    def _on_latest_clicked(self, btn):
        note = self.store.last()
        if note is not None:
            self._show_detail(note.id)

    def _show_detail(self, note_id):
        self._nav_view.push(DetailPage(self.store.get_by_id(note_id)))

    # --- Edit ---

    def _on_edit_requested(self, row, note_id):
        draft = self.store.begin_edit(note_id)
        if draft is None:
            self._show_toast('Note not found')
            return

        entry = Gtk.Entry(text=draft, activates_default=True)
        dialog = Adw.AlertDialog(heading='Edit Note', extra_child=entry)
        dialog.add_response('cancel', 'Cancel')
        dialog.add_response('save', 'Save')
        dialog.set_response_appearance('save', Adw.ResponseAppearance.SUGGESTED)
        dialog.set_default_response('save')
        dialog.set_close_response('cancel')
        entry.connect(
            'changed',
            lambda e: dialog.set_response_enabled('save', not is_blank(e.get_text())),
        )
        dialog.connect('response', self._on_edit_response, entry)
        dialog.present(self)

    def _on_edit_response(self, dialog, response, entry):
        if response != 'save':
            self.store.cancel_edit()
            return
        outcome = self.store.commit_edit(entry.get_text())
        if outcome is Outcome.BLANK_INPUT:
            # Blank text is rejected; nothing changes
            self.store.cancel_edit()
            self._show_toast('Note text cannot be empty')
        elif outcome is Outcome.NOT_FOUND:
            self._show_toast('Note not found')
        elif outcome:
            self._app.notify_changed()

    # --- Delete ---

    def _on_delete_requested(self, row, note_id):
        if self.store.delete_by_id(note_id):
            self._app.notify_changed()
            self._show_toast('Note deleted')
        else:
            self._show_toast('Note not found')

    def confirm_clear_all(self):
        if self.store.is_empty:
            return
        dialog = Adw.AlertDialog(
            heading='Clear All Notes?',
            body='Every note will be deleted. This action cannot be undone.',
        )
        dialog.add_response('cancel', 'Cancel')
        dialog.add_response('clear', 'Clear All')
        dialog.set_response_appearance('clear', Adw.ResponseAppearance.DESTRUCTIVE)
        dialog.connect('response', self._on_clear_confirmed)
        dialog.present(self)

    def _on_clear_confirmed(self, dialog, response):
        if response == 'clear':
            self.store.clear()
            self._app.notify_changed()

    # --- Refresh ---

    def _on_notes_changed(self, app):
        self._refresh_notes()
        if not self.store.persistent and not self._warned_in_memory:
            self._warned_in_memory = True
            self._show_toast('Notes can no longer be saved and will be lost on exit')

    def _refresh_notes(self):
        child = self._notes_list.get_first_child()
        while child:
            next_child = child.get_next_sibling()
            self._notes_list.remove(child)
            child = next_child

        count = len(self.store)
        self._count_label.set_label(f'Your Notes ({count})')
        self._latest_btn.set_sensitive(count > 0)
        self._clear_btn.set_sensitive(count > 0)

        if not count:
            self._notes_stack.set_visible_child_name('empty')
            return

        self._notes_stack.set_visible_child_name('list')
        for position, note in enumerate(self.store.list(), start=1):
            row = NoteRow(note, position)
            row.connect('edit-requested', self._on_edit_requested)
            row.connect('delete-requested', self._on_delete_requested)
            self._notes_list.append(row)

    def _show_toast(self, message):
        self._toast_overlay.add_toast(Adw.Toast(title=message, timeout=3))
