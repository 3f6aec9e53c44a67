# SPDX-License-Identifier: GPL-3.0-or-later

import pytest

from conftest import FIXED_TIME, FailingStorage, make_store, texts
from simplenotes.note_store import NoteStore, Outcome
from simplenotes.persistence import NotePersistence
from simplenotes.storage import MemoryStorage


class TestAdd:

    def test_add_to_empty_store(self):
        store = make_store()
        note = store.add('Buy milk')
        assert texts(store) == ['Buy milk']
        assert store.list() == [note]

    def test_add_trims_text(self):
        store = make_store('A')
        store.add('  Call mum \n')
        assert len(store) == 2
        assert store.list()[-1].text == 'Call mum'

    @pytest.mark.parametrize('text', ['', '   ', '\t\n'])
    def test_blank_add_is_ignored(self, text):
        store = make_store('A')
        assert store.add(text) is None
        assert texts(store) == ['A']

    def test_duplicate_text_allowed(self):
        store = make_store('A', 'A')
        assert texts(store) == ['A', 'A']
        first, second = store.list()
        assert first.id != second.id

    def test_timestamp_attached(self):
        store = make_store('A')
        assert store.get(0).timestamp == FIXED_TIME.strftime('%d %B %Y %H:%M')

    def test_timestamps_disabled(self):
        store = make_store('A', use_timestamps=False)
        assert store.get(0).timestamp is None


class TestIndexAccess:

    def test_get(self):
        store = make_store('A', 'B')
        assert store.get(1).text == 'B'

    @pytest.mark.parametrize('index', [-1, 2, 99])
    def test_get_out_of_range(self, index):
        store = make_store('A', 'B')
        assert store.get(index) is None

    def test_get_on_empty(self):
        assert make_store().get(0) is None

    def test_last(self):
        store = make_store('A', 'B')
        assert store.last().text == 'B'
        assert make_store().last() is None

    def test_list_is_a_copy(self):
        store = make_store('A')
        notes = store.list()
        notes.clear()
        assert texts(store) == ['A']


class TestUpdate:

    def test_update(self):
        store = make_store('A', 'B')
        original = store.get(1)
        assert store.update(1, ' X ') is Outcome.OK
        assert texts(store) == ['A', 'X']
        assert store.get(1).id == original.id

    def test_update_keeps_creation_timestamp(self):
        times = iter([FIXED_TIME, FIXED_TIME.replace(hour=18)])
        store = NoteStore(clock=lambda: next(times))
        store.add('A')
        created = store.get(0).timestamp
        store.update(0, 'B')
        assert store.get(0).timestamp == created

    def test_update_out_of_range(self):
        store = make_store('A')
        outcome = store.update(5, 'X')
        assert outcome is Outcome.INDEX_OUT_OF_RANGE
        assert not outcome
        assert texts(store) == ['A']

    def test_update_negative_index(self):
        store = make_store('A')
        assert store.update(-1, 'X') is Outcome.INDEX_OUT_OF_RANGE
        assert texts(store) == ['A']

    def test_update_blank(self):
        store = make_store('A')
        assert store.update(0, '  ') is Outcome.BLANK_INPUT
        assert texts(store) == ['A']


class TestDelete:

    def test_delete_middle(self):
        store = make_store('A', 'B', 'C')
        assert store.delete_at(1) is Outcome.OK
        assert texts(store) == ['A', 'C']

    def test_delete_shifts_following_notes(self):
        store = make_store('A', 'B', 'C', 'D')
        before = store.list()
        store.delete_at(1)
        after = store.list()
        assert after[0] == before[0]
        assert after[1:] == before[2:]

    @pytest.mark.parametrize('index', [-1, 3, 10])
    def test_delete_out_of_range(self, index):
        store = make_store('A', 'B', 'C')
        assert store.delete_at(index) is Outcome.INDEX_OUT_OF_RANGE
        assert texts(store) == ['A', 'B', 'C']

    def test_clear(self):
        store = make_store('A', 'B')
        store.clear()
        assert len(store) == 0
        assert store.is_empty

    def test_clear_empty(self):
        store = make_store()
        store.clear()
        assert store.list() == []


class TestById:

    def test_update_by_id(self):
        store = make_store('A', 'B')
        note_id = store.get(0).id
        store.delete_at(0)
        store.add('C')
        b_id = store.get(0).id
        assert store.update_by_id(b_id, 'B2') is Outcome.OK
        assert texts(store) == ['B2', 'C']
        assert store.update_by_id(note_id, 'X') is Outcome.NOT_FOUND

    def test_delete_by_id(self):
        store = make_store('A', 'B', 'C')
        c_id = store.get(2).id
        store.delete_at(0)
        assert store.delete_by_id(c_id) is Outcome.OK
        assert texts(store) == ['B']
        assert store.delete_by_id(c_id) is Outcome.NOT_FOUND

    def test_index_of(self):
        store = make_store('A', 'B')
        assert store.index_of(store.get(1).id) == 1
        assert store.index_of('missing') is None
        assert store.get_by_id('missing') is None


class TestEditCommands:

    def test_commit_edit(self):
        store = make_store('A', 'B')
        note_id = store.get(1).id
        assert store.begin_edit(note_id) == 'B'
        assert store.editing_id == note_id
        assert store.commit_edit('B2') is Outcome.OK
        assert texts(store) == ['A', 'B2']
        assert store.editing_id is None

    def test_cancel_edit(self):
        store = make_store('A')
        store.begin_edit(store.get(0).id)
        store.cancel_edit()
        assert store.editing_id is None
        assert store.commit_edit('X') is Outcome.NO_EDIT
        assert texts(store) == ['A']

    def test_blank_commit_keeps_edit_open(self):
        store = make_store('A')
        note_id = store.get(0).id
        store.begin_edit(note_id)
        assert store.commit_edit(' ') is Outcome.BLANK_INPUT
        assert store.editing_id == note_id
        assert store.commit_edit('A2') is Outcome.OK
        assert texts(store) == ['A2']

    def test_begin_edit_unknown_note(self):
        store = make_store('A')
        assert store.begin_edit('missing') is None
        assert store.editing_id is None

    def test_edit_follows_note_after_reorder(self):
        store = make_store('A', 'B', 'C')
        store.begin_edit(store.get(2).id)
        store.delete_at(0)
        assert store.commit_edit('C2') is Outcome.OK
        assert texts(store) == ['B', 'C2']

    def test_deleting_edited_note_ends_edit(self):
        store = make_store('A', 'B')
        store.begin_edit(store.get(1).id)
        store.delete_at(1)
        assert store.editing_id is None
        assert store.commit_edit('X') is Outcome.NO_EDIT

    def test_clear_ends_edit(self):
        store = make_store('A')
        store.begin_edit(store.get(0).id)
        store.clear()
        assert store.editing_id is None


class TestPersistence:

    def test_hydrates_on_start(self, storage):
        first = NoteStore(NotePersistence(storage))
        first.add('A')
        first.add('B')

        restarted = NoteStore(NotePersistence(storage))
        assert texts(restarted) == ['A', 'B']
        assert restarted.list() == first.list()

    def test_every_mutation_is_saved(self, store, storage):
        store.add('A')
        store.add('B')
        store.update(0, 'A2')
        store.delete_at(1)
        assert texts(NoteStore(NotePersistence(storage))) == ['A2']
        store.clear()
        assert NoteStore(NotePersistence(storage)).list() == []

    def test_no_op_does_not_write(self, storage):
        store = NoteStore(NotePersistence(storage))
        store.add('   ')
        store.delete_at(3)
        assert storage.get_string('notes_list') is None

    def test_storage_failure_degrades_to_memory(self):
        storage = FailingStorage()
        store = NoteStore(NotePersistence(storage))
        assert store.persistent

        assert store.add('A') is not None
        assert not store.persistent
        store.add('B')
        assert texts(store) == ['A', 'B']
        assert storage.write_attempts == 1

    def test_close_releases_storage(self):
        storage = MemoryStorage()
        store = NoteStore(NotePersistence(storage))
        store.close()
        assert not store.persistent
        store.add('A')
        assert texts(store) == ['A']
