"""
tests/test_row_editor.py — Record store and row lifecycle.

Covers:
- Pure store functions never mutate their input
- Add / duplicate-last / delete / toggle / update on observations and horizons
- Expanded-row renumbering after delete
- Minimum-row policy (Sheet-1 keeps one observation, Sheet-2 may be emptied)
"""

import pytest

from models import Observation, Horizon
from row_editor import (
    RowEditor, append, replace_at, remove_at, remap_expanded, toggle_expanded
)


def _horizon(label, top, bottom, **extra):
    return Horizon(label=label, depth_from=top, depth_to=bottom, **extra)


# ========================================
# Store functions
# ========================================

class TestStore:

    def test_append_returns_new_list(self):
        rows = [Observation()]
        result = append(rows, Observation(depth_from=10))
        assert len(result) == 2
        assert len(rows) == 1
        assert result[-1].depth_from == 10

    def test_replace_at_updates_one_field(self):
        rows = [_horizon('Ap', 0, 15), _horizon('Bt', 15, 40)]
        result = replace_at(rows, 1, 'texture', 'SCL')
        assert result[1].texture == 'SCL'
        assert result[1].label == 'Bt'
        assert rows[1].texture == ''
        assert result[0] is rows[0]

    def test_replace_at_parses_numeric_fields(self):
        rows = [Observation()]
        assert replace_at(rows, 0, 'depth_to', '25')[0].depth_to == 25
        assert replace_at(rows, 0, 'depth_to', 'deep')[0].depth_to == 0

    def test_replace_at_unknown_field(self):
        with pytest.raises(KeyError):
            replace_at([Observation()], 0, 'label', 'Ap')

    def test_replace_at_out_of_range(self):
        with pytest.raises(IndexError):
            replace_at([Observation()], 1, 'colour', '10YR 3/2')

    def test_remove_at(self):
        rows = [_horizon('A', 0, 10), _horizon('B', 10, 20), _horizon('C', 20, 30)]
        result = remove_at(rows, 1)
        assert [h.label for h in result] == ['A', 'C']
        assert len(rows) == 3

    def test_remove_at_out_of_range(self):
        with pytest.raises(IndexError):
            remove_at([], 0)


# ========================================
# View state helpers
# ========================================

class TestExpandedState:

    def test_remap_shifts_positions_above_deleted(self):
        assert remap_expanded({0, 2, 3}, 1) == {0, 1, 2}

    def test_remap_drops_deleted_position(self):
        assert remap_expanded({1, 4}, 1) == {3}

    def test_remap_keeps_logical_rows(self):
        """Expanded rows after a delete are the same records as before, minus the deleted one."""
        rows = ['A', 'B', 'C', 'D', 'E']
        expanded = {0, 2, 4}
        deleted = 2
        before = {rows[p] for p in expanded} - {rows[deleted]}
        remaining = rows[:deleted] + rows[deleted + 1:]
        after = {remaining[p] for p in remap_expanded(expanded, deleted)}
        assert after == before

    def test_toggle_twice_is_identity(self):
        start = {0, 3}
        assert toggle_expanded(toggle_expanded(start, 2), 2) == start
        assert toggle_expanded(toggle_expanded(start, 3), 3) == start


# ========================================
# RowEditor
# ========================================

class TestRowEditor:

    def test_initial_expanded_is_first_row(self):
        editor = RowEditor([], Observation)
        assert editor.expanded == {0}

    def test_add_appends_defaults_and_expands(self):
        editor = RowEditor([Observation(depth_from=0, depth_to=10)], Observation, expanded=set())
        position = editor.add()
        assert position == 1
        assert len(editor) == 2
        assert editor.records[1] == Observation()
        assert editor.records[1].rock_fragments == '0–5%'
        assert editor.expanded == {1}

    def test_add_leaves_other_expansion_alone(self):
        editor = RowEditor([Horizon(), Horizon()], Horizon, expanded={0})
        editor.add()
        assert editor.expanded == {0, 2}

    def test_duplicate_last_clears_identity_fields(self):
        last = _horizon('Bt1', 20, 45, texture='C', colour='7.5YR 4/4', sample_no='S-2')
        editor = RowEditor([_horizon('Ap', 0, 20), last], Horizon, expanded=set())
        position = editor.duplicate_last()
        assert position == 2
        copy = editor.records[2]
        assert copy.label == ''
        assert copy.sample_no == ''
        assert copy.texture == 'C'
        assert copy.colour == '7.5YR 4/4'
        assert (copy.depth_from, copy.depth_to) == (20, 45)
        assert editor.expanded == {2}

    def test_duplicate_last_observation_is_verbatim(self):
        obs = Observation(depth_from=0, depth_to=30, texture='SL', reaction='Neutral')
        editor = RowEditor([obs], Observation)
        editor.duplicate_last()
        assert editor.records[1] == obs

    def test_duplicate_last_on_empty_is_noop(self):
        changes = []
        editor = RowEditor([], Horizon, on_change=changes.append)
        assert editor.duplicate_last() is None
        assert len(editor) == 0
        assert changes == []

    def test_delete_remaps_expanded(self):
        rows = [_horizon(label, i * 10, i * 10 + 10) for i, label in enumerate('ABCD')]
        editor = RowEditor(rows, Horizon, expanded={0, 1, 3})
        assert editor.delete(1) is True
        assert [h.label for h in editor.records] == ['A', 'C', 'D']
        assert editor.expanded == {0, 2}
        assert editor.records[2].label == 'D'

    def test_observation_editor_keeps_last_row(self):
        editor = RowEditor([Observation()], Observation, min_rows=1)
        assert editor.can_delete() is False
        assert editor.delete(0) is False
        assert len(editor) == 1

    def test_horizon_editor_can_be_emptied(self):
        editor = RowEditor([Horizon()], Horizon, min_rows=0)
        assert editor.delete(0) is True
        assert editor.records == []
        assert editor.expanded == set()

    def test_toggle(self):
        editor = RowEditor([Horizon(), Horizon()], Horizon, expanded={0})
        assert editor.toggle(1) is True
        assert editor.toggle(0) is False
        assert editor.expanded == {1}

    def test_update_parses_numbers(self):
        editor = RowEditor([Horizon()], Horizon)
        editor.update(0, 'depth_from', '12.5')
        editor.update(0, 'depth_to', '')
        editor.update(0, 'label', 'Ap')
        horizon = editor.records[0]
        assert horizon.depth_from == 12
        assert horizon.depth_to == 0
        assert horizon.label == 'Ap'

    def test_on_change_receives_every_new_sequence(self):
        seen = []
        editor = RowEditor([], Observation, min_rows=1, on_change=seen.append)
        editor.add()
        editor.update(0, 'colour', '10YR 4/3')
        editor.duplicate_last()
        editor.delete(0)
        assert [len(rows) for rows in seen] == [1, 1, 2, 1]
        assert seen[1][0].colour == '10YR 4/3'

    def test_view_state_changes_do_not_notify(self):
        seen = []
        editor = RowEditor([Horizon()], Horizon, on_change=seen.append)
        editor.toggle(0)
        assert seen == []
