"""
row_editor.py — Repeated-row editing for observations and horizons.

Records are identified by their position in the list. That makes two things
matter:
- every store operation returns a new list, so the owning page can re-persist
  the whole sequence after each edit;
- the set of expanded rows must be renumbered on delete, otherwise the
  expand/collapse state drifts onto the wrong records.

Store functions (append, replace_at, remove_at) and the view-state helpers
(remap_expanded, toggle_expanded) are pure. RowEditor ties them together for
one editor instance.
"""

from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Set

from models import parse_int


# ========================================
# Record store
# ========================================

def append(records, record):
    """New list with record at the end."""
    return list(records) + [record]


def replace_at(records, position, field_name, value):
    """New list where one field of records[position] is replaced.

    Raises:
        IndexError: position is not a current row.
        KeyError: field_name is not a field of that record type.
    """
    if not 0 <= position < len(records):
        raise IndexError(f"row {position} out of range (0..{len(records) - 1})")
    current = records[position]
    if field_name not in current.field_names():
        raise KeyError(f"{type(current).__name__} has no field {field_name!r}")
    if field_name in current.NUMERIC_FIELDS:
        value = parse_int(value)
    updated = list(records)
    updated[position] = replace(current, **{field_name: value})
    return updated


def remove_at(records, position):
    """New list without records[position]."""
    if not 0 <= position < len(records):
        raise IndexError(f"row {position} out of range (0..{len(records) - 1})")
    return [r for i, r in enumerate(records) if i != position]


# ========================================
# View state
# ========================================

def remap_expanded(expanded: Iterable[int], deleted: int) -> Set[int]:
    """Renumber expanded positions after the row at `deleted` is removed.

    Positions below stay, positions above shift down by one, the deleted
    position itself is dropped.
    """
    remapped = set()
    for position in expanded:
        if position < deleted:
            remapped.add(position)
        elif position > deleted:
            remapped.add(position - 1)
    return remapped


def toggle_expanded(expanded: Iterable[int], position: int) -> Set[int]:
    result = set(expanded)
    if position in result:
        result.discard(position)
    else:
        result.add(position)
    return result


# ========================================
# Row lifecycle
# ========================================

class RowEditor:
    """Add / duplicate / delete / toggle / update rows of one record type.

    Args:
        records: current rows (not mutated).
        record_type: Observation or Horizon; called with no arguments for an
            empty row.
        min_rows: delete refuses to go below this many rows.
        expanded: positions currently expanded; defaults to the first row.
        on_change: called with the new row list after every mutation.
    """

    def __init__(self, records, record_type, min_rows=0,
                 expanded: Optional[Iterable[int]] = None,
                 on_change: Optional[Callable[[List], None]] = None):
        self._records = list(records)
        self.record_type = record_type
        self.min_rows = min_rows
        self.expanded = set(expanded) if expanded is not None else {0}
        self._on_change = on_change

    @property
    def records(self):
        return list(self._records)

    def get_records(self):
        return self.records

    def __len__(self):
        return len(self._records)

    def _commit(self, records):
        self._records = records
        if self._on_change:
            self._on_change(self.records)

    def add(self):
        """Append an empty row and expand it. Returns its position."""
        self._commit(append(self._records, self.record_type()))
        position = len(self._records) - 1
        self.expanded.add(position)
        return position

    def duplicate_last(self):
        """Append a copy of the last row with identity fields cleared.

        Returns the new position, or None when there is nothing to copy.
        """
        if not self._records:
            return None
        last = self._records[-1]
        cleared = {name: '' for name in last.IDENTITY_FIELDS}
        self._commit(append(self._records, replace(last, **cleared)))
        position = len(self._records) - 1
        self.expanded.add(position)
        return position

    def can_delete(self):
        return len(self._records) > self.min_rows

    def delete(self, position):
        """Remove a row unless that would break min_rows. Returns True if removed."""
        if not self.can_delete():
            return False
        self._commit(remove_at(self._records, position))
        self.expanded = remap_expanded(self.expanded, position)
        return True

    def toggle(self, position):
        self.expanded = toggle_expanded(self.expanded, position)
        return position in self.expanded

    def update(self, position, field_name, value):
        self._commit(replace_at(self._records, position, field_name, value))

    def is_expanded(self, position):
        return position in self.expanded
