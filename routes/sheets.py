"""
routes/sheets.py — Sheet-1 and Sheet-2 form pages and their row editors.

Provides:
- GET  /sheet1                        — Site header + observation rows
- POST /sheet1/header                 — Save header fields
- POST /sheet1/next                   — Save and continue to Sheet-2
- GET  /sheet2                        — Horizon rows
- POST /sheet2/finish                 — Check horizons, continue to the summary
- POST /<sheet>/rows/add              — Append an empty row
- POST /<sheet>/rows/copy-last        — Append a copy of the last row
- POST /<sheet>/rows/<i>              — Update fields of row i
- POST /<sheet>/rows/<i>/delete       — Delete row i
- POST /<sheet>/rows/<i>/toggle       — Expand/collapse row i
- POST /<sheet>/save-draft            — Write pending autosaves now

Every edit re-persists the whole sheet through the debounced autosave.
Expanded rows are view state: kept in the Flask session, never stored.
"""

from dataclasses import replace

from flask import Blueprint, render_template, request, redirect, url_for, flash, session, abort

from models import Observation, Horizon, Sheet1Header, parse_int
from row_editor import RowEditor
from routes.auth import require_login
from storage import get_store, load_sheet1, load_sheet2, StorageKeys
from utils.validators import validate_horizons, INCOMPLETE, OVERLAP
import options

sheets_bp = Blueprint('sheets', __name__)
sheets_bp.before_request(require_login)

SHEET_PATTERN = '<any(sheet1, sheet2):sheet>'

# sheet -> (storage key, loader, rows attribute, record type, minimum rows)
EDITORS = {
    'sheet1': (StorageKeys.SHEET1, load_sheet1, 'observations', Observation, 1),
    'sheet2': (StorageKeys.SHEET2, load_sheet2, 'horizons', Horizon, 0),
}

ROW_NOUNS = {'sheet1': 'observation', 'sheet2': 'horizon'}


# ========================================
# Helpers
# ========================================

def _open_editor(sheet):
    """Load a sheet document and wrap its rows in a RowEditor.

    Returns:
        (document, editor). Editor changes are written back into the
        document and scheduled for autosave.
    """
    key, loader, rows_attr, record_type, min_rows = EDITORS[sheet]
    store = get_store()
    document = loader(store)

    def persist(records):
        setattr(document, rows_attr, records)
        store.schedule_write(key, document.to_dict())

    editor = RowEditor(
        getattr(document, rows_attr),
        record_type,
        min_rows=min_rows,
        expanded=session.get(f'expanded_{sheet}'),
        on_change=persist,
    )
    return document, editor


def _remember_expanded(sheet, editor):
    session[f'expanded_{sheet}'] = sorted(editor.expanded)


def _back_to(sheet, position=None):
    anchor = f'row-{position}' if position is not None else None
    return redirect(url_for(f'sheets.{sheet}', _anchor=anchor))


def _check_position(editor, position):
    if not 0 <= position < len(editor):
        abort(404)


# ========================================
# Pages
# ========================================

@sheets_bp.route('/sheet1')
def sheet1():
    """Shallow pit / auger bore examination."""
    document, editor = _open_editor('sheet1')
    return render_template(
        'sheet1.html',
        header=document.header,
        rows=editor.records,
        expanded=editor.expanded,
        can_delete=editor.can_delete(),
        header_fields=options.HEADER_FIELDS,
        row_fields=options.OBSERVATION_FIELDS,
        save_status=get_store().save_status(StorageKeys.SHEET1),
    )


@sheets_bp.route('/sheet2')
def sheet2():
    """Morphological description, horizon by horizon."""
    document, editor = _open_editor('sheet2')
    return render_template(
        'sheet2.html',
        rows=editor.records,
        expanded=editor.expanded,
        can_delete=editor.can_delete(),
        row_fields=options.HORIZON_FIELDS,
        save_status=get_store().save_status(StorageKeys.SHEET2),
    )


@sheets_bp.route('/sheet1/header', methods=['POST'])
def sheet1_header():
    """Save the site header. Fields missing from the form are left unchanged."""
    store = get_store()
    document = load_sheet1(store)
    changes = {}
    for name in Sheet1Header.field_names():
        if name not in request.form:
            continue
        value = request.form.get(name, '')
        changes[name] = parse_int(value) if name in Sheet1Header.NUMERIC_FIELDS else value.strip()
    document.header = replace(document.header, **changes)
    store.schedule_write(StorageKeys.SHEET1, document.to_dict())
    return _back_to('sheet1')


# ========================================
# Row actions
# ========================================

@sheets_bp.route(f'/{SHEET_PATTERN}/rows/add', methods=['POST'])
def row_add(sheet):
    _, editor = _open_editor(sheet)
    position = editor.add()
    _remember_expanded(sheet, editor)
    return _back_to(sheet, position)


@sheets_bp.route(f'/{SHEET_PATTERN}/rows/copy-last', methods=['POST'])
def row_copy_last(sheet):
    _, editor = _open_editor(sheet)
    position = editor.duplicate_last()
    if position is None:
        flash(f"Add a first {ROW_NOUNS[sheet]} before copying.", 'warning')
        return _back_to(sheet)
    _remember_expanded(sheet, editor)
    return _back_to(sheet, position)


@sheets_bp.route(f'/{SHEET_PATTERN}/rows/<int:position>', methods=['POST'])
def row_update(sheet, position):
    """Update the submitted fields of one row."""
    _, editor = _open_editor(sheet)
    _check_position(editor, position)
    for name in editor.record_type.field_names():
        if name in request.form:
            value = request.form.get(name, '')
            editor.update(position, name, value if name in editor.record_type.NUMERIC_FIELDS else value.strip())
    return _back_to(sheet, position)


@sheets_bp.route(f'/{SHEET_PATTERN}/rows/<int:position>/delete', methods=['POST'])
def row_delete(sheet, position):
    _, editor = _open_editor(sheet)
    _check_position(editor, position)
    if not editor.delete(position):
        flash(f"At least one {ROW_NOUNS[sheet]} is required.", 'warning')
        return _back_to(sheet, position)
    _remember_expanded(sheet, editor)
    return _back_to(sheet)


@sheets_bp.route(f'/{SHEET_PATTERN}/rows/<int:position>/toggle', methods=['POST'])
def row_toggle(sheet, position):
    _, editor = _open_editor(sheet)
    _check_position(editor, position)
    editor.toggle(position)
    _remember_expanded(sheet, editor)
    return _back_to(sheet, position)


# ========================================
# Sticky actions
# ========================================

@sheets_bp.route(f'/{SHEET_PATTERN}/save-draft', methods=['POST'])
def save_draft(sheet):
    get_store().flush(EDITORS[sheet][0])
    flash("Draft Saved: your progress has been saved locally", 'success')
    return _back_to(sheet)


@sheets_bp.route('/sheet1/next', methods=['POST'])
def sheet1_next():
    get_store().flush(StorageKeys.SHEET1)
    return redirect(url_for('sheets.sheet2'))


@sheets_bp.route('/sheet2/finish', methods=['POST'])
def sheet2_finish():
    """Check the horizons and move on to the summary.

    Incomplete horizons keep the user on Sheet-2. Overlapping depth ranges
    are reported but do not stop the profile from being finished.
    """
    store = get_store()
    store.flush(StorageKeys.SHEET2)
    document = load_sheet2(store)

    result = validate_horizons(document.horizons)
    if result.kind == INCOMPLETE:
        flash(result.message, 'error')
        return _back_to('sheet2', result.positions[0])
    if result.kind == OVERLAP:
        flash(f"Check depths: {result.message}", 'warning')

    flash("Profile Complete: soil profile data saved successfully ✓", 'success')
    return redirect(url_for('summary.index'))
