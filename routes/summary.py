"""
routes/summary.py — Profile summary, export and import.

Provides:
- GET  /summary               — Read-only tables of both sheets
- GET  /summary/export/json   — Download tgrec-profile-YYYY-MM-DD.json
- GET  /summary/export/excel  — Download the same profile as .xlsx
- POST /summary/import        — Restore both sheets from an exported JSON file

Pending autosaves are flushed before anything is read, so the summary and
exports always match what the surveyor last typed.
"""

import json

from flask import Blueprint, render_template, request, redirect, url_for, flash, send_file, session

from routes.auth import require_login
from storage import get_store, get_current_user, load_sheet1, load_sheet2, has_sheet, StorageKeys
from utils.export import generate_json, generate_excel, parse_import

summary_bp = Blueprint('summary', __name__, url_prefix='/summary')
summary_bp.before_request(require_login)


def _stored_sheets(store):
    """(Sheet1Data or None, Sheet2Data or None), after flushing autosaves."""
    store.flush()
    sheet1 = load_sheet1(store) if has_sheet(store, StorageKeys.SHEET1) else None
    sheet2 = load_sheet2(store) if has_sheet(store, StorageKeys.SHEET2) else None
    return sheet1, sheet2


def _username(store):
    user = get_current_user(store)
    return user.username if user else None


@summary_bp.route('/')
def index():
    store = get_store()
    sheet1, sheet2 = _stored_sheets(store)
    return render_template(
        'summary.html',
        sheet1=sheet1,
        sheet2=sheet2,
        user=get_current_user(store),
    )


@summary_bp.route('/export/json')
def export_json():
    store = get_store()
    sheet1, sheet2 = _stored_sheets(store)
    buffer, filename = generate_json(sheet1, sheet2, _username(store))
    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype='application/json'
    )


@summary_bp.route('/export/excel')
def export_excel():
    store = get_store()
    sheet1, sheet2 = _stored_sheets(store)
    buffer, filename = generate_excel(sheet1, sheet2, _username(store))
    if not buffer:
        flash("No profile data to export.", 'warning')
        return redirect(url_for('summary.index'))

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )


@summary_bp.route('/import', methods=['POST'])
def import_json():
    """Replace the stored sheets with the ones in an uploaded export."""
    upload = request.files.get('file')
    if not upload or not upload.filename:
        flash("Choose a profile JSON file to import.", 'error')
        return redirect(url_for('summary.index'))

    try:
        document = json.load(upload.stream)
        sheet1, sheet2 = parse_import(document)
    except ValueError as e:
        flash(f"Import failed: {e}", 'error')
        return redirect(url_for('summary.index'))

    store = get_store()
    store.flush()
    saved = True
    if sheet1 is not None:
        saved = store.write(StorageKeys.SHEET1, sheet1.to_dict()) and saved
    if sheet2 is not None:
        saved = store.write(StorageKeys.SHEET2, sheet2.to_dict()) and saved
    # Row positions from before the import no longer name the same rows
    session.pop('expanded_sheet1', None)
    session.pop('expanded_sheet2', None)
    if saved:
        flash("Profile imported.", 'success')
    return redirect(url_for('summary.index'))
