"""
utils/export.py — Profile export (JSON and Excel) and JSON re-import.

JSON document: {sheet1, sheet2, exportedAt, user}, pretty-printed, offered as
tgrec-profile-YYYY-MM-DD.json. `user` is left out when nobody is signed in.
Excel workbook: one styled sheet per form (site header + observations,
horizons), for reading the profile on a desktop.
"""

import json
from datetime import datetime, timezone
from io import BytesIO

from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from models import Observation, Horizon, Sheet1Data, Sheet2Data, Sheet1Header


HEADER_FONT = Font(name='Calibri', bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='795548', end_color='795548', fill_type='solid')
HEADER_ALIGNMENT = Alignment(horizontal='center', vertical='center', wrap_text=True)
HEADER_BORDER = Border(
    bottom=Side(style='thin', color='4E342E'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_BORDER = Border(
    bottom=Side(style='thin', color='E2E8F0'),
    right=Side(style='thin', color='E2E8F0'),
)
LABEL_FONT = Font(bold=True)


def export_filename(now=None, extension='json'):
    """tgrec-profile-<UTC date>.<extension>"""
    now = now or datetime.now(timezone.utc)
    return f"tgrec-profile-{now.astimezone(timezone.utc).strftime('%Y-%m-%d')}.{extension}"


def build_export_document(sheet1, sheet2, username=None, now=None):
    """Assemble the export document from the stored sheets (either may be None)."""
    now = now or datetime.now(timezone.utc)
    document = {
        'sheet1': sheet1.to_dict() if sheet1 is not None else None,
        'sheet2': sheet2.to_dict() if sheet2 is not None else None,
        'exportedAt': now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
    }
    if username is not None:
        document['user'] = username
    return document


def generate_json(sheet1, sheet2, username=None, now=None):
    """Returns (BytesIO buffer, filename)."""
    now = now or datetime.now(timezone.utc)
    document = build_export_document(sheet1, sheet2, username, now)
    buffer = BytesIO(json.dumps(document, ensure_ascii=False, indent=2).encode('utf-8'))
    buffer.seek(0)
    return buffer, export_filename(now)


def parse_import(document):
    """Read back an exported document.

    Returns:
        (Sheet1Data or None, Sheet2Data or None)

    Raises:
        ValueError: the document is not an export of this application.
    """
    if not isinstance(document, dict) or not ({'sheet1', 'sheet2'} & document.keys()):
        raise ValueError("Not a TGREC profile export: expected 'sheet1' and/or 'sheet2'.")

    sheet1_raw = document.get('sheet1')
    sheet2_raw = document.get('sheet2')
    for name, raw in (('sheet1', sheet1_raw), ('sheet2', sheet2_raw)):
        if raw is not None and not isinstance(raw, dict):
            raise ValueError(f"'{name}' must be an object.")

    sheet1 = Sheet1Data.from_dict(sheet1_raw) if sheet1_raw is not None else None
    sheet2 = Sheet2Data.from_dict(sheet2_raw) if sheet2_raw is not None else None
    return sheet1, sheet2


def _write_header_row(ws, columns, row=1):
    for col_idx, col_name in enumerate(columns, 1):
        cell = ws.cell(row=row, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER


def _write_records(ws, record_type, records, start_row):
    """Column header from the JSON keys, then one row per record."""
    keys = list(record_type().to_dict().keys())
    _write_header_row(ws, keys, row=start_row)
    row_idx = start_row + 1
    for record in records:
        for col_idx, value in enumerate(record.to_dict().values(), 1):
            ws.cell(row=row_idx, column=col_idx, value=value).border = CELL_BORDER
        row_idx += 1
    for col_idx in range(1, len(keys) + 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = 16
    return row_idx


def _build_sheet1(ws, sheet1):
    """Site header as label/value pairs, then the observations table."""
    header = sheet1.header if sheet1 else Sheet1Header()
    _write_header_row(ws, ['Field', 'Value'])
    row_idx = 2
    for key, value in header.to_dict().items():
        ws.cell(row=row_idx, column=1, value=key).font = LABEL_FONT
        ws.cell(row=row_idx, column=2, value=value).border = CELL_BORDER
        row_idx += 1

    observations = sheet1.observations if sheet1 else []
    _write_records(ws, Observation, observations, start_row=row_idx + 1)
    ws.column_dimensions['A'].width = 20
    ws.column_dimensions['B'].width = 24


def _build_sheet2(ws, sheet2):
    horizons = sheet2.horizons if sheet2 else []
    _write_records(ws, Horizon, horizons, start_row=1)
    ws.freeze_panes = 'B2'


def generate_excel(sheet1, sheet2, username=None, now=None):
    """Generate a workbook with a Sheet-1 and a Sheet-2 tab.

    Returns:
        (BytesIO buffer, filename) on success, (None, None) when both sheets are empty.
    """
    import openpyxl

    if sheet1 is None and sheet2 is None:
        return None, None

    now = now or datetime.now(timezone.utc)
    wb = openpyxl.Workbook()
    ws1 = wb.active
    ws1.title = 'Sheet-1'
    _build_sheet1(ws1, sheet1)

    ws2 = wb.create_sheet(title='Sheet-2')
    _build_sheet2(ws2, sheet2)

    if username:
        wb.properties.creator = username

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer, export_filename(now, extension='xlsx')
